"""Shared FastAPI dependency factories."""

from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from assethub.core.config import settings
from assethub.db import get_db
from assethub.domain import TenantRequestContext
from assethub.domain.labels import LabelTarget
from assethub.resources import ResourceFacade
from assethub.services import (
    AssetService,
    AssetTypeService,
    DeviceElementSchemaService,
    DeviceTypeService,
    LabelGenerationService,
    TenantService,
)
from assethub.services.marshal import (
    AssetMarshalHelper,
    AssetTypeMarshalHelper,
    DeviceElementSchemaMarshalHelper,
    DeviceTypeMarshalHelper,
)


def get_session(db: Session = Depends(get_db)) -> Session:
    """Expose the SQLAlchemy session (alias for clarity)."""
    return db


def get_tenant_service(session: Session = Depends(get_session)) -> TenantService:
    return TenantService(session)


def get_tenant_context(
    x_tenant_token: Optional[str] = Header(None),
    tenants: TenantService = Depends(get_tenant_service),
) -> TenantRequestContext:
    """Select the tenant from ``X-Tenant-Token``, falling back to the default tenant."""
    token = x_tenant_token or settings.default_tenant_token
    return TenantRequestContext(tenant=tenants.require_by_token(token))


def get_label_generation(session: Session = Depends(get_session)) -> LabelGenerationService:
    return LabelGenerationService(session)


def get_asset_resource(
    session: Session = Depends(get_session),
    labels: LabelGenerationService = Depends(get_label_generation),
) -> ResourceFacade:
    asset_types = AssetTypeService(session)
    return ResourceFacade(
        AssetService(session, asset_types),
        lambda context, include: AssetMarshalHelper(asset_types, context, include),
        labels=labels,
        label_target=LabelTarget.ASSET,
    )


def get_asset_type_resource(
    session: Session = Depends(get_session),
    labels: LabelGenerationService = Depends(get_label_generation),
) -> ResourceFacade:
    return ResourceFacade(
        AssetTypeService(session),
        AssetTypeMarshalHelper,
        labels=labels,
        label_target=LabelTarget.ASSET_TYPE,
    )


def get_device_type_resource(
    session: Session = Depends(get_session),
    labels: LabelGenerationService = Depends(get_label_generation),
) -> ResourceFacade:
    schemas = DeviceElementSchemaService(session)
    return ResourceFacade(
        DeviceTypeService(session, schemas),
        lambda context, include: DeviceTypeMarshalHelper(schemas, context, include),
        labels=labels,
        label_target=LabelTarget.DEVICE_TYPE,
    )


def get_device_element_schema_resource(
    session: Session = Depends(get_session),
) -> ResourceFacade:
    return ResourceFacade(DeviceElementSchemaService(session), DeviceElementSchemaMarshalHelper)
