"""Conversion of persisted entities into API response models.

Marshal helpers optionally embed a related entity (an asset's asset type, a
device type's element schema). The related lookup is a separate query made
only when asked for; if it fails the primary entity is still returned with
the related field left empty.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, TypeVar

from assethub.core.logging import LoggerAdapter, get_logger
from assethub.db import Asset, AssetType, DeviceElementSchema, DeviceType, Tenant
from assethub.domain.context import TenantRequestContext
from assethub.domain.exceptions import DomainError
from assethub.schemas.asset import AssetResponse
from assethub.schemas.asset_type import AssetTypeResponse
from assethub.schemas.device_type import DeviceElementSchemaResponse, DeviceTypeResponse
from assethub.schemas.tenant import TenantResponse

logger = get_logger(__name__)

TModel = TypeVar("TModel")
TView = TypeVar("TView")

BRANDING_FIELDS = ("image_url", "icon", "background_color", "foreground_color", "border_color")


def entity_fields(entity: Any) -> Dict[str, Any]:
    """Fields every management entity exposes."""
    return {
        "id": entity.id,
        "token": entity.token,
        "metadata": dict(entity.metadata_ or {}),
        "created_at": entity.created_at,
        "updated_at": entity.updated_at,
    }


def branding_fields(entity: Any) -> Dict[str, Any]:
    return {name: getattr(entity, name) for name in BRANDING_FIELDS}


class MarshalHelper(Generic[TModel, TView]):
    """Converts one entity kind; subclasses may embed a related entity."""

    def __init__(self, context: TenantRequestContext, include_related: bool = False) -> None:
        self.context = context
        self.include_related = include_related
        self.log = LoggerAdapter(logger, {"tenant": context.tenant_token})

    def convert(self, entity: TModel) -> TView:
        raise NotImplementedError

    def _lookup_related(self, lookup, entity_token: str, related_name: str):
        """Run a related-entity lookup, returning None instead of failing."""
        try:
            related = lookup()
        except DomainError as exc:
            self.log.warning(
                "Unable to resolve %s for %s: %s", related_name, entity_token, exc.message
            )
            return None
        if related is None:
            self.log.warning("Related %s missing for %s", related_name, entity_token)
        return related


class AssetTypeMarshalHelper(MarshalHelper[AssetType, AssetTypeResponse]):
    def convert(self, entity: AssetType) -> AssetTypeResponse:
        return AssetTypeResponse(
            **entity_fields(entity),
            **branding_fields(entity),
            name=entity.name,
            description=entity.description,
            asset_category=entity.asset_category,
        )


class AssetMarshalHelper(MarshalHelper[Asset, AssetResponse]):
    """Marshals assets, embedding the asset type when ``include_asset_type`` is set."""

    def __init__(
        self,
        asset_types,
        context: TenantRequestContext,
        include_asset_type: bool = False,
    ) -> None:
        super().__init__(context, include_related=include_asset_type)
        self.asset_types = asset_types
        self.asset_type_helper = AssetTypeMarshalHelper(context)

    @property
    def include_asset_type(self) -> bool:
        return self.include_related

    def convert(self, entity: Asset) -> AssetResponse:
        view = AssetResponse(
            **entity_fields(entity),
            **branding_fields(entity),
            name=entity.name,
            asset_type_id=entity.asset_type_id,
        )
        if self.include_asset_type:
            asset_type = self._lookup_related(
                lambda: self.asset_types.get_by_id(entity.asset_type_id, self.context),
                entity.token,
                "asset type",
            )
            if asset_type is not None:
                view.asset_type = self.asset_type_helper.convert(asset_type)
        return view


class DeviceElementSchemaMarshalHelper(
    MarshalHelper[DeviceElementSchema, DeviceElementSchemaResponse]
):
    def convert(self, entity: DeviceElementSchema) -> DeviceElementSchemaResponse:
        return DeviceElementSchemaResponse(
            **entity_fields(entity),
            name=entity.name,
            description=entity.description,
            device_slots=entity.device_slots or [],
            device_units=entity.device_units or [],
        )


class DeviceTypeMarshalHelper(MarshalHelper[DeviceType, DeviceTypeResponse]):
    """Marshals device types, embedding the element schema when requested."""

    def __init__(
        self,
        schemas,
        context: TenantRequestContext,
        include_device_element_schema: bool = False,
    ) -> None:
        super().__init__(context, include_related=include_device_element_schema)
        self.schemas = schemas
        self.schema_helper = DeviceElementSchemaMarshalHelper(context)

    def convert(self, entity: DeviceType) -> DeviceTypeResponse:
        view = DeviceTypeResponse(
            **entity_fields(entity),
            **branding_fields(entity),
            name=entity.name,
            description=entity.description,
            container_policy=entity.container_policy,
            device_element_schema_id=entity.device_element_schema_id,
        )
        if self.include_related and entity.device_element_schema_id is not None:
            schema = self._lookup_related(
                lambda: self.schemas.get_by_id(entity.device_element_schema_id, self.context),
                entity.token,
                "device element schema",
            )
            if schema is not None:
                view.device_element_schema = self.schema_helper.convert(schema)
        return view


def marshal_tenant(tenant: Tenant) -> TenantResponse:
    return TenantResponse(
        id=tenant.id,
        token=tenant.token,
        name=tenant.name,
        authentication_token=tenant.authentication_token,
        configuration=tenant.configuration,
        metadata=dict(tenant.metadata_ or {}),
        created_at=tenant.created_at,
        updated_at=tenant.updated_at,
    )
