"""Device type and device element schema service layer."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.orm import Session

from assethub.db import DeviceElementSchema, DeviceType
from assethub.domain.context import TenantRequestContext
from assethub.domain.exceptions import ConflictError, ErrorCode
from assethub.repositories import DeviceElementSchemaRepository, DeviceTypeRepository
from assethub.services.base import ManagementService


class DeviceElementSchemaService(ManagementService[DeviceElementSchema]):
    """Business logic for device element schemas."""

    entity_name = "device_element_schema"
    display_name = "Device element schema"
    not_found_code = ErrorCode.INVALID_DEVICE_ELEMENT_SCHEMA_TOKEN

    def __init__(self, session: Session) -> None:
        super().__init__(session, DeviceElementSchemaRepository(session))

    def _ensure_deletable(self, entity: DeviceElementSchema) -> None:
        if self.repository.is_referenced(entity.id):
            raise ConflictError(
                f"Device element schema '{entity.token}' is still used by a device type",
                code=ErrorCode.ENTITY_IN_USE,
            )


class DeviceTypeService(ManagementService[DeviceType]):
    """Business logic for device type lifecycle operations."""

    entity_name = "device_type"
    display_name = "Device type"
    not_found_code = ErrorCode.INVALID_DEVICE_TYPE_TOKEN

    def __init__(
        self,
        session: Session,
        schemas: DeviceElementSchemaService | None = None,
    ) -> None:
        super().__init__(session, DeviceTypeRepository(session))
        self.schemas = schemas or DeviceElementSchemaService(session)

    def _resolve_references(
        self,
        data: Dict[str, Any],
        context: TenantRequestContext,
    ) -> Dict[str, Any]:
        data = super()._resolve_references(data, context)
        if "device_element_schema_token" in data:
            schema_token = data.pop("device_element_schema_token")
            if schema_token is None:
                data["device_element_schema_id"] = None
            else:
                schema = self.schemas.require_by_token(schema_token, context)
                data["device_element_schema_id"] = schema.id
        return data
