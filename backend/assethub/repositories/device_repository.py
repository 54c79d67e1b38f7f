"""Device type and device element schema persistence helpers."""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Session

from assethub.db import DeviceElementSchema, DeviceType
from assethub.repositories.base import TenantScopedRepository


class DeviceTypeRepository(TenantScopedRepository[DeviceType]):
    """Encapsulates all direct DeviceType ORM access."""

    model = DeviceType

    def __init__(self, session: Session) -> None:
        super().__init__(session)


class DeviceElementSchemaRepository(TenantScopedRepository[DeviceElementSchema]):
    """Encapsulates all direct DeviceElementSchema ORM access."""

    model = DeviceElementSchema

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def is_referenced(self, schema_id: uuid.UUID) -> bool:
        return (
            self.session.query(DeviceType.id)
            .filter(DeviceType.device_element_schema_id == schema_id)
            .first()
            is not None
        )
