"""Tenant persistence helpers."""

from __future__ import annotations

import uuid
from typing import Optional, Sequence, Tuple

from sqlalchemy.orm import Session

from assethub.db import Asset, AssetType, DeviceElementSchema, DeviceType, Tenant
from assethub.domain.search import SearchCriteria
from assethub.repositories.base import SQLAlchemyRepository

_OWNED_MODELS = (Asset, AssetType, DeviceType, DeviceElementSchema)


class TenantRepository(SQLAlchemyRepository[Tenant]):
    """Tenant data access."""

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def get_by_token(self, token: str) -> Optional[Tenant]:
        return self.session.query(Tenant).filter(Tenant.token == token).first()

    def search(self, criteria: SearchCriteria) -> Tuple[int, Sequence[Tenant]]:
        query = self.session.query(Tenant)
        total = query.count()
        records = (
            query.order_by(Tenant.created_at.asc(), Tenant.token.asc())
            .offset(criteria.offset)
            .limit(criteria.page_size)
            .all()
        )
        return total, records

    def owns_entities(self, tenant_id: uuid.UUID) -> bool:
        for model in _OWNED_MODELS:
            if self.session.query(model.id).filter(model.tenant_id == tenant_id).first():
                return True
        return False
