"""Asset and asset type persistence helpers."""

from __future__ import annotations

import uuid

from sqlalchemy.orm import Query, Session

from assethub.db import Asset, AssetType
from assethub.domain.assets import AssetSearchCriteria, AssetTypeSearchCriteria
from assethub.repositories.base import TenantScopedRepository


class AssetTypeRepository(TenantScopedRepository[AssetType]):
    """Encapsulates all direct AssetType ORM access."""

    model = AssetType

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def _apply_filters(self, query: Query, criteria: AssetTypeSearchCriteria) -> Query:
        if getattr(criteria, "asset_category", None):
            query = query.filter(AssetType.asset_category == criteria.asset_category.value)
        return query

    def is_referenced(self, asset_type_id: uuid.UUID) -> bool:
        return (
            self.session.query(Asset.id).filter(Asset.asset_type_id == asset_type_id).first()
            is not None
        )


class AssetRepository(TenantScopedRepository[Asset]):
    """Encapsulates all direct Asset ORM access."""

    model = Asset

    def __init__(self, session: Session) -> None:
        super().__init__(session)

    def _apply_filters(self, query: Query, criteria: AssetSearchCriteria) -> Query:
        asset_type_token = getattr(criteria, "asset_type_token", None)
        if asset_type_token:
            # Unknown tokens match nothing instead of failing the search
            query = query.join(AssetType, Asset.asset_type_id == AssetType.id).filter(
                AssetType.token == asset_type_token,
                AssetType.tenant_id == Asset.tenant_id,
            )
        return query
