"""Asset and asset type service layer."""

from __future__ import annotations

from typing import Any, Dict

from sqlalchemy.orm import Session

from assethub.db import Asset, AssetType
from assethub.domain.context import TenantRequestContext
from assethub.domain.exceptions import ConflictError, ErrorCode
from assethub.repositories import AssetRepository, AssetTypeRepository
from assethub.services.base import ManagementService


class AssetTypeService(ManagementService[AssetType]):
    """Business logic for asset type lifecycle operations."""

    entity_name = "asset_type"
    display_name = "Asset type"
    not_found_code = ErrorCode.INVALID_ASSET_TYPE_TOKEN

    def __init__(self, session: Session) -> None:
        super().__init__(session, AssetTypeRepository(session))

    def _ensure_deletable(self, entity: AssetType) -> None:
        if self.repository.is_referenced(entity.id):
            raise ConflictError(
                f"Asset type '{entity.token}' is still referenced by assets",
                code=ErrorCode.ENTITY_IN_USE,
            )


class AssetService(ManagementService[Asset]):
    """Business logic for asset lifecycle operations."""

    entity_name = "asset"
    display_name = "Asset"
    not_found_code = ErrorCode.INVALID_ASSET_TOKEN

    def __init__(self, session: Session, asset_types: AssetTypeService | None = None) -> None:
        super().__init__(session, AssetRepository(session))
        self.asset_types = asset_types or AssetTypeService(session)

    def _resolve_references(
        self,
        data: Dict[str, Any],
        context: TenantRequestContext,
    ) -> Dict[str, Any]:
        data = super()._resolve_references(data, context)
        if "asset_type_token" in data:
            asset_type = self.asset_types.require_by_token(data.pop("asset_type_token"), context)
            data["asset_type_id"] = asset_type.id
        return data
