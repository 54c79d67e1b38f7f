"""Tests for AssetService and AssetTypeService."""

import uuid

import pytest

from assethub.domain.assets import AssetCategory, AssetSearchCriteria, AssetTypeSearchCriteria
from assethub.domain.exceptions import ConflictError, ErrorCode, ErrorLevel, NotFoundError
from assethub.schemas.asset import AssetCreate, AssetUpdate
from assethub.schemas.asset_type import AssetTypeCreate
from assethub.services.asset_service import AssetService, AssetTypeService


class TestAssetTypeService:
    def test_create_asset_type(self, db_session, tenant_context):
        service = AssetTypeService(db_session)

        asset_type = service.create(
            AssetTypeCreate(token="badge", name="Badge", asset_category=AssetCategory.PERSON),
            tenant_context,
        )

        assert asset_type.id is not None
        assert asset_type.asset_category == "Person"
        assert asset_type.tenant_id == tenant_context.tenant_id

    def test_create_duplicate_token(self, db_session, tenant_context, asset_type):
        service = AssetTypeService(db_session)

        with pytest.raises(ConflictError) as exc_info:
            service.create(AssetTypeCreate(token=asset_type.token, name="Dup"), tenant_context)

        assert exc_info.value.code == ErrorCode.DUPLICATE_TOKEN
        assert "already exists" in exc_info.value.message

    def test_require_by_token_missing(self, db_session, tenant_context):
        service = AssetTypeService(db_session)

        with pytest.raises(NotFoundError) as exc_info:
            service.require_by_token("missing", tenant_context)

        assert exc_info.value.code == ErrorCode.INVALID_ASSET_TYPE_TOKEN
        assert exc_info.value.level == ErrorLevel.ERROR

    def test_search_by_category(self, db_session, tenant_context, asset_type):
        service = AssetTypeService(db_session)
        service.create(AssetTypeCreate(name="Sensor"), tenant_context)

        hardware = service.search(
            AssetTypeSearchCriteria(asset_category=AssetCategory.HARDWARE), tenant_context
        )

        assert hardware.num_results == 1
        assert hardware.results[0].token == asset_type.token

    def test_delete_in_use(self, db_session, tenant_context, asset, asset_type):
        service = AssetTypeService(db_session)

        with pytest.raises(ConflictError) as exc_info:
            service.delete(asset_type.id, tenant_context)

        assert exc_info.value.code == ErrorCode.ENTITY_IN_USE


class TestAssetService:
    def test_create_resolves_asset_type(self, db_session, tenant_context, asset_type):
        service = AssetService(db_session)

        asset = service.create(
            AssetCreate(name="Forklift 2", asset_type_token=asset_type.token),
            tenant_context,
        )

        assert asset.asset_type_id == asset_type.id
        assert uuid.UUID(asset.token)

    def test_update_is_partial(self, db_session, tenant_context, asset):
        service = AssetService(db_session)

        updated = service.update(asset.id, AssetUpdate(icon="fa-forklift"), tenant_context)

        assert updated.icon == "fa-forklift"
        assert updated.name == "Forklift 7"
        assert updated.metadata_ == {"bay": "north"}

    def test_update_unknown_id(self, db_session, tenant_context):
        service = AssetService(db_session)

        with pytest.raises(NotFoundError) as exc_info:
            service.update(uuid.uuid4(), AssetUpdate(name="x"), tenant_context)

        assert exc_info.value.code == ErrorCode.INVALID_ASSET_TOKEN

    def test_search_page_size_bounds_results(self, db_session, tenant_context, asset_type):
        service = AssetService(db_session)
        for i in range(7):
            service.create(
                AssetCreate(token=f"a{i}", name=f"A{i}", asset_type_token=asset_type.token),
                tenant_context,
            )

        page = service.search(AssetSearchCriteria(page_number=2, page_size=5), tenant_context)

        assert len(page.results) == 2
        assert page.num_results == 7

    def test_entities_scoped_to_tenant(self, db_session, tenant_context, asset, second_tenant):
        from assethub.domain.context import TenantRequestContext

        service = AssetService(db_session)
        other = TenantRequestContext(tenant=second_tenant)

        assert service.get_by_token(asset.token, other) is None
        assert service.search(AssetSearchCriteria(), other).num_results == 0

    def test_delete(self, db_session, tenant_context, asset):
        service = AssetService(db_session)
        token = asset.token

        service.delete(asset.id, tenant_context)

        assert service.get_by_token(token, tenant_context) is None
