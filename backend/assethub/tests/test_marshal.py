"""Tests for marshal helpers."""

import logging
from unittest.mock import MagicMock

from assethub.domain.exceptions import NotFoundError
from assethub.services.asset_service import AssetTypeService
from assethub.services.device_type_service import DeviceElementSchemaService
from assethub.services.marshal import (
    AssetMarshalHelper,
    DeviceTypeMarshalHelper,
    marshal_tenant,
)


class TestAssetMarshalHelper:
    def test_convert_without_related(self, db_session, tenant_context, asset):
        helper = AssetMarshalHelper(AssetTypeService(db_session), tenant_context)

        view = helper.convert(asset)

        assert view.id == asset.id
        assert view.token == asset.token
        assert view.metadata == {"bay": "north"}
        assert view.asset_type is None

    def test_convert_with_related(self, db_session, tenant_context, asset, asset_type):
        helper = AssetMarshalHelper(AssetTypeService(db_session), tenant_context, True)

        view = helper.convert(asset)

        assert view.asset_type.id == asset_type.id
        assert view.asset_type.metadata == {"vendor": "Toyota"}

    def test_related_lookup_failure_is_omitted(self, tenant_context, asset, caplog):
        asset_types = MagicMock()
        asset_types.get_by_id.side_effect = NotFoundError("gone")
        helper = AssetMarshalHelper(asset_types, tenant_context, include_asset_type=True)

        with caplog.at_level(logging.WARNING, logger="assethub.services.marshal"):
            view = helper.convert(asset)

        assert view.asset_type is None
        assert view.token == asset.token
        assert "Unable to resolve asset type" in caplog.text

    def test_related_missing_row_is_omitted(self, tenant_context, asset, caplog):
        asset_types = MagicMock()
        asset_types.get_by_id.return_value = None
        helper = AssetMarshalHelper(asset_types, tenant_context, include_asset_type=True)

        with caplog.at_level(logging.WARNING, logger="assethub.services.marshal"):
            view = helper.convert(asset)

        assert view.asset_type is None
        assert caplog.records[-1].tenant == tenant_context.tenant_token


class TestDeviceTypeMarshalHelper:
    def test_no_lookup_without_link(self, tenant_context, device_type):
        device_type.device_element_schema_id = None
        schemas = MagicMock()
        helper = DeviceTypeMarshalHelper(schemas, tenant_context, True)

        view = helper.convert(device_type)

        assert view.device_element_schema is None
        schemas.get_by_id.assert_not_called()

    def test_embeds_schema(self, db_session, tenant_context, device_type):
        helper = DeviceTypeMarshalHelper(DeviceElementSchemaService(db_session), tenant_context, True)

        view = helper.convert(device_type)

        assert view.device_element_schema.device_slots[0].name == "Primary sensor"


def test_marshal_tenant(default_tenant):
    view = marshal_tenant(default_tenant)

    assert view.token == default_tenant.token
    assert view.configuration.datastore.type == "rdb"
    assert view.metadata == {}
