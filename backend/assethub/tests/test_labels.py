"""Tests for label generation endpoints."""

import pytest


def test_list_generators(client):
    response = client.get("/api/labels/generators")

    assert response.status_code == 200
    ids = {g["id"] for g in response.json()}
    assert ids == {"qrcode", "qrcode-svg"}
    assert {g["mediaType"] for g in response.json()} == {"image/png", "image/svg+xml"}


def test_asset_png_label(client, asset):
    response = client.get(f"/api/assets/{asset.token}/label/qrcode")

    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert response.content.startswith(b"\x89PNG")


def test_asset_svg_label(client, asset):
    response = client.get(f"/api/assets/{asset.token}/label/qrcode-svg")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert b"<svg" in response.content


@pytest.mark.parametrize(
    "collection,fixture_name",
    [("assettypes", "asset_type"), ("devicetypes", "device_type")],
)
def test_other_entity_labels(client, request, collection, fixture_name):
    entity = request.getfixturevalue(fixture_name)

    response = client.get(f"/api/{collection}/{entity.token}/label/qrcode")

    assert response.status_code == 200
    assert response.content.startswith(b"\x89PNG")


def test_unknown_generator_is_empty_404(client, asset):
    response = client.get(f"/api/assets/{asset.token}/label/barcode-128")

    assert response.status_code == 404
    assert response.content == b""


def test_unknown_entity_is_error_404(client, default_tenant):
    response = client.get("/api/assets/missing/label/qrcode")

    assert response.status_code == 404
    assert response.json()["code"] == "InvalidAssetToken"
