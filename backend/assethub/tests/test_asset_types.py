"""Tests for the asset type API endpoints."""

from assethub.db.models import AssetType


def test_create_asset_type(client, default_tenant):
    response = client.post(
        "/api/assettypes",
        json={
            "token": "scanner",
            "name": "Barcode scanner",
            "assetCategory": "Hardware",
            "backgroundColor": "#ffffff",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["token"] == "scanner"
    assert data["assetCategory"] == "Hardware"
    assert data["backgroundColor"] == "#ffffff"
    assert data["metadata"] == {}


def test_create_asset_type_default_category(client, default_tenant):
    response = client.post("/api/assettypes", json={"name": "Sensor"})

    assert response.status_code == 201
    assert response.json()["assetCategory"] == "Device"


def test_create_asset_type_invalid_category(client, default_tenant):
    response = client.post("/api/assettypes", json={"name": "X", "assetCategory": "Vehicle"})

    assert response.status_code == 422


def test_get_asset_type(client, asset_type):
    response = client.get(f"/api/assettypes/{asset_type.token}")

    assert response.status_code == 200
    assert response.json()["description"] == "Warehouse forklift"
    assert response.json()["metadata"] == {"vendor": "Toyota"}


def test_get_asset_type_not_found(client, default_tenant):
    response = client.get("/api/assettypes/missing")

    assert response.status_code == 404
    assert response.json()["code"] == "InvalidAssetTypeToken"


def test_update_asset_type_clears_description(client, asset_type):
    response = client.put(f"/api/assettypes/{asset_type.token}", json={"description": None})

    assert response.status_code == 200
    data = response.json()
    assert data["description"] is None
    assert data["name"] == "Forklift"


def test_list_filter_by_category(client, db_session, asset_type, default_tenant):
    db_session.add(
        AssetType(token="guard", name="Guard", asset_category="Person", tenant_id=default_tenant.id)
    )
    db_session.commit()

    people = client.get("/api/assettypes", params={"assetCategory": "Person"}).json()
    everything = client.get("/api/assettypes").json()

    assert people["numResults"] == 1
    assert people["results"][0]["token"] == "guard"
    assert everything["numResults"] == 2


def test_delete_asset_type_in_use(client, asset, asset_type):
    response = client.delete(f"/api/assettypes/{asset_type.token}")

    assert response.status_code == 409
    assert response.json()["code"] == "EntityInUse"


def test_delete_unused_asset_type(client, asset_type):
    token = asset_type.token
    response = client.delete(f"/api/assettypes/{token}")

    assert response.status_code == 200
    assert response.json()["token"] == token
    assert client.get(f"/api/assettypes/{token}").status_code == 404
