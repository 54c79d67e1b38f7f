"""Tests for the device element schema API endpoints."""


def test_create_schema_with_nested_units(client, default_tenant):
    response = client.post(
        "/api/deviceelementschemas",
        json={
            "token": "rack",
            "name": "Rack",
            "deviceSlots": [{"name": "Power", "path": "psu"}],
            "deviceUnits": [
                {
                    "name": "Shelf 1",
                    "path": "shelf1",
                    "deviceSlots": [{"name": "Port A", "path": "a"}],
                    "deviceUnits": [{"name": "Tray", "path": "tray"}],
                }
            ],
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["deviceSlots"] == [{"name": "Power", "path": "psu"}]
    unit = data["deviceUnits"][0]
    assert unit["deviceSlots"][0]["path"] == "a"
    assert unit["deviceUnits"][0]["name"] == "Tray"


def test_create_schema_rejects_slot_without_path(client, default_tenant):
    response = client.post(
        "/api/deviceelementschemas",
        json={"name": "Broken", "deviceSlots": [{"name": "No path"}]},
    )

    assert response.status_code == 422


def test_get_schema_not_found(client, default_tenant):
    response = client.get("/api/deviceelementschemas/missing")

    assert response.status_code == 404
    assert response.json()["code"] == "InvalidDeviceElementSchemaToken"


def test_update_schema_slots(client, device_element_schema):
    response = client.put(
        f"/api/deviceelementschemas/{device_element_schema.token}",
        json={"deviceSlots": []},
    )

    assert response.status_code == 200
    assert response.json()["deviceSlots"] == []
    assert response.json()["name"] == "Gateway schema"


def test_list_schemas(client, device_element_schema):
    data = client.get("/api/deviceelementschemas").json()

    assert data["numResults"] == 1
    assert data["results"][0]["token"] == device_element_schema.token


def test_delete_schema_in_use(client, device_type, device_element_schema):
    response = client.delete(f"/api/deviceelementschemas/{device_element_schema.token}")

    assert response.status_code == 409
    assert response.json()["code"] == "EntityInUse"


def test_delete_schema(client, device_element_schema):
    response = client.delete(f"/api/deviceelementschemas/{device_element_schema.token}")

    assert response.status_code == 200
    assert response.json()["token"] == "gateway-schema"
