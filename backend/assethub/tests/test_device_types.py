"""Tests for the device type API endpoints."""

from assethub.db.models import DeviceType


class TestDeviceTypeEndpoints:
    def test_create_device_type_with_schema(self, client, device_element_schema):
        response = client.post(
            "/api/devicetypes",
            json={
                "token": "tracker",
                "name": "GPS tracker",
                "containerPolicy": "Composite",
                "deviceElementSchemaToken": device_element_schema.token,
            },
        )

        assert response.status_code == 201
        data = response.json()
        assert data["containerPolicy"] == "Composite"
        assert data["deviceElementSchemaId"] == str(device_element_schema.id)
        assert data["deviceElementSchema"]["token"] == device_element_schema.token
        assert data["deviceElementSchema"]["deviceSlots"][0]["path"] == "sensor1"

    def test_create_device_type_standalone_default(self, client, default_tenant):
        response = client.post("/api/devicetypes", json={"name": "Thermometer"})

        assert response.status_code == 201
        data = response.json()
        assert data["containerPolicy"] == "Standalone"
        assert data["deviceElementSchema"] is None

    def test_create_device_type_unknown_schema(self, client, default_tenant):
        response = client.post(
            "/api/devicetypes",
            json={"name": "X", "deviceElementSchemaToken": "missing"},
        )

        assert response.status_code == 404
        assert response.json()["code"] == "InvalidDeviceElementSchemaToken"

    def test_get_device_type(self, client, device_type):
        response = client.get(f"/api/devicetypes/{device_type.token}")

        assert response.status_code == 200
        assert response.json()["deviceElementSchema"]["name"] == "Gateway schema"

    def test_get_device_type_not_found(self, client, default_tenant):
        response = client.get("/api/devicetypes/missing")

        assert response.status_code == 404
        assert response.json()["code"] == "InvalidDeviceTypeToken"

    def test_update_unlinks_schema(self, client, device_type):
        response = client.put(
            f"/api/devicetypes/{device_type.token}",
            json={"deviceElementSchemaToken": None},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["deviceElementSchemaId"] is None
        assert data["deviceElementSchema"] is None
        assert data["containerPolicy"] == "Composite"

    def test_update_without_schema_field_keeps_link(self, client, device_type, device_element_schema):
        response = client.put(f"/api/devicetypes/{device_type.token}", json={"name": "Edge gateway"})

        assert response.status_code == 200
        assert response.json()["deviceElementSchemaId"] == str(device_element_schema.id)

    def test_list_include_schema(self, client, device_type):
        plain = client.get("/api/devicetypes").json()
        embedded = client.get(
            "/api/devicetypes", params={"includeDeviceElementSchema": "true"}
        ).json()

        assert plain["results"][0]["deviceElementSchema"] is None
        assert embedded["results"][0]["deviceElementSchema"]["token"] == "gateway-schema"

    def test_list_without_schema_link(self, client, db_session, default_tenant):
        db_session.add(DeviceType(token="plain", name="Plain", tenant_id=default_tenant.id))
        db_session.commit()

        data = client.get(
            "/api/devicetypes", params={"includeDeviceElementSchema": "true"}
        ).json()

        assert data["numResults"] == 1
        assert data["results"][0]["deviceElementSchema"] is None

    def test_delete_device_type(self, client, device_type):
        token = device_type.token
        response = client.delete(f"/api/devicetypes/{token}")

        assert response.status_code == 200
        assert response.json()["deviceElementSchema"]["token"] == "gateway-schema"
        assert client.get(f"/api/devicetypes/{token}").status_code == 404
