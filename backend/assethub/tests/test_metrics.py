"""Tests for Prometheus metrics."""

from prometheus_client import REGISTRY

from assethub.core.metrics import (
    normalize_endpoint,
    record_label_generated,
    record_management_operation,
)
from assethub.main import ENTITY_COLLECTIONS


class TestMetricsEndpoint:
    def test_metrics_endpoint_returns_prometheus_format(self, client):
        response = client.get("/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]
        assert "assethub_app_info" in response.text

    def test_http_requests_are_counted(self, client, asset):
        client.get(f"/api/assets/{asset.token}")

        value = REGISTRY.get_sample_value(
            "assethub_http_requests_total",
            {"method": "GET", "endpoint": "/api/assets/{token}", "status_code": "200"},
        )
        assert value is not None and value >= 1


class TestNormalizeEndpoint:
    def test_token_collapsed(self):
        assert (
            normalize_endpoint("/api/assets/forklift-7", ENTITY_COLLECTIONS)
            == "/api/assets/{token}"
        )

    def test_label_path(self):
        assert (
            normalize_endpoint("/api/devicetypes/gw/label/qrcode-svg", ENTITY_COLLECTIONS)
            == "/api/devicetypes/{token}/label/{generator}"
        )

    def test_configuration_path(self):
        assert (
            normalize_endpoint("/api/tenants/acme/configuration", ENTITY_COLLECTIONS)
            == "/api/tenants/{token}/configuration"
        )

    def test_collection_path_untouched(self):
        assert normalize_endpoint("/api/assets", ENTITY_COLLECTIONS) == "/api/assets"


class TestRecorders:
    def test_record_management_operation(self):
        labels = {"entity": "test_entity", "operation": "create", "outcome": "conflict"}
        before = REGISTRY.get_sample_value("assethub_management_operations_total", labels) or 0.0

        record_management_operation("test_entity", "create", "conflict")

        assert REGISTRY.get_sample_value("assethub_management_operations_total", labels) == before + 1

    def test_record_label_generated(self):
        labels = {"generator": "test-gen", "outcome": "generated"}
        before = REGISTRY.get_sample_value("assethub_labels_generated_total", labels) or 0.0

        record_label_generated("test-gen", generated=True)

        assert REGISTRY.get_sample_value("assethub_labels_generated_total", labels) == before + 1
