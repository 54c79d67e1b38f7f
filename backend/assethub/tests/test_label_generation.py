"""Tests for LabelGenerationService and the QR code generators."""

from prometheus_client import REGISTRY

from assethub.domain.labels import LabelTarget
from assethub.services.label_generation import (
    LabelGenerationService,
    QrCodeLabelGenerator,
    QrCodeSvgLabelGenerator,
)


class RecordingGenerator:
    id = "recording"
    name = "Recording"
    media_type = "text/plain"

    def __init__(self):
        self.payloads = []

    def render(self, data: str) -> bytes:
        self.payloads.append(data)
        return data.encode()


def test_png_generator_renders_png():
    content = QrCodeLabelGenerator(box_size=2, border=1).render("http://example.com/assets/a")

    assert content.startswith(b"\x89PNG")


def test_svg_generator_renders_svg():
    content = QrCodeSvgLabelGenerator().render("http://example.com/assets/a")

    assert b"<svg" in content


def test_label_encodes_entity_url(db_session, tenant_context, asset):
    generator = RecordingGenerator()
    service = LabelGenerationService(
        db_session, generators=[generator], base_url="https://iot.example.com/"
    )

    label = service.get_label("recording", LabelTarget.ASSET, asset.id, tenant_context)

    assert label.content == b"https://iot.example.com/assets/forklift-7"
    assert label.media_type == "text/plain"
    assert label.generator_id == "recording"


def test_unknown_generator_returns_none(db_session, tenant_context, asset):
    service = LabelGenerationService(db_session)
    before = REGISTRY.get_sample_value(
        "assethub_labels_generated_total", {"generator": "unknown", "outcome": "missing"}
    ) or 0.0

    assert service.get_label("nope", LabelTarget.ASSET, asset.id, tenant_context) is None
    after = REGISTRY.get_sample_value(
        "assethub_labels_generated_total", {"generator": "unknown", "outcome": "missing"}
    )
    assert after == before + 1


def test_entity_from_other_tenant_returns_none(db_session, asset, second_tenant):
    from assethub.domain.context import TenantRequestContext

    service = LabelGenerationService(db_session)
    other = TenantRequestContext(tenant=second_tenant)

    assert service.get_label("qrcode", LabelTarget.ASSET, asset.id, other) is None


def test_list_generators(db_session):
    ids = [g.id for g in LabelGenerationService(db_session).list_generators()]

    assert ids == ["qrcode", "qrcode-svg"]
