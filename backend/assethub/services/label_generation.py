"""Label generation for management entities.

A label is a QR code pointing back at the entity's resource URL. Each
generator renders the same payload in a different format; callers pick one
by id.
"""

from __future__ import annotations

import io
import uuid
from typing import Mapping, Optional, Protocol, Sequence

import qrcode
import qrcode.image.svg
from sqlalchemy.orm import Session

from assethub.core.config import settings
from assethub.core.logging import get_logger
from assethub.core.metrics import record_label_generated
from assethub.domain.context import TenantRequestContext
from assethub.domain.labels import Label, LabelTarget
from assethub.repositories import AssetRepository, AssetTypeRepository, DeviceTypeRepository
from assethub.repositories.base import TenantScopedRepository

logger = get_logger(__name__)


class LabelGenerator(Protocol):
    """Renders label content for a text payload."""

    id: str
    name: str
    media_type: str

    def render(self, data: str) -> bytes: ...


class QrCodeLabelGenerator:
    """PNG QR code."""

    id = "qrcode"
    name = "QR code (PNG)"
    media_type = "image/png"

    def __init__(self, box_size: int = 10, border: int = 4) -> None:
        self.box_size = box_size
        self.border = border

    def render(self, data: str) -> bytes:
        qr = qrcode.QRCode(version=None, box_size=self.box_size, border=self.border)
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image(fill_color="black", back_color="white")
        buffer = io.BytesIO()
        img.save(buffer, format="PNG")
        return buffer.getvalue()


class QrCodeSvgLabelGenerator:
    """SVG QR code, for print pipelines that scale labels."""

    id = "qrcode-svg"
    name = "QR code (SVG)"
    media_type = "image/svg+xml"

    def __init__(self, box_size: int = 10, border: int = 4) -> None:
        self.box_size = box_size
        self.border = border

    def render(self, data: str) -> bytes:
        qr = qrcode.QRCode(
            version=None,
            box_size=self.box_size,
            border=self.border,
            image_factory=qrcode.image.svg.SvgPathImage,
        )
        qr.add_data(data)
        qr.make(fit=True)

        img = qr.make_image()
        buffer = io.BytesIO()
        img.save(buffer)
        return buffer.getvalue()


def default_generators() -> list[LabelGenerator]:
    return [
        QrCodeLabelGenerator(box_size=settings.label_box_size, border=settings.label_border),
        QrCodeSvgLabelGenerator(box_size=settings.label_box_size, border=settings.label_border),
    ]


class LabelGenerationService:
    """Produces labels for assets, asset types and device types."""

    def __init__(
        self,
        session: Session,
        generators: Optional[Sequence[LabelGenerator]] = None,
        base_url: Optional[str] = None,
    ) -> None:
        self.session = session
        self.base_url = (base_url or settings.label_base_url).rstrip("/")
        self._generators = {g.id: g for g in (generators or default_generators())}
        self._repositories: Mapping[LabelTarget, TenantScopedRepository] = {
            LabelTarget.ASSET: AssetRepository(session),
            LabelTarget.ASSET_TYPE: AssetTypeRepository(session),
            LabelTarget.DEVICE_TYPE: DeviceTypeRepository(session),
        }

    def list_generators(self) -> list[LabelGenerator]:
        return list(self._generators.values())

    def label_url(self, target: LabelTarget, token: str) -> str:
        return f"{self.base_url}/{target.value}/{token}"

    def get_label(
        self,
        generator_id: str,
        target: LabelTarget,
        entity_id: uuid.UUID,
        context: TenantRequestContext,
    ) -> Optional[Label]:
        """Render a label, or return None when the generator or entity is unknown."""
        generator = self._generators.get(generator_id)
        if generator is None:
            logger.info("Unknown label generator requested", extra={"generator": generator_id})
            record_label_generated("unknown", generated=False)
            return None

        entity = self._repositories[target].get_by_id(entity_id, context.tenant_id)
        if entity is None:
            record_label_generated(generator_id, generated=False)
            return None

        content = generator.render(self.label_url(target, entity.token))
        record_label_generated(generator_id, generated=True)
        return Label(generator_id=generator.id, content=content, media_type=generator.media_type)
