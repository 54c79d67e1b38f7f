"""Label value objects."""

from dataclasses import dataclass
from enum import Enum


class LabelTarget(str, Enum):
    """Entity kinds a label can be generated for; values are URL path segments."""

    ASSET = "assets"
    ASSET_TYPE = "assettypes"
    DEVICE_TYPE = "devicetypes"


@dataclass(frozen=True, slots=True)
class Label:
    """Generated binary artifact for one entity and one generator."""

    generator_id: str
    content: bytes
    media_type: str
