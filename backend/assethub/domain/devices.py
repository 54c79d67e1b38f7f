"""Device-specific domain helpers."""

from enum import Enum


class DeviceContainerPolicy(str, Enum):
    """Whether devices of a type may contain nested devices."""

    STANDALONE = "Standalone"
    COMPOSITE = "Composite"
