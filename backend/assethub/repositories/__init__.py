"""Repository layer for persistence access."""

from .asset_repository import AssetRepository, AssetTypeRepository
from .device_repository import DeviceElementSchemaRepository, DeviceTypeRepository
from .tenant_repository import TenantRepository

__all__ = [
    "AssetRepository",
    "AssetTypeRepository",
    "DeviceElementSchemaRepository",
    "DeviceTypeRepository",
    "TenantRepository",
]
