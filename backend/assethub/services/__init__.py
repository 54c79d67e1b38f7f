"""Service layer entry points."""

from .asset_service import AssetService, AssetTypeService
from .device_type_service import DeviceElementSchemaService, DeviceTypeService
from .label_generation import LabelGenerationService
from .tenant_service import TenantService

__all__ = [
    "AssetService",
    "AssetTypeService",
    "DeviceElementSchemaService",
    "DeviceTypeService",
    "LabelGenerationService",
    "TenantService",
]
