"""Schemas module initialization."""

from .asset import AssetCreate, AssetResponse, AssetUpdate
from .asset_type import AssetTypeCreate, AssetTypeResponse, AssetTypeUpdate
from .common import SearchResultsResponse
from .device_type import (
    DeviceElementSchemaCreate,
    DeviceElementSchemaResponse,
    DeviceElementSchemaUpdate,
    DeviceTypeCreate,
    DeviceTypeResponse,
    DeviceTypeUpdate,
)
from .tenant import TenantCreate, TenantResponse, TenantUpdate

__all__ = [
    "AssetCreate",
    "AssetResponse",
    "AssetUpdate",
    "AssetTypeCreate",
    "AssetTypeResponse",
    "AssetTypeUpdate",
    "DeviceElementSchemaCreate",
    "DeviceElementSchemaResponse",
    "DeviceElementSchemaUpdate",
    "DeviceTypeCreate",
    "DeviceTypeResponse",
    "DeviceTypeUpdate",
    "SearchResultsResponse",
    "TenantCreate",
    "TenantResponse",
    "TenantUpdate",
]
