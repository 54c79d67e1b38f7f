"""Database module initialization."""

from .models import (
    Asset,
    AssetType,
    Base,
    DeviceElementSchema,
    DeviceType,
    Tenant,
)
from .session import SessionLocal, engine, get_db
from .utils import seed_default_data

__all__ = [
    "Asset",
    "AssetType",
    "Base",
    "DeviceElementSchema",
    "DeviceType",
    "Tenant",
    "get_db",
    "engine",
    "SessionLocal",
    "seed_default_data",
]
