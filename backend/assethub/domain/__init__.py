"""Domain layer primitives (contexts, value objects, exceptions)."""

from . import assets, devices, exceptions, labels, search
from .context import TenantRequestContext

__all__ = ["TenantRequestContext", "assets", "devices", "exceptions", "labels", "search"]
