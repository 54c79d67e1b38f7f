"""Resource facades binding services, marshal helpers and label generation."""

from .facade import ResourceFacade

__all__ = ["ResourceFacade"]
