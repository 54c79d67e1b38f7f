"""Domain-level exception hierarchy."""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable, machine-readable error codes returned to API clients."""

    GENERIC = "Error"
    INVALID_TENANT_TOKEN = "InvalidTenantToken"
    INVALID_ASSET_TOKEN = "InvalidAssetToken"
    INVALID_ASSET_TYPE_TOKEN = "InvalidAssetTypeToken"
    INVALID_DEVICE_TYPE_TOKEN = "InvalidDeviceTypeToken"
    INVALID_DEVICE_ELEMENT_SCHEMA_TOKEN = "InvalidDeviceElementSchemaToken"
    DUPLICATE_TOKEN = "DuplicateToken"
    ENTITY_IN_USE = "EntityInUse"
    INVALID_CONFIGURATION = "InvalidConfiguration"


class ErrorLevel(str, Enum):
    """Severity attached to a domain error."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DomainError(Exception):
    """Base exception for service-layer errors."""

    def __init__(
        self,
        message: str = "Domain error",
        code: ErrorCode = ErrorCode.GENERIC,
        level: ErrorLevel = ErrorLevel.ERROR,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.level = level


class NotFoundError(DomainError):
    """Raised when a requested resource cannot be located."""


class ConflictError(DomainError):
    """Raised when a unique constraint or business rule is violated."""


class ValidationError(DomainError):
    """Raised when input fails validation rules."""
