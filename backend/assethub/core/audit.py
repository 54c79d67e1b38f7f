"""Audit logging for management-entity mutations.

Every create, update and delete issued through the management API produces
one structured audit event. Events go to the dedicated ``assethub.audit``
logger so they can be routed to separate storage.

An event records:
- where the request came from (IP address, user agent, request id)
- which tenant it was scoped to
- what was touched (resource type, token, name)
- what changed (before/after state) and how it ended
"""

import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from .logging import get_logger


class AuditAction(str, Enum):
    """Types of auditable actions."""

    # Tenants
    TENANT_CREATE = "tenant.create"
    TENANT_UPDATE = "tenant.update"
    TENANT_DELETE = "tenant.delete"
    TENANT_CONFIGURATION_UPDATE = "tenant.configuration.update"

    # Assets
    ASSET_CREATE = "asset.create"
    ASSET_UPDATE = "asset.update"
    ASSET_DELETE = "asset.delete"

    # Asset types
    ASSET_TYPE_CREATE = "asset_type.create"
    ASSET_TYPE_UPDATE = "asset_type.update"
    ASSET_TYPE_DELETE = "asset_type.delete"

    # Device types
    DEVICE_TYPE_CREATE = "device_type.create"
    DEVICE_TYPE_UPDATE = "device_type.update"
    DEVICE_TYPE_DELETE = "device_type.delete"

    # Device element schemas
    DEVICE_ELEMENT_SCHEMA_CREATE = "device_element_schema.create"
    DEVICE_ELEMENT_SCHEMA_UPDATE = "device_element_schema.update"
    DEVICE_ELEMENT_SCHEMA_DELETE = "device_element_schema.delete"


class AuditOutcome(str, Enum):
    """Outcome of an audited action."""

    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class AuditContext:
    """Where an audited request came from."""

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None
    request_id: Optional[str] = None
    tenant_token: Optional[str] = None
    tenant_name: Optional[str] = None


@dataclass
class AuditEvent:
    """A single audit log entry."""

    action: AuditAction
    outcome: AuditOutcome
    context: AuditContext
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: Optional[str] = None
    resource_token: Optional[str] = None
    resource_name: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)
    old_value: Optional[dict[str, Any]] = None
    new_value: Optional[dict[str, Any]] = None
    error_message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = {
            "audit": True,  # Marker for log filtering
            "timestamp": self.timestamp.isoformat(),
            "action": self.action.value,
            "outcome": self.outcome.value,
            "context": asdict(self.context),
        }

        if self.resource_type:
            data["resource"] = {
                "type": self.resource_type,
                "token": self.resource_token,
                "name": self.resource_name,
            }

        if self.details:
            data["details"] = self.details

        if self.old_value is not None:
            data["old_value"] = self.old_value

        if self.new_value is not None:
            data["new_value"] = self.new_value

        if self.error_message:
            data["error"] = self.error_message

        return data


class AuditLogger:
    """Writes audit events to a dedicated logger."""

    def __init__(self, logger_name: str = "audit") -> None:
        self._logger = get_logger(f"assethub.{logger_name}")
        # Audit events are never filtered below INFO
        self._logger.setLevel(logging.INFO)

    def log(self, event: AuditEvent) -> None:
        message = f"AUDIT: {event.action.value} - {event.outcome.value}"
        log_data = event.to_dict()

        if event.outcome == AuditOutcome.FAILURE:
            self._logger.warning(message, extra=log_data)
        else:
            self._logger.info(message, extra=log_data)


_audit_logger: Optional[AuditLogger] = None


def get_audit_logger() -> AuditLogger:
    """Return the process-wide AuditLogger, creating it on first use."""
    global _audit_logger
    if _audit_logger is None:
        _audit_logger = AuditLogger()
    return _audit_logger


def audit_log(
    action: AuditAction,
    outcome: AuditOutcome,
    *,
    context: Optional[AuditContext] = None,
    resource_type: Optional[str] = None,
    resource_token: Optional[str] = None,
    resource_name: Optional[str] = None,
    details: Optional[dict[str, Any]] = None,
    old_value: Optional[dict[str, Any]] = None,
    new_value: Optional[dict[str, Any]] = None,
    error_message: Optional[str] = None,
) -> None:
    """Log an audit event using the global logger.

    Example:
        >>> audit_log(
        ...     AuditAction.ASSET_CREATE,
        ...     AuditOutcome.SUCCESS,
        ...     resource_type="asset",
        ...     resource_token="forklift-7",
        ... )
    """
    event = AuditEvent(
        action=action,
        outcome=outcome,
        context=context or AuditContext(),
        resource_type=resource_type,
        resource_token=resource_token,
        resource_name=resource_name,
        details=details or {},
        old_value=old_value,
        new_value=new_value,
        error_message=error_message,
    )
    get_audit_logger().log(event)


def create_audit_context_from_request(request: Any, tenant: Optional[Any] = None) -> AuditContext:
    """Build an AuditContext from a FastAPI request and the active tenant."""
    ip_address = None
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        ip_address = forwarded_for.split(",")[0].strip()
    elif request.client:
        ip_address = request.client.host

    return AuditContext(
        ip_address=ip_address,
        user_agent=request.headers.get("user-agent"),
        request_id=request.headers.get("x-request-id"),
        tenant_token=tenant.token if tenant else None,
        tenant_name=tenant.name if tenant else None,
    )


def changed_fields(payload: Any) -> list[str]:
    """Names of the fields a partial-update payload actually sets."""
    return sorted(payload.model_dump(exclude_unset=True).keys())


def field_changes(before: Any, after: Any, fields: list[str]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Old and new values of ``fields`` taken from two response models."""
    include = set(fields)
    return (
        before.model_dump(mode="json", include=include),
        after.model_dump(mode="json", include=include),
    )


_AUDITED_VERBS = {"POST": "create", "PUT": "update", "DELETE": "delete"}

_AUDITED_COLLECTIONS = {
    "tenants": "tenant",
    "assets": "asset",
    "assettypes": "asset_type",
    "devicetypes": "device_type",
    "deviceelementschemas": "device_element_schema",
}


def action_for_route(method: str, path: str) -> Optional[tuple[AuditAction, str]]:
    """Audit action and resource type of a mutating management route.

    Returns None for reads, label renders and anything outside the
    management collections.
    """
    verb = _AUDITED_VERBS.get(method.upper())
    if verb is None:
        return None

    segments = [segment for segment in path.split("/") if segment]
    for index, segment in enumerate(segments):
        resource_type = _AUDITED_COLLECTIONS.get(segment)
        if resource_type is None:
            continue
        rest = segments[index + 1 :]
        if resource_type == "tenant" and verb == "update" and rest[1:] == ["configuration"]:
            return AuditAction.TENANT_CONFIGURATION_UPDATE, resource_type
        if len(rest) > 1:
            return None
        return AuditAction(f"{resource_type}.{verb}"), resource_type
    return None
