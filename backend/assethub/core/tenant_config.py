"""Maps tenant engine YAML configuration onto objects."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from assethub.domain.exceptions import ErrorCode, ValidationError


class DatastoreDefinition(BaseModel):
    """Which datastore a tenant engine uses and how to reach it."""

    type: str = Field(..., min_length=1, max_length=50)
    configuration: dict[str, Any] = Field(default_factory=dict)


class TenantEngineConfiguration(BaseModel):
    """Configuration of one tenant engine."""

    datastore: Optional[DatastoreDefinition] = None


def load_tenant_configuration(document: str | bytes) -> TenantEngineConfiguration:
    """Parse a YAML (or JSON) document into a TenantEngineConfiguration.

    Raises:
        ValidationError: the document is not valid YAML or does not match
            the configuration model.
    """
    try:
        data = yaml.safe_load(document)
    except yaml.YAMLError as exc:
        raise ValidationError(
            f"Tenant configuration is not valid YAML: {exc}",
            code=ErrorCode.INVALID_CONFIGURATION,
        ) from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError(
            "Tenant configuration must be a mapping",
            code=ErrorCode.INVALID_CONFIGURATION,
        )

    try:
        return TenantEngineConfiguration.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(
            f"Invalid tenant configuration: {exc.errors(include_url=False)}",
            code=ErrorCode.INVALID_CONFIGURATION,
        ) from exc


def load_tenant_configuration_file(path: str | Path) -> TenantEngineConfiguration:
    return load_tenant_configuration(Path(path).read_text(encoding="utf-8"))
