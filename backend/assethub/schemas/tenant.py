"""Tenant schemas."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from assethub.core.tenant_config import TenantEngineConfiguration
from assethub.schemas.common import CamelModel, reject_null, validate_token


class TenantCreate(CamelModel):
    """Tenant creation schema."""

    token: Optional[str] = Field(None, min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    authentication_token: Optional[str] = Field(None, max_length=255)
    configuration: Optional[TenantEngineConfiguration] = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def check_token(cls, v: Optional[str]) -> Optional[str]:
        return validate_token(v)


class TenantUpdate(CamelModel):
    """Tenant update schema."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    authentication_token: Optional[str] = Field(None, max_length=255)
    configuration: Optional[TenantEngineConfiguration] = None
    metadata: Optional[dict[str, str]] = None

    @field_validator("name", "metadata")
    @classmethod
    def check_not_null(cls, v):
        return reject_null(v)


class TenantResponse(CamelModel):
    """Tenant response schema."""

    id: uuid.UUID
    token: str
    name: str
    authentication_token: Optional[str] = None
    configuration: Optional[TenantEngineConfiguration] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
