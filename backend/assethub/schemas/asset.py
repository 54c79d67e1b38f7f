"""Asset schemas."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from assethub.schemas.asset_type import AssetTypeResponse
from assethub.schemas.common import BrandingFields, reject_null, validate_token


class AssetCreate(BrandingFields):
    """Asset creation schema."""

    token: Optional[str] = Field(None, min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    asset_type_token: str = Field(..., min_length=1, max_length=100)
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def check_token(cls, v: Optional[str]) -> Optional[str]:
        return validate_token(v)


class AssetUpdate(BrandingFields):
    """Asset update schema; only supplied fields are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    asset_type_token: Optional[str] = Field(None, min_length=1, max_length=100)
    metadata: Optional[dict[str, str]] = None

    @field_validator("name", "asset_type_token", "metadata")
    @classmethod
    def check_not_null(cls, v):
        return reject_null(v)


class AssetResponse(BrandingFields):
    """Asset response schema.

    ``asset_type`` is only populated when the caller asked for it and the
    asset type could be resolved.
    """

    id: uuid.UUID
    token: str
    name: str
    asset_type_id: uuid.UUID
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
    asset_type: Optional[AssetTypeResponse] = None
