"""Asset type schemas."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from assethub.domain.assets import AssetCategory
from assethub.schemas.common import BrandingFields, reject_null, validate_token


class AssetTypeCreate(BrandingFields):
    """Asset type creation schema."""

    token: Optional[str] = Field(None, min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    asset_category: AssetCategory = AssetCategory.DEVICE
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def check_token(cls, v: Optional[str]) -> Optional[str]:
        return validate_token(v)


class AssetTypeUpdate(BrandingFields):
    """Asset type update schema; only supplied fields are applied."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    asset_category: Optional[AssetCategory] = None
    metadata: Optional[dict[str, str]] = None

    @field_validator("name", "asset_category", "metadata")
    @classmethod
    def check_not_null(cls, v):
        return reject_null(v)


class AssetTypeResponse(BrandingFields):
    """Asset type response schema."""

    id: uuid.UUID
    token: str
    name: str
    description: Optional[str] = None
    asset_category: AssetCategory
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
