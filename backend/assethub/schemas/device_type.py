"""Device type and device element schema schemas."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from assethub.domain.devices import DeviceContainerPolicy
from assethub.schemas.common import BrandingFields, CamelModel, reject_null, validate_token


class DeviceSlot(CamelModel):
    """A named position a child device can be plugged into."""

    name: str = Field(..., min_length=1, max_length=255)
    path: str = Field(..., min_length=1, max_length=255)


class DeviceUnit(CamelModel):
    """A grouping of slots and nested units."""

    name: str = Field(..., min_length=1, max_length=255)
    path: str = Field(..., min_length=1, max_length=255)
    device_slots: list[DeviceSlot] = Field(default_factory=list)
    device_units: list[DeviceUnit] = Field(default_factory=list)


class DeviceElementSchemaCreate(CamelModel):
    """Device element schema creation schema."""

    token: Optional[str] = Field(None, min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    device_slots: list[DeviceSlot] = Field(default_factory=list)
    device_units: list[DeviceUnit] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def check_token(cls, v: Optional[str]) -> Optional[str]:
        return validate_token(v)


class DeviceElementSchemaUpdate(CamelModel):
    """Device element schema update schema."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    device_slots: Optional[list[DeviceSlot]] = None
    device_units: Optional[list[DeviceUnit]] = None
    metadata: Optional[dict[str, str]] = None

    @field_validator("name", "device_slots", "device_units", "metadata")
    @classmethod
    def check_not_null(cls, v):
        return reject_null(v)


class DeviceElementSchemaResponse(CamelModel):
    """Device element schema response schema."""

    id: uuid.UUID
    token: str
    name: str
    description: Optional[str] = None
    device_slots: list[DeviceSlot] = Field(default_factory=list)
    device_units: list[DeviceUnit] = Field(default_factory=list)
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class DeviceTypeCreate(BrandingFields):
    """Device type creation schema."""

    token: Optional[str] = Field(None, min_length=1, max_length=100)
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    container_policy: DeviceContainerPolicy = DeviceContainerPolicy.STANDALONE
    device_element_schema_token: Optional[str] = Field(None, min_length=1, max_length=100)
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("token")
    @classmethod
    def check_token(cls, v: Optional[str]) -> Optional[str]:
        return validate_token(v)


class DeviceTypeUpdate(BrandingFields):
    """Device type update schema.

    Sending ``deviceElementSchemaToken: null`` unlinks the schema.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    container_policy: Optional[DeviceContainerPolicy] = None
    device_element_schema_token: Optional[str] = Field(None, min_length=1, max_length=100)
    metadata: Optional[dict[str, str]] = None

    @field_validator("name", "container_policy", "metadata")
    @classmethod
    def check_not_null(cls, v):
        return reject_null(v)


class DeviceTypeResponse(BrandingFields):
    """Device type response schema."""

    id: uuid.UUID
    token: str
    name: str
    description: Optional[str] = None
    container_policy: DeviceContainerPolicy
    device_element_schema_id: Optional[uuid.UUID] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime
    device_element_schema: Optional[DeviceElementSchemaResponse] = None
