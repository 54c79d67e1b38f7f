"""Database models."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column

from assethub.core.time import utcnow


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Tenant(Base):
    """Tenant model; owns every management entity."""

    __tablename__ = "tenants"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    token: Mapped[str] = mapped_column(String(100), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    authentication_token: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    configuration: Mapped[Optional[dict]] = mapped_column(JSON, nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class ManagementEntityMixin:
    """Columns shared by every tenant-scoped management entity.

    ``id`` is internal and never changes; ``token`` is what clients use to
    address the entity and is unique within a tenant.
    """

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    token: Mapped[str] = mapped_column(String(100), nullable=False)
    metadata_: Mapped[Optional[dict]] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    @declared_attr
    def tenant_id(cls) -> Mapped[uuid.UUID]:
        return mapped_column(Uuid, ForeignKey("tenants.id"), nullable=False, index=True)


class BrandedEntityMixin(ManagementEntityMixin):
    """Adds the presentation attributes used by UIs and labels."""

    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    background_color: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    foreground_color: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    border_color: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)


class AssetType(BrandedEntityMixin, Base):
    """Asset type model."""

    __tablename__ = "asset_types"
    __table_args__ = (
        UniqueConstraint("tenant_id", "token", name="uix_asset_type_tenant_token"),
        Index("ix_asset_types_category", "asset_category"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    asset_category: Mapped[str] = mapped_column(String(32), nullable=False, default="Device")


class Asset(BrandedEntityMixin, Base):
    """Asset model."""

    __tablename__ = "assets"
    __table_args__ = (
        UniqueConstraint("tenant_id", "token", name="uix_asset_tenant_token"),
        Index("ix_assets_asset_type_id", "asset_type_id"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    asset_type_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("asset_types.id"), nullable=False
    )


class DeviceElementSchema(ManagementEntityMixin, Base):
    """Describes the slots and units a composite device exposes."""

    __tablename__ = "device_element_schemas"
    __table_args__ = (
        UniqueConstraint("tenant_id", "token", name="uix_device_element_schema_tenant_token"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    device_slots: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)
    device_units: Mapped[Optional[list]] = mapped_column(JSON, nullable=True)


class DeviceType(BrandedEntityMixin, Base):
    """Device type model."""

    __tablename__ = "device_types"
    __table_args__ = (
        UniqueConstraint("tenant_id", "token", name="uix_device_type_tenant_token"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    container_policy: Mapped[str] = mapped_column(String(32), nullable=False, default="Standalone")
    device_element_schema_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        Uuid, ForeignKey("device_element_schemas.id"), nullable=True
    )
