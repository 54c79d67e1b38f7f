"""Tenants and management entities.

Revision ID: 0001
Revises:
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _entity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("token", sa.String(length=100), nullable=False),
        sa.Column("tenant_id", sa.Uuid, sa.ForeignKey("tenants.id"), nullable=False),
        sa.Column("metadata", sa.JSON, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _branding_columns() -> list[sa.Column]:
    return [
        sa.Column("image_url", sa.String(length=1024)),
        sa.Column("icon", sa.String(length=100)),
        sa.Column("background_color", sa.String(length=32)),
        sa.Column("foreground_color", sa.String(length=32)),
        sa.Column("border_color", sa.String(length=32)),
    ]


def upgrade():
    op.create_table(
        "tenants",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("token", sa.String(length=100), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("authentication_token", sa.String(length=255)),
        sa.Column("configuration", sa.JSON),
        sa.Column("metadata", sa.JSON),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_tenants_token", "tenants", ["token"], unique=True)

    op.create_table(
        "asset_types",
        *_entity_columns(),
        *_branding_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("asset_category", sa.String(length=32), nullable=False),
        sa.UniqueConstraint("tenant_id", "token", name="uix_asset_type_tenant_token"),
    )
    op.create_index("ix_asset_types_tenant_id", "asset_types", ["tenant_id"])
    op.create_index("ix_asset_types_category", "asset_types", ["asset_category"])

    op.create_table(
        "assets",
        *_entity_columns(),
        *_branding_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("asset_type_id", sa.Uuid, sa.ForeignKey("asset_types.id"), nullable=False),
        sa.UniqueConstraint("tenant_id", "token", name="uix_asset_tenant_token"),
    )
    op.create_index("ix_assets_tenant_id", "assets", ["tenant_id"])
    op.create_index("ix_assets_asset_type_id", "assets", ["asset_type_id"])

    op.create_table(
        "device_element_schemas",
        *_entity_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("device_slots", sa.JSON),
        sa.Column("device_units", sa.JSON),
        sa.UniqueConstraint("tenant_id", "token", name="uix_device_element_schema_tenant_token"),
    )
    op.create_index("ix_device_element_schemas_tenant_id", "device_element_schemas", ["tenant_id"])

    op.create_table(
        "device_types",
        *_entity_columns(),
        *_branding_columns(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text),
        sa.Column("container_policy", sa.String(length=32), nullable=False),
        sa.Column(
            "device_element_schema_id",
            sa.Uuid,
            sa.ForeignKey("device_element_schemas.id"),
            nullable=True,
        ),
        sa.UniqueConstraint("tenant_id", "token", name="uix_device_type_tenant_token"),
    )
    op.create_index("ix_device_types_tenant_id", "device_types", ["tenant_id"])


def downgrade():
    op.drop_index("ix_device_types_tenant_id", table_name="device_types")
    op.drop_table("device_types")
    op.drop_index("ix_device_element_schemas_tenant_id", table_name="device_element_schemas")
    op.drop_table("device_element_schemas")
    op.drop_index("ix_assets_asset_type_id", table_name="assets")
    op.drop_index("ix_assets_tenant_id", table_name="assets")
    op.drop_table("assets")
    op.drop_index("ix_asset_types_category", table_name="asset_types")
    op.drop_index("ix_asset_types_tenant_id", table_name="asset_types")
    op.drop_table("asset_types")
    op.drop_index("ix_tenants_token", table_name="tenants")
    op.drop_table("tenants")
