"""Database utility helpers."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from assethub.core import settings
from assethub.core.logging import get_logger
from assethub.core.tenant_config import load_tenant_configuration_file
from assethub.db.models import Base, Tenant
from assethub.db.session import SessionLocal

logger = get_logger(__name__)

DEFAULT_TENANT_CONFIGURATION = {"datastore": {"type": "rdb", "configuration": {}}}


def default_tenant_configuration() -> dict:
    """Engine configuration for the seeded tenant, read from YAML when configured."""
    if not settings.default_tenant_config_path:
        return dict(DEFAULT_TENANT_CONFIGURATION)
    configuration = load_tenant_configuration_file(settings.default_tenant_config_path)
    return configuration.model_dump(mode="json")


def seed_default_data(db_session) -> None:
    """Create tables and the default tenant (idempotent)."""
    if settings.environment.lower() == "production":
        logger.info("Skipping default seed in production environment")
        return

    try:
        bind = db_session.get_bind()
        if bind:
            Base.metadata.create_all(bind=bind)
    except SQLAlchemyError:  # pragma: no cover - best effort
        logger.warning("Skipping table creation during seed (metadata error)", exc_info=True)

    token = settings.default_tenant_token
    tenant = db_session.query(Tenant).filter(Tenant.token == token).first()
    if not tenant:
        tenant = Tenant(
            token=token,
            name="Default Tenant",
            configuration=default_tenant_configuration(),
        )
        db_session.add(tenant)
        db_session.commit()
        logger.info("Created default tenant", extra={"tenant": token})


def seed_with_new_session() -> None:
    """Helper used by scripts to seed using a fresh session."""
    db = SessionLocal()
    try:
        seed_default_data(db)
    finally:
        db.close()
