"""Test configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ["TESTING"] = "true"  # Disable rate limiting in tests

from assethub.core.config import settings  # noqa: E402
from assethub.db import Base, get_db  # noqa: E402
from assethub.db.models import (  # noqa: E402
    Asset,
    AssetType,
    DeviceElementSchema,
    DeviceType,
    Tenant,
)
from assethub.domain.context import TenantRequestContext  # noqa: E402
from assethub.main import app  # noqa: E402 - must set env vars before importing

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """Create a test client with overridden database dependency."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _add(db_session, instance):
    db_session.add(instance)
    db_session.commit()
    db_session.refresh(instance)
    return instance


@pytest.fixture
def default_tenant(db_session):
    """The tenant requests fall back to when no X-Tenant-Token is sent."""
    return _add(
        db_session,
        Tenant(
            token=settings.default_tenant_token,
            name="Default Tenant",
            configuration={"datastore": {"type": "rdb", "configuration": {}}},
        ),
    )


@pytest.fixture
def second_tenant(db_session):
    """A second tenant for isolation tests."""
    return _add(db_session, Tenant(token="acme", name="Acme Logistics"))


@pytest.fixture
def second_tenant_headers(second_tenant):
    return {"X-Tenant-Token": second_tenant.token}


@pytest.fixture
def tenant_context(default_tenant):
    return TenantRequestContext(tenant=default_tenant)


@pytest.fixture
def asset_type(db_session, default_tenant):
    return _add(
        db_session,
        AssetType(
            token="forklift",
            name="Forklift",
            description="Warehouse forklift",
            asset_category="Hardware",
            tenant_id=default_tenant.id,
            metadata_={"vendor": "Toyota"},
        ),
    )


@pytest.fixture
def asset(db_session, default_tenant, asset_type):
    return _add(
        db_session,
        Asset(
            token="forklift-7",
            name="Forklift 7",
            asset_type_id=asset_type.id,
            tenant_id=default_tenant.id,
            metadata_={"bay": "north"},
        ),
    )


@pytest.fixture
def device_element_schema(db_session, default_tenant):
    return _add(
        db_session,
        DeviceElementSchema(
            token="gateway-schema",
            name="Gateway schema",
            device_slots=[{"name": "Primary sensor", "path": "sensor1"}],
            device_units=[],
            tenant_id=default_tenant.id,
        ),
    )


@pytest.fixture
def device_type(db_session, default_tenant, device_element_schema):
    return _add(
        db_session,
        DeviceType(
            token="gateway",
            name="Gateway",
            container_policy="Composite",
            device_element_schema_id=device_element_schema.id,
            tenant_id=default_tenant.id,
        ),
    )
