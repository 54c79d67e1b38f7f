"""Tenant management services."""

from __future__ import annotations

import uuid

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from assethub.core.logging import get_logger
from assethub.core.tenant_config import TenantEngineConfiguration, load_tenant_configuration
from assethub.db import Tenant
from assethub.domain.exceptions import ConflictError, ErrorCode, NotFoundError
from assethub.domain.search import SearchCriteria, SearchResults
from assethub.repositories import TenantRepository

logger = get_logger(__name__)


class TenantService:
    """Business logic around tenants and their engine configuration."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.tenants = TenantRepository(session)

    # ------------------------------------------------------------------
    # Queries

    def get_by_token(self, token: str) -> Tenant | None:
        return self.tenants.get_by_token(token)

    def require_by_token(self, token: str) -> Tenant:
        tenant = self.tenants.get_by_token(token)
        if not tenant:
            raise NotFoundError(
                f"Tenant '{token}' not found",
                code=ErrorCode.INVALID_TENANT_TOKEN,
            )
        return tenant

    def search(self, criteria: SearchCriteria) -> SearchResults[Tenant]:
        total, records = self.tenants.search(criteria)
        return SearchResults(results=list(records), num_results=total)

    def get_configuration(self, token: str) -> TenantEngineConfiguration:
        tenant = self.require_by_token(token)
        return TenantEngineConfiguration.model_validate(tenant.configuration or {})

    # ------------------------------------------------------------------
    # Mutations

    def create_tenant(self, payload) -> Tenant:
        data = payload.model_dump(mode="json")
        token = data.pop("token", None) or str(uuid.uuid4())
        if self.tenants.get_by_token(token):
            raise self._duplicate(token)

        data["metadata_"] = data.pop("metadata")
        tenant = Tenant(token=token, **data)
        self.tenants.add(tenant)
        self._commit(token)
        self.tenants.refresh(tenant)
        logger.info("Created tenant", extra={"tenant": token})
        return tenant

    def update_tenant(self, token: str, payload) -> Tenant:
        tenant = self.require_by_token(token)
        data = payload.model_dump(mode="json", exclude_unset=True)
        if "metadata" in data:
            data["metadata_"] = data.pop("metadata")

        for key, value in data.items():
            setattr(tenant, key, value)

        self.session.commit()
        self.session.refresh(tenant)
        return tenant

    def update_configuration(self, token: str, document: str | bytes) -> TenantEngineConfiguration:
        """Replace a tenant's engine configuration from a YAML document."""
        tenant = self.require_by_token(token)
        configuration = load_tenant_configuration(document)
        tenant.configuration = configuration.model_dump(mode="json")
        self.session.commit()
        logger.info("Updated tenant configuration", extra={"tenant": token})
        return configuration

    def delete_tenant(self, token: str) -> None:
        tenant = self.require_by_token(token)
        if self.tenants.owns_entities(tenant.id):
            raise ConflictError(
                f"Tenant '{token}' still owns management entities",
                code=ErrorCode.ENTITY_IN_USE,
            )
        self.tenants.remove(tenant)
        self.tenants.commit()
        logger.info("Deleted tenant", extra={"tenant": token})

    # ------------------------------------------------------------------
    # Internal helpers

    def _duplicate(self, token: str) -> ConflictError:
        return ConflictError(
            f"Tenant with token '{token}' already exists",
            code=ErrorCode.DUPLICATE_TOKEN,
        )

    def _commit(self, token: str) -> None:
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise self._duplicate(token) from exc
