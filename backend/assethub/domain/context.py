"""Request-scoped context helpers for multi-tenant operations."""

from dataclasses import dataclass

from assethub.db import Tenant


@dataclass(slots=True)
class TenantRequestContext:
    """Wraps the active tenant for service-layer use."""

    tenant: Tenant

    @property
    def tenant_id(self):
        return self.tenant.id

    @property
    def tenant_token(self) -> str:
        return self.tenant.token
