"""Tenant API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool

from assethub.api.common import pagination, search_response
from assethub.core.audit import (
    AuditAction,
    AuditOutcome,
    audit_log,
    changed_fields,
    create_audit_context_from_request,
    field_changes,
)
from assethub.core.tenant_config import TenantEngineConfiguration
from assethub.dependencies import get_tenant_service
from assethub.domain.search import SearchCriteria
from assethub.schemas.common import SearchResultsResponse
from assethub.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from assethub.services import TenantService
from assethub.services.marshal import marshal_tenant

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
    request: Request,
    payload: TenantCreate,
    service: TenantService = Depends(get_tenant_service),
) -> TenantResponse:
    """Create a tenant."""
    tenant = service.create_tenant(payload)

    audit_log(
        AuditAction.TENANT_CREATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, tenant),
        resource_type="tenant",
        resource_token=tenant.token,
        resource_name=tenant.name,
    )

    return marshal_tenant(tenant)


@router.get("", response_model=SearchResultsResponse[TenantResponse])
def list_tenants(
    paging: dict = Depends(pagination),
    service: TenantService = Depends(get_tenant_service),
) -> SearchResultsResponse[TenantResponse]:
    matches = service.search(SearchCriteria(**paging))
    return search_response(matches.map(marshal_tenant), TenantResponse)


@router.get("/{token}", response_model=TenantResponse)
def get_tenant(
    token: str,
    service: TenantService = Depends(get_tenant_service),
) -> TenantResponse:
    return marshal_tenant(service.require_by_token(token))


@router.put("/{token}", response_model=TenantResponse)
def update_tenant(
    token: str,
    request: Request,
    payload: TenantUpdate,
    service: TenantService = Depends(get_tenant_service),
) -> TenantResponse:
    previous = marshal_tenant(service.require_by_token(token))
    tenant = marshal_tenant(service.update_tenant(token, payload))
    fields = changed_fields(payload)
    old_value, new_value = field_changes(previous, tenant, fields)

    audit_log(
        AuditAction.TENANT_UPDATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, tenant),
        resource_type="tenant",
        resource_token=tenant.token,
        resource_name=tenant.name,
        details={"fields_updated": fields},
        old_value=old_value,
        new_value=new_value,
    )

    return tenant


@router.delete("/{token}", response_model=TenantResponse)
def delete_tenant(
    token: str,
    request: Request,
    service: TenantService = Depends(get_tenant_service),
) -> TenantResponse:
    """Delete a tenant. Refused while it still owns management entities."""
    tenant = service.require_by_token(token)
    view = marshal_tenant(tenant)
    audit_context = create_audit_context_from_request(request, tenant)
    service.delete_tenant(token)

    audit_log(
        AuditAction.TENANT_DELETE,
        AuditOutcome.SUCCESS,
        context=audit_context,
        resource_type="tenant",
        resource_token=view.token,
        resource_name=view.name,
    )

    return view


@router.get("/{token}/configuration", response_model=TenantEngineConfiguration)
def get_tenant_configuration(
    token: str,
    service: TenantService = Depends(get_tenant_service),
) -> TenantEngineConfiguration:
    """Return the tenant engine configuration."""
    return service.get_configuration(token)


@router.put("/{token}/configuration", response_model=TenantEngineConfiguration)
async def update_tenant_configuration(
    token: str,
    request: Request,
    service: TenantService = Depends(get_tenant_service),
) -> TenantEngineConfiguration:
    """Replace the tenant engine configuration with an uploaded YAML document.

    JSON bodies are accepted as well since JSON is valid YAML.
    """
    tenant = await run_in_threadpool(service.require_by_token, token)
    audit_context = create_audit_context_from_request(request, tenant)
    document = await request.body()
    configuration = await run_in_threadpool(service.update_configuration, token, document)

    audit_log(
        AuditAction.TENANT_CONFIGURATION_UPDATE,
        AuditOutcome.SUCCESS,
        context=audit_context,
        resource_type="tenant",
        resource_token=token,
        details={
            "datastore_type": configuration.datastore.type if configuration.datastore else None
        },
    )

    return configuration
