"""Device element schema API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status

from assethub.api.common import pagination, search_response
from assethub.core.audit import (
    AuditAction,
    AuditOutcome,
    audit_log,
    changed_fields,
    create_audit_context_from_request,
    field_changes,
)
from assethub.dependencies import get_device_element_schema_resource, get_tenant_context
from assethub.domain.context import TenantRequestContext
from assethub.domain.search import SearchCriteria
from assethub.resources import ResourceFacade
from assethub.schemas.common import SearchResultsResponse
from assethub.schemas.device_type import (
    DeviceElementSchemaCreate,
    DeviceElementSchemaResponse,
    DeviceElementSchemaUpdate,
)

router = APIRouter(prefix="/deviceelementschemas", tags=["device element schemas"])


@router.post("", response_model=DeviceElementSchemaResponse, status_code=status.HTTP_201_CREATED)
def create_device_element_schema(
    request: Request,
    payload: DeviceElementSchemaCreate,
    resource: ResourceFacade = Depends(get_device_element_schema_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceElementSchemaResponse:
    """Create a device element schema (slots and nested units)."""
    schema = resource.create(payload, context)

    audit_log(
        AuditAction.DEVICE_ELEMENT_SCHEMA_CREATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="device_element_schema",
        resource_token=schema.token,
        resource_name=schema.name,
    )

    return schema


@router.get("", response_model=SearchResultsResponse[DeviceElementSchemaResponse])
def list_device_element_schemas(
    paging: dict = Depends(pagination),
    resource: ResourceFacade = Depends(get_device_element_schema_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> SearchResultsResponse[DeviceElementSchemaResponse]:
    matches = resource.search(SearchCriteria(**paging), context)
    return search_response(matches, DeviceElementSchemaResponse)


@router.get("/{token}", response_model=DeviceElementSchemaResponse)
def get_device_element_schema(
    token: str,
    resource: ResourceFacade = Depends(get_device_element_schema_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceElementSchemaResponse:
    return resource.get_detail(token, context)


@router.put("/{token}", response_model=DeviceElementSchemaResponse)
def update_device_element_schema(
    token: str,
    request: Request,
    payload: DeviceElementSchemaUpdate,
    resource: ResourceFacade = Depends(get_device_element_schema_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceElementSchemaResponse:
    previous = resource.current(token, context)
    schema = resource.update(token, payload, context)
    fields = changed_fields(payload)
    old_value, new_value = field_changes(previous, schema, fields)

    audit_log(
        AuditAction.DEVICE_ELEMENT_SCHEMA_UPDATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="device_element_schema",
        resource_token=schema.token,
        resource_name=schema.name,
        details={"fields_updated": fields},
        old_value=old_value,
        new_value=new_value,
    )

    return schema


@router.delete("/{token}", response_model=DeviceElementSchemaResponse)
def delete_device_element_schema(
    token: str,
    request: Request,
    resource: ResourceFacade = Depends(get_device_element_schema_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceElementSchemaResponse:
    schema = resource.delete(token, context)

    audit_log(
        AuditAction.DEVICE_ELEMENT_SCHEMA_DELETE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="device_element_schema",
        resource_token=schema.token,
        resource_name=schema.name,
    )

    return schema
