"""Device type API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request, Response, status

from assethub.api.common import label_response, pagination, search_response
from assethub.core.audit import (
    AuditAction,
    AuditOutcome,
    audit_log,
    changed_fields,
    create_audit_context_from_request,
    field_changes,
)
from assethub.dependencies import get_device_type_resource, get_tenant_context
from assethub.domain.context import TenantRequestContext
from assethub.domain.search import SearchCriteria
from assethub.resources import ResourceFacade
from assethub.schemas.common import SearchResultsResponse
from assethub.schemas.device_type import DeviceTypeCreate, DeviceTypeResponse, DeviceTypeUpdate

router = APIRouter(prefix="/devicetypes", tags=["device types"])


@router.post("", response_model=DeviceTypeResponse, status_code=status.HTTP_201_CREATED)
def create_device_type(
    request: Request,
    payload: DeviceTypeCreate,
    resource: ResourceFacade = Depends(get_device_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceTypeResponse:
    """Create a device type, optionally linked to a device element schema."""
    device_type = resource.create(payload, context)

    audit_log(
        AuditAction.DEVICE_TYPE_CREATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="device_type",
        resource_token=device_type.token,
        resource_name=device_type.name,
        details={"container_policy": device_type.container_policy.value},
    )

    return device_type


@router.get("", response_model=SearchResultsResponse[DeviceTypeResponse])
def list_device_types(
    include_device_element_schema: bool = Query(False, alias="includeDeviceElementSchema"),
    paging: dict = Depends(pagination),
    resource: ResourceFacade = Depends(get_device_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> SearchResultsResponse[DeviceTypeResponse]:
    """List device types."""
    matches = resource.search(
        SearchCriteria(**paging),
        context,
        include_related=include_device_element_schema,
    )
    return search_response(matches, DeviceTypeResponse)


@router.get("/{token}", response_model=DeviceTypeResponse)
def get_device_type(
    token: str,
    resource: ResourceFacade = Depends(get_device_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceTypeResponse:
    """Get a device type by token, with its element schema embedded."""
    return resource.get_detail(token, context)


@router.put("/{token}", response_model=DeviceTypeResponse)
def update_device_type(
    token: str,
    request: Request,
    payload: DeviceTypeUpdate,
    resource: ResourceFacade = Depends(get_device_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceTypeResponse:
    previous = resource.current(token, context)
    device_type = resource.update(token, payload, context)
    fields = changed_fields(payload)
    old_value, new_value = field_changes(previous, device_type, fields)

    audit_log(
        AuditAction.DEVICE_TYPE_UPDATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="device_type",
        resource_token=device_type.token,
        resource_name=device_type.name,
        details={"fields_updated": fields},
        old_value=old_value,
        new_value=new_value,
    )

    return device_type


@router.delete("/{token}", response_model=DeviceTypeResponse)
def delete_device_type(
    token: str,
    request: Request,
    resource: ResourceFacade = Depends(get_device_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> DeviceTypeResponse:
    device_type = resource.delete(token, context)

    audit_log(
        AuditAction.DEVICE_TYPE_DELETE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="device_type",
        resource_token=device_type.token,
        resource_name=device_type.name,
    )

    return device_type


@router.get("/{token}/label/{generator_id}", response_class=Response)
def get_device_type_label(
    token: str,
    generator_id: str,
    resource: ResourceFacade = Depends(get_device_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> Response:
    return label_response(resource.get_label(token, generator_id, context))
