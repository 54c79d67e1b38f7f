"""Asset type API endpoints."""

from __future__ import annotations

from typing import Optional

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
from assethub.dependencies import get_asset_type_resource, get_tenant_context
from assethub.domain.assets import AssetCategory, AssetTypeSearchCriteria
from assethub.domain.context import TenantRequestContext
from assethub.resources import ResourceFacade
from assethub.schemas.asset_type import AssetTypeCreate, AssetTypeResponse, AssetTypeUpdate
from assethub.schemas.common import SearchResultsResponse

router = APIRouter(prefix="/assettypes", tags=["asset types"])


@router.post("", response_model=AssetTypeResponse, status_code=status.HTTP_201_CREATED)
def create_asset_type(
    request: Request,
    payload: AssetTypeCreate,
    resource: ResourceFacade = Depends(get_asset_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetTypeResponse:
    """Create an asset type."""
    asset_type = resource.create(payload, context)

    audit_log(
        AuditAction.ASSET_TYPE_CREATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="asset_type",
        resource_token=asset_type.token,
        resource_name=asset_type.name,
        details={"asset_category": asset_type.asset_category.value},
    )

    return asset_type


@router.get("", response_model=SearchResultsResponse[AssetTypeResponse])
def list_asset_types(
    asset_category: Optional[AssetCategory] = Query(None, alias="assetCategory"),
    paging: dict = Depends(pagination),
    resource: ResourceFacade = Depends(get_asset_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> SearchResultsResponse[AssetTypeResponse]:
    criteria = AssetTypeSearchCriteria(asset_category=asset_category, **paging)
    return search_response(resource.search(criteria, context), AssetTypeResponse)


@router.get("/{token}", response_model=AssetTypeResponse)
def get_asset_type(
    token: str,
    resource: ResourceFacade = Depends(get_asset_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetTypeResponse:
    return resource.get_detail(token, context)


@router.put("/{token}", response_model=AssetTypeResponse)
def update_asset_type(
    token: str,
    request: Request,
    payload: AssetTypeUpdate,
    resource: ResourceFacade = Depends(get_asset_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetTypeResponse:
    previous = resource.current(token, context)
    asset_type = resource.update(token, payload, context)
    fields = changed_fields(payload)
    old_value, new_value = field_changes(previous, asset_type, fields)

    audit_log(
        AuditAction.ASSET_TYPE_UPDATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="asset_type",
        resource_token=asset_type.token,
        resource_name=asset_type.name,
        details={"fields_updated": fields},
        old_value=old_value,
        new_value=new_value,
    )

    return asset_type


@router.delete("/{token}", response_model=AssetTypeResponse)
def delete_asset_type(
    token: str,
    request: Request,
    resource: ResourceFacade = Depends(get_asset_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetTypeResponse:
    """Delete an asset type. Refused while assets still reference it."""
    asset_type = resource.delete(token, context)

    audit_log(
        AuditAction.ASSET_TYPE_DELETE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="asset_type",
        resource_token=asset_type.token,
        resource_name=asset_type.name,
    )

    return asset_type


@router.get("/{token}/label/{generator_id}", response_class=Response)
def get_asset_type_label(
    token: str,
    generator_id: str,
    resource: ResourceFacade = Depends(get_asset_type_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> Response:
    return label_response(resource.get_label(token, generator_id, context))
