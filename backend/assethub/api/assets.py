"""Asset API endpoints."""

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
from assethub.dependencies import get_asset_resource, get_tenant_context
from assethub.domain.assets import AssetSearchCriteria
from assethub.domain.context import TenantRequestContext
from assethub.resources import ResourceFacade
from assethub.schemas.asset import AssetCreate, AssetResponse, AssetUpdate
from assethub.schemas.common import SearchResultsResponse

router = APIRouter(prefix="/assets", tags=["assets"])


@router.post("", response_model=AssetResponse, status_code=status.HTTP_201_CREATED)
def create_asset(
    request: Request,
    payload: AssetCreate,
    resource: ResourceFacade = Depends(get_asset_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetResponse:
    """Create an asset of an existing asset type."""
    asset = resource.create(payload, context)

    audit_log(
        AuditAction.ASSET_CREATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="asset",
        resource_token=asset.token,
        resource_name=asset.name,
        details={"asset_type_token": payload.asset_type_token},
    )

    return asset


@router.get("", response_model=SearchResultsResponse[AssetResponse])
def list_assets(
    asset_type_token: Optional[str] = Query(None, alias="assetTypeToken"),
    include_asset_type: bool = Query(False, alias="includeAssetType"),
    paging: dict = Depends(pagination),
    resource: ResourceFacade = Depends(get_asset_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> SearchResultsResponse[AssetResponse]:
    """List assets, optionally restricted to one asset type."""
    criteria = AssetSearchCriteria(asset_type_token=asset_type_token, **paging)
    matches = resource.search(criteria, context, include_related=include_asset_type)
    return search_response(matches, AssetResponse)


@router.get("/{token}", response_model=AssetResponse)
def get_asset(
    token: str,
    resource: ResourceFacade = Depends(get_asset_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetResponse:
    """Get an asset by token, with its asset type embedded."""
    return resource.get_detail(token, context)


@router.put("/{token}", response_model=AssetResponse)
def update_asset(
    token: str,
    request: Request,
    payload: AssetUpdate,
    resource: ResourceFacade = Depends(get_asset_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetResponse:
    """Update the supplied fields of an asset."""
    previous = resource.current(token, context)
    asset = resource.update(token, payload, context)
    fields = changed_fields(payload)
    old_value, new_value = field_changes(previous, asset, fields)

    audit_log(
        AuditAction.ASSET_UPDATE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="asset",
        resource_token=asset.token,
        resource_name=asset.name,
        details={"fields_updated": fields},
        old_value=old_value,
        new_value=new_value,
    )

    return asset


@router.delete("/{token}", response_model=AssetResponse)
def delete_asset(
    token: str,
    request: Request,
    resource: ResourceFacade = Depends(get_asset_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> AssetResponse:
    """Delete an asset and return its final state."""
    asset = resource.delete(token, context)

    audit_log(
        AuditAction.ASSET_DELETE,
        AuditOutcome.SUCCESS,
        context=create_audit_context_from_request(request, context.tenant),
        resource_type="asset",
        resource_token=asset.token,
        resource_name=asset.name,
    )

    return asset


@router.get("/{token}/label/{generator_id}", response_class=Response)
def get_asset_label(
    token: str,
    generator_id: str,
    resource: ResourceFacade = Depends(get_asset_resource),
    context: TenantRequestContext = Depends(get_tenant_context),
) -> Response:
    """Render a label for an asset with the given generator."""
    return label_response(resource.get_label(token, generator_id, context))
