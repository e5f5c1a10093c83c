"""
Tenant endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from hostel_admin.api import deps
from hostel_admin.models.base.enums import TenantStatus
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.people import TenantCreate, TenantResponse, TenantUpdate
from hostel_admin.services.people import TenantService

router = APIRouter(prefix="/admin/tenants", tags=["Tenants"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[TenantResponse]])
def list_tenants(
    hostel_id: Optional[int] = Query(default=None),
    status_filter: Optional[TenantStatus] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.require_permission("tenants", "view_list")),
    service: TenantService = Depends(deps.get_tenant_service),
):
    result = service.list_tenants(
        hostel_id=hostel_id,
        status=status_filter,
        search=search,
        page=page,
        page_size=page_size,
    )
    return SuccessResponse.create(result.message, result.unwrap())


@router.post("", response_model=SuccessResponse[TenantResponse], status_code=status.HTTP_201_CREATED)
def create_tenant(
    payload: TenantCreate,
    _: User = Depends(deps.require_permission("tenants", "create")),
    service: TenantService = Depends(deps.get_tenant_service),
):
    result = service.create_tenant(payload)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/{tenant_id}", response_model=SuccessResponse[TenantResponse])
def get_tenant(
    tenant_id: int,
    _: User = Depends(deps.require_permission("tenants", "view_one")),
    service: TenantService = Depends(deps.get_tenant_service),
):
    return SuccessResponse.create("Tenant retrieved successfully", service.get_tenant(tenant_id).unwrap())


@router.put("/{tenant_id}", response_model=SuccessResponse[TenantResponse])
def update_tenant(
    tenant_id: int,
    payload: TenantUpdate,
    _: User = Depends(deps.require_permission("tenants", "edit")),
    service: TenantService = Depends(deps.get_tenant_service),
):
    result = service.update_tenant(tenant_id, payload)
    return SuccessResponse.create(result.message, result.unwrap())


@router.delete("/{tenant_id}", response_model=SuccessResponse[None])
def delete_tenant(
    tenant_id: int,
    _: User = Depends(deps.require_permission("tenants", "delete")),
    service: TenantService = Depends(deps.get_tenant_service),
):
    result = service.delete_tenant(tenant_id)
    result.unwrap()
    return SuccessResponse.create(result.message)
