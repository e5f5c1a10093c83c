"""
Permission catalog endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hostel_admin.api import deps
from hostel_admin.models.base.enums import PermissionAction
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.rbac import PermissionCreate, PermissionResponse
from hostel_admin.services.rbac import PermissionService

router = APIRouter(prefix="/admin/permissions", tags=["Permissions"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[PermissionResponse]])
def list_permissions(
    resource: Optional[str] = Query(default=None),
    action: Optional[PermissionAction] = Query(default=None),
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.require_permission("user_roles", "view_list")),
    service: PermissionService = Depends(deps.get_permission_service),
):
    result = service.list_permissions(
        resource=resource,
        action=action,
        search=search,
        page=page,
        page_size=page_size,
    )
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/resources", response_model=SuccessResponse[List[str]])
def list_permission_resources(
    _: User = Depends(deps.require_permission("user_roles", "view_list")),
    service: PermissionService = Depends(deps.get_permission_service),
):
    result = service.list_resources()
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/actions", response_model=SuccessResponse[List[str]])
def list_permission_actions(
    _: User = Depends(deps.require_permission("user_roles", "view_list")),
    service: PermissionService = Depends(deps.get_permission_service),
):
    result = service.list_actions()
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/{permission_id}", response_model=SuccessResponse[PermissionResponse])
def get_permission(
    permission_id: int,
    _: User = Depends(deps.require_permission("user_roles", "view_one")),
    service: PermissionService = Depends(deps.get_permission_service),
):
    return SuccessResponse.create(
        "Permission retrieved successfully",
        service.get_permission(permission_id).unwrap(),
    )


@router.post("", response_model=SuccessResponse[PermissionResponse], status_code=status.HTTP_201_CREATED)
def create_permission(
    payload: PermissionCreate,
    _: User = Depends(deps.require_permission("user_roles", "create")),
    service: PermissionService = Depends(deps.get_permission_service),
):
    result = service.create_permission(payload)
    return SuccessResponse.create(result.message, result.unwrap())
