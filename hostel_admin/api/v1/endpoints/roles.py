"""
Role endpoints: CRUD, permission assignment and the role editor form.

Paths follow the dashboard contract: the collection is ``/admin/roles``,
single roles live under ``/admin/role/{id}``.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from hostel_admin.api import deps
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.rbac import (
    PermissionBrief,
    RoleCreate,
    RoleFormData,
    RolePermissionsUpdate,
    RoleResponse,
    RoleUpdate,
)
from hostel_admin.services.rbac import RoleService

router = APIRouter(prefix="/admin", tags=["Roles"])


@router.get("/roles", response_model=SuccessResponse[PaginatedResponse[RoleResponse]])
def list_roles(
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    user: User = Depends(deps.require_permission("user_roles", "view_list")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.list_roles(user, search=search, page=page, page_size=page_size)
    return SuccessResponse.create(result.message, result.unwrap())


@router.post("/role", response_model=SuccessResponse[RoleResponse], status_code=status.HTTP_201_CREATED)
def create_role(
    payload: RoleCreate,
    user: User = Depends(deps.require_permission("user_roles", "create")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.create_role(payload, user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/role/{role_id}", response_model=SuccessResponse[RoleResponse])
def get_role(
    role_id: int,
    user: User = Depends(deps.require_permission("user_roles", "view_one")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.get_role(role_id, user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.put("/role/{role_id}", response_model=SuccessResponse[RoleResponse])
def update_role(
    role_id: int,
    payload: RoleUpdate,
    user: User = Depends(deps.require_permission("user_roles", "edit")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.update_role(role_id, payload, user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.delete("/role/{role_id}", response_model=SuccessResponse[None])
def delete_role(
    role_id: int,
    user: User = Depends(deps.require_permission("user_roles", "delete")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.delete_role(role_id, user)
    result.unwrap()
    return SuccessResponse.create(result.message)


@router.get("/role/{role_id}/permissions", response_model=SuccessResponse[List[PermissionBrief]])
def get_role_permissions(
    role_id: int,
    user: User = Depends(deps.require_permission("user_roles", "view_one")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.get_permissions(role_id, user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.put("/role/{role_id}/permissions", response_model=SuccessResponse[RoleResponse])
def update_role_permissions(
    role_id: int,
    payload: RolePermissionsUpdate,
    user: User = Depends(deps.require_permission("user_roles", "edit")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.update_permissions(role_id, payload.permissions, user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/role/{role_id}/form", response_model=SuccessResponse[RoleFormData])
def get_role_form(
    role_id: int,
    user: User = Depends(deps.require_permission("user_roles", "view_one")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.get_form(role_id, user)
    return SuccessResponse.create("Role form retrieved successfully", result.unwrap())


@router.put("/role/{role_id}/form", response_model=SuccessResponse[RoleFormData])
def update_role_form(
    role_id: int,
    payload: RoleFormData,
    user: User = Depends(deps.require_permission("user_roles", "edit")),
    service: RoleService = Depends(deps.get_role_service),
):
    result = service.update_form(role_id, payload, user)
    return SuccessResponse.create(result.message, result.unwrap())
