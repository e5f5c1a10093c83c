"""
User account endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from hostel_admin.api import deps
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.people import UserCreate, UserResponse, UserRoleAssign, UserUpdate
from hostel_admin.services.people import UserService

router = APIRouter(prefix="/admin/users", tags=["Users"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[UserResponse]])
def list_users(
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.require_permission("users", "view_list")),
    service: UserService = Depends(deps.get_user_service),
):
    result = service.list_users(page=page, page_size=page_size)
    return SuccessResponse.create(result.message, result.unwrap())


@router.post("", response_model=SuccessResponse[UserResponse], status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    current_user: User = Depends(deps.require_permission("users", "create")),
    service: UserService = Depends(deps.get_user_service),
):
    result = service.create_user(payload, current_user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/{user_id}", response_model=SuccessResponse[UserResponse])
def get_user(
    user_id: int,
    _: User = Depends(deps.require_permission("users", "view_one")),
    service: UserService = Depends(deps.get_user_service),
):
    result = service.get_user_details(user_id)
    return SuccessResponse.create(result.message, result.unwrap())


@router.put("/{user_id}", response_model=SuccessResponse[UserResponse])
def update_user(
    user_id: int,
    payload: UserUpdate,
    current_user: User = Depends(deps.require_permission("users", "edit")),
    service: UserService = Depends(deps.get_user_service),
):
    result = service.update_user(user_id, payload, current_user)
    return SuccessResponse.create(result.message, result.unwrap())


@router.delete("/{user_id}", response_model=SuccessResponse[None])
def delete_user(
    user_id: int,
    current_user: User = Depends(deps.require_permission("users", "delete")),
    service: UserService = Depends(deps.get_user_service),
):
    result = service.delete_user(user_id, current_user)
    result.unwrap()
    return SuccessResponse.create(result.message)


@router.put("/{user_id}/role", response_model=SuccessResponse[UserResponse])
def assign_user_role(
    user_id: int,
    payload: UserRoleAssign,
    current_user: User = Depends(deps.require_permission("users", "edit")),
    service: UserService = Depends(deps.get_user_service),
):
    result = service.assign_role(user_id, payload.role_id, current_user)
    return SuccessResponse.create(result.message, result.unwrap())
