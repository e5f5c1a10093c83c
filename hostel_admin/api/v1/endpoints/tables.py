"""
Flat listings for the admin people tables.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from hostel_admin.api import deps
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.people import EmployeeResponse, TenantResponse
from hostel_admin.services.people import PeopleTableService

router = APIRouter(prefix="/admin/table", tags=["People Tables"])


@router.get("/tenants", response_model=SuccessResponse[PaginatedResponse[TenantResponse]])
def tenants_table(
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.require_permission("tenants", "view_list")),
    service: PeopleTableService = Depends(deps.get_table_service),
):
    return SuccessResponse.create("Tenants fetched successfully", service.tenants_table(search, page, page_size).unwrap())


@router.get("/staff", response_model=SuccessResponse[PaginatedResponse[EmployeeResponse]])
def staff_table(
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.get_current_user),
    service: PeopleTableService = Depends(deps.get_table_service),
):
    return SuccessResponse.create("Staff fetched successfully", service.staff_table(search, page, page_size).unwrap())


@router.get("/managers", response_model=SuccessResponse[PaginatedResponse[EmployeeResponse]])
def managers_table(
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.get_current_user),
    service: PeopleTableService = Depends(deps.get_table_service),
):
    return SuccessResponse.create(
        "Managers fetched successfully",
        service.managers_table(search, page, page_size).unwrap(),
    )
