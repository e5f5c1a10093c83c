"""
Employee endpoints. Staff records carry no permission resource of their
own, so an identified user is enough.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from hostel_admin.api import deps
from hostel_admin.models.base.enums import EmployeeRole, EmployeeStatus
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.people import EmployeeCreate, EmployeeResponse, EmployeeStatusUpdate, EmployeeUpdate
from hostel_admin.services.people import EmployeeService

router = APIRouter(prefix="/admin/employees", tags=["Employees"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[EmployeeResponse]])
def list_employees(
    role: Optional[EmployeeRole] = Query(default=None),
    hostel_id: Optional[int] = Query(default=None),
    status_filter: Optional[EmployeeStatus] = Query(default=None, alias="status"),
    search: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.get_current_user),
    service: EmployeeService = Depends(deps.get_employee_service),
):
    result = service.list_employees(
        role=role,
        hostel_id=hostel_id,
        status=status_filter,
        search=search,
        page=page,
        page_size=page_size,
    )
    return SuccessResponse.create(result.message, result.unwrap())


@router.post("", response_model=SuccessResponse[EmployeeResponse], status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: EmployeeCreate,
    _: User = Depends(deps.get_current_user),
    service: EmployeeService = Depends(deps.get_employee_service),
):
    result = service.create_employee(payload)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/{employee_id}", response_model=SuccessResponse[EmployeeResponse])
def get_employee(
    employee_id: int,
    _: User = Depends(deps.get_current_user),
    service: EmployeeService = Depends(deps.get_employee_service),
):
    result = service.get_employee(employee_id)
    return SuccessResponse.create(result.message, result.unwrap())


@router.put("/{employee_id}", response_model=SuccessResponse[EmployeeResponse])
def update_employee(
    employee_id: int,
    payload: EmployeeUpdate,
    _: User = Depends(deps.get_current_user),
    service: EmployeeService = Depends(deps.get_employee_service),
):
    result = service.update_employee(employee_id, payload)
    return SuccessResponse.create(result.message, result.unwrap())


@router.patch("/{employee_id}/status", response_model=SuccessResponse[EmployeeResponse])
def update_employee_status(
    employee_id: int,
    payload: EmployeeStatusUpdate,
    _: User = Depends(deps.get_current_user),
    service: EmployeeService = Depends(deps.get_employee_service),
):
    result = service.update_status(employee_id, payload.status)
    return SuccessResponse.create(result.message, result.unwrap())


@router.delete("/{employee_id}", response_model=SuccessResponse[None])
def delete_employee(
    employee_id: int,
    _: User = Depends(deps.get_current_user),
    service: EmployeeService = Depends(deps.get_employee_service),
):
    result = service.delete_employee(employee_id)
    result.unwrap()
    return SuccessResponse.create(result.message)
