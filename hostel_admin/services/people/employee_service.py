"""
Employee service: staff and manager records.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import EmployeeNotFoundError, HostelNotFoundError
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.base.enums import EmployeeRole, EmployeeStatus
from hostel_admin.models.hostel import Hostel
from hostel_admin.models.people import Employee
from hostel_admin.repositories.people_repository import EmployeeRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.people import EmployeeCreate, EmployeeResponse, EmployeeUpdate
from hostel_admin.services.base import BaseService, ServiceResult


class EmployeeService(BaseService[Employee, EmployeeRepository]):
    def __init__(self, repository: EmployeeRepository, db_session: Session):
        super().__init__(repository, db_session)

    def create_employee(self, request: EmployeeCreate) -> ServiceResult[EmployeeResponse]:
        try:
            with self.transaction():
                self._check_hostel(request.hostel_id)
                employee = self.repository.create(request.model_dump())
            return ServiceResult.success(
                EmployeeResponse.model_validate(employee),
                message="Employee created successfully",
            )
        except Exception as e:
            return self._handle_exception(e, "create employee")

    def get_employee(self, employee_id: int) -> ServiceResult[EmployeeResponse]:
        try:
            employee = self._get_or_raise(employee_id)
            return ServiceResult.success(EmployeeResponse.model_validate(employee), message="Employee fetched successfully")
        except Exception as e:
            return self._handle_exception(e, "get employee", employee_id)

    def update_employee(self, employee_id: int, request: EmployeeUpdate) -> ServiceResult[EmployeeResponse]:
        try:
            data = request.model_dump(exclude_unset=True)
            with self.transaction():
                employee = self._get_or_raise(employee_id)
                if data.get("hostel_id") is not None:
                    self._check_hostel(data["hostel_id"])
                employee = self.repository.update(employee, data)
            return ServiceResult.success(
                EmployeeResponse.model_validate(employee),
                message="Employee updated successfully",
            )
        except Exception as e:
            return self._handle_exception(e, "update employee", employee_id)

    def update_status(self, employee_id: int, status: EmployeeStatus) -> ServiceResult[EmployeeResponse]:
        try:
            with self.transaction():
                employee = self.repository.update(self._get_or_raise(employee_id), {"status": status})
            self._logger.info(f"Employee {employee_id} marked {status.value}")
            return ServiceResult.success(
                EmployeeResponse.model_validate(employee),
                message="Employee status updated successfully",
            )
        except Exception as e:
            return self._handle_exception(e, "update employee status", employee_id)

    def delete_employee(self, employee_id: int) -> ServiceResult[None]:
        try:
            with self.transaction():
                self.repository.delete(self._get_or_raise(employee_id))
            return ServiceResult.success(None, message="Employee deleted successfully")
        except Exception as e:
            return self._handle_exception(e, "delete employee", employee_id)

    def list_employees(
        self,
        role: Optional[EmployeeRole] = None,
        hostel_id: Optional[int] = None,
        status: Optional[EmployeeStatus] = None,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[EmployeeResponse]]:
        try:
            params = normalize_pagination(page, page_size)
            items, total = self.repository.search(
                role=role,
                hostel_id=hostel_id,
                status=status,
                query=search,
                offset=params.offset,
                limit=params.limit,
            )
            result = paginate_items(
                items=items,
                total_items=total,
                params=params,
                mapper=EmployeeResponse.model_validate,
            )
            return ServiceResult.success(result, message="Employees fetched successfully")
        except Exception as e:
            return self._handle_exception(e, "list employees")

    # -------------------------------------------------------------------------

    def _get_or_raise(self, employee_id: int) -> Employee:
        employee = self.repository.get(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def _check_hostel(self, hostel_id: Optional[int]) -> None:
        if hostel_id is not None and self.db.get(Hostel, hostel_id) is None:
            raise HostelNotFoundError(hostel_id)
