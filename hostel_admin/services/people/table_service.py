"""
Flat paged listings behind the admin people tables.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostel_admin.core.logging import get_logger
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.base.enums import EmployeeRole
from hostel_admin.repositories.people_repository import EmployeeRepository, TenantRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.people import EmployeeResponse, TenantResponse
from hostel_admin.services.base import ServiceResult

logger = get_logger(__name__)


class PeopleTableService:
    """Read-only listings for the tenants, staff and managers tables."""

    def __init__(self, db_session: Session):
        self.db = db_session
        self.tenants = TenantRepository(db_session)
        self.employees = EmployeeRepository(db_session)

    def tenants_table(
        self,
        search: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[TenantResponse]]:
        params = normalize_pagination(page, page_size)
        items, total = self.tenants.search(query=search, offset=params.offset, limit=params.limit)
        return ServiceResult.success(
            paginate_items(items=items, total_items=total, params=params, mapper=TenantResponse.model_validate)
        )

    def staff_table(self, search: Optional[str] = None, page: Optional[int] = None, page_size: Optional[int] = None):
        return self._employees_table(EmployeeRole.STAFF, search, page, page_size)

    def managers_table(self, search: Optional[str] = None, page: Optional[int] = None, page_size: Optional[int] = None):
        return self._employees_table(EmployeeRole.MANAGER, search, page, page_size)

    def _employees_table(
        self,
        role: EmployeeRole,
        search: Optional[str],
        page: Optional[int],
        page_size: Optional[int],
    ) -> ServiceResult[PaginatedResponse[EmployeeResponse]]:
        params = normalize_pagination(page, page_size)
        items, total = self.employees.search(role=role, query=search, offset=params.offset, limit=params.limit)
        logger.debug(f"{role.value} table: {len(items)} of {total} rows")
        return ServiceResult.success(
            paginate_items(items=items, total_items=total, params=params, mapper=EmployeeResponse.model_validate)
        )
