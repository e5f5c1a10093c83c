from hostel_admin.services.people.employee_service import EmployeeService
from hostel_admin.services.people.table_service import PeopleTableService
from hostel_admin.services.people.tenant_service import TenantService
from hostel_admin.services.people.user_service import UserService

__all__ = ["TenantService", "EmployeeService", "PeopleTableService", "UserService"]
