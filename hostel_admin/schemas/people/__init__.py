from hostel_admin.schemas.people.employee import (
    EmployeeCreate,
    EmployeeResponse,
    EmployeeStatusUpdate,
    EmployeeUpdate,
)
from hostel_admin.schemas.people.tenant import TenantCreate, TenantResponse, TenantUpdate
from hostel_admin.schemas.people.user import UserCreate, UserResponse, UserRoleAssign, UserUpdate

__all__ = [
    "TenantCreate",
    "TenantUpdate",
    "TenantResponse",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeStatusUpdate",
    "EmployeeResponse",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserRoleAssign",
]
