from hostel_admin.repositories.base import BaseRepository
from hostel_admin.repositories.hostel_repository import HostelRepository
from hostel_admin.repositories.people_repository import EmployeeRepository, TenantRepository, UserRepository
from hostel_admin.repositories.rbac_repository import PermissionRepository, RoleRepository

__all__ = [
    "BaseRepository",
    "HostelRepository",
    "TenantRepository",
    "EmployeeRepository",
    "UserRepository",
    "PermissionRepository",
    "RoleRepository",
]
