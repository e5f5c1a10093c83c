# hostel_admin/models/__init__.py
"""
Importing this package registers every table on ``Base.metadata``.
"""

from hostel_admin.models.base import Base, BaseModel
from hostel_admin.models.hostel import Hostel
from hostel_admin.models.people import Employee, Tenant, User
from hostel_admin.models.rbac import Permission, Role, role_permissions

__all__ = [
    "Base",
    "BaseModel",
    "Hostel",
    "Tenant",
    "Employee",
    "User",
    "Permission",
    "Role",
    "role_permissions",
]
