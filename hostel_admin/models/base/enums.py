"""
Database enums mirroring schema enums.

Values are the exact strings exchanged with the admin dashboard.
"""

import enum


class HostelStatus(str, enum.Enum):
    """Hostel operational status."""
    ACTIVE = "active"
    INACTIVE = "inactive"
    UNDER_MAINTENANCE = "under_maintenance"


class TenantStatus(str, enum.Enum):
    """Tenant lease status. Only ACTIVE tenants occupy seats."""
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    PENDING = "Pending"


class EmployeeStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class EmployeeRole(str, enum.Enum):
    """Employee categories listed by the people tables."""
    STAFF = "staff"
    MANAGER = "manager"


class UserStatus(str, enum.Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"


class PermissionAction(str, enum.Enum):
    """Actions of the resource x action permission matrix."""
    VIEW_LIST = "view_list"
    VIEW_ONE = "view_one"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"
