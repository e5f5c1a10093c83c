# --- File: hostel_admin/models/base/__init__.py ---
"""
Base models package.

Provides the declarative base, mixins and enums for all database models.
"""

from hostel_admin.models.base.base_model import Base, BaseModel
from hostel_admin.models.base.enums import (
    EmployeeRole,
    EmployeeStatus,
    HostelStatus,
    PermissionAction,
    TenantStatus,
    UserStatus,
)
from hostel_admin.models.base.mixins import ContactMixin, TimestampMixin

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "ContactMixin",
    "HostelStatus",
    "TenantStatus",
    "EmployeeStatus",
    "EmployeeRole",
    "UserStatus",
    "PermissionAction",
]
