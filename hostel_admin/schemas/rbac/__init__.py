from hostel_admin.schemas.rbac.permission import PermissionBrief, PermissionCreate, PermissionResponse
from hostel_admin.schemas.rbac.role import (
    EntityPermissions,
    RoleCreate,
    RoleFormData,
    RoleFormPermissions,
    RolePermissionsUpdate,
    RoleResponse,
    RoleUpdate,
    TaskPermissions,
    ViewLevel,
)

__all__ = [
    "PermissionCreate",
    "PermissionResponse",
    "PermissionBrief",
    "RoleCreate",
    "RoleUpdate",
    "RolePermissionsUpdate",
    "RoleResponse",
    "ViewLevel",
    "EntityPermissions",
    "TaskPermissions",
    "RoleFormPermissions",
    "RoleFormData",
]
