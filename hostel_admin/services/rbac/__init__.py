from hostel_admin.services.rbac.access_control import AccessControlService
from hostel_admin.services.rbac.permission_catalog import PermissionCatalog
from hostel_admin.services.rbac.permission_mapper import extract_permission_ids, map_permissions_to_form
from hostel_admin.services.rbac.permission_service import PermissionService
from hostel_admin.services.rbac.role_service import RoleService

__all__ = [
    "AccessControlService",
    "PermissionCatalog",
    "PermissionService",
    "RoleService",
    "extract_permission_ids",
    "map_permissions_to_form",
]
