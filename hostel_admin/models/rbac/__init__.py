from hostel_admin.models.rbac.permission import Permission, role_permissions
from hostel_admin.models.rbac.role import Role

__all__ = ["Permission", "Role", "role_permissions"]
