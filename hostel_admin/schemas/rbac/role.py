# --- File: hostel_admin/schemas/rbac/role.py ---
"""
Role schemas, including the nested permission form used by the role
editor (camelCase on the wire, e.g. ``viewList``).
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from hostel_admin.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema
from hostel_admin.schemas.rbac.permission import PermissionBrief

__all__ = [
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


class RoleCreate(BaseCreateSchema):
    role_name: str = Field(..., alias="rolename", min_length=1, max_length=100)
    description: Optional[str] = Field(default=None)
    permissions: List[int] = Field(default_factory=list, description="Permission ids to grant")
    user_id: Optional[int] = Field(
        default=None,
        alias="userId",
        description="Owner of a private role; honoured for admins only",
    )


class RoleUpdate(BaseUpdateSchema):
    role_name: Optional[str] = Field(default=None, alias="rolename", min_length=1, max_length=100)
    description: Optional[str] = None
    user_id: Optional[int] = Field(default=None, alias="userId")
    permissions: Optional[List[int]] = None


class RolePermissionsUpdate(BaseSchema):
    permissions: List[int] = Field(..., description="Complete set of permission ids for the role")


class RoleResponse(BaseResponseSchema):
    role_name: str
    description: Optional[str] = None
    owner_user_id: Optional[int] = None
    permissions: List[PermissionBrief] = Field(default_factory=list)
    user_count: int = 0


# --------------------------------------------------------------------------- #
# Role editor form
# --------------------------------------------------------------------------- #

class _FormSchema(BaseSchema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ViewLevel(str, Enum):
    """Tri-state view access used by the tasks & maintenance section."""
    NONE = "none"
    VIEW = "view"
    EDIT = "edit"


class EntityPermissions(_FormSchema):
    view_list: bool = False
    view_one: bool = False
    create: bool = False
    edit: bool = False
    delete: bool = False


class TaskPermissions(_FormSchema):
    view_list: ViewLevel = ViewLevel.NONE
    view_one: ViewLevel = ViewLevel.NONE
    create: bool = False
    edit: bool = False
    delete: bool = False


class RoleFormPermissions(_FormSchema):
    people: Dict[str, EntityPermissions] = Field(default_factory=dict)
    tasks_and_maintenance: Dict[str, TaskPermissions] = Field(default_factory=dict)


class RoleFormData(_FormSchema):
    role_name: str = ""
    role_description: str = ""
    permissions: RoleFormPermissions = Field(default_factory=RoleFormPermissions)
