# --- File: hostel_admin/schemas/rbac/permission.py ---
"""
Permission catalog schemas.
"""

from typing import Optional

from pydantic import Field, field_validator

from hostel_admin.models.base.enums import PermissionAction
from hostel_admin.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema

__all__ = [
    "PermissionCreate",
    "PermissionResponse",
    "PermissionBrief",
]


class PermissionCreate(BaseCreateSchema):
    resource: str = Field(..., min_length=1, max_length=100, description="Resource name, e.g. tenants")
    action: PermissionAction = Field(..., description="Action on the resource")
    description: Optional[str] = Field(default=None, max_length=255)

    @field_validator("resource")
    @classmethod
    def normalize_resource(cls, v: str) -> str:
        return v.strip().lower()


class PermissionBrief(BaseSchema):
    """Permission as listed under a role."""

    id: int
    resource: str
    action: PermissionAction
    description: Optional[str] = None


class PermissionResponse(BaseResponseSchema):
    resource: str
    action: PermissionAction
    description: Optional[str] = None
    role_count: int = Field(default=0, description="Roles holding this permission")
