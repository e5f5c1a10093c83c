"""
User account schemas.
"""

from typing import Optional

from pydantic import EmailStr, Field

from hostel_admin.models.base.enums import UserStatus
from hostel_admin.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = ["UserCreate", "UserUpdate", "UserResponse", "UserRoleAssign"]


class UserCreate(BaseCreateSchema):
    username: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    status: UserStatus = UserStatus.ACTIVE
    is_admin: bool = False
    user_role_id: Optional[int] = None


class UserUpdate(BaseUpdateSchema):
    non_nullable_fields = ("username", "email", "status", "is_admin")

    username: Optional[str] = Field(default=None, min_length=3, max_length=100)
    email: Optional[EmailStr] = None
    status: Optional[UserStatus] = None
    is_admin: Optional[bool] = None
    user_role_id: Optional[int] = None


class UserRoleAssign(BaseSchema):
    """``None`` removes the user's role."""

    role_id: Optional[int] = Field(default=None, alias="roleId")


class UserResponse(BaseResponseSchema):
    username: str
    email: str
    status: UserStatus
    is_admin: bool
    user_role_id: Optional[int] = None
    role_name: Optional[str] = None
