"""
Employee schemas.
"""

from datetime import date
from typing import Optional

from pydantic import EmailStr, Field

from hostel_admin.models.base.enums import EmployeeRole, EmployeeStatus
from hostel_admin.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema

__all__ = ["EmployeeCreate", "EmployeeUpdate", "EmployeeStatusUpdate", "EmployeeResponse"]


class EmployeeCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    role: EmployeeRole = EmployeeRole.STAFF
    joined_at: Optional[date] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    hostel_id: Optional[int] = None


class EmployeeUpdate(BaseUpdateSchema):
    non_nullable_fields = ("name", "role", "status")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    role: Optional[EmployeeRole] = None
    joined_at: Optional[date] = None
    status: Optional[EmployeeStatus] = None
    hostel_id: Optional[int] = None


class EmployeeStatusUpdate(BaseSchema):
    status: EmployeeStatus


class EmployeeResponse(BaseResponseSchema):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    role: EmployeeRole
    joined_at: Optional[date] = None
    status: EmployeeStatus
    hostel_id: Optional[int] = None
    hostel_name: Optional[str] = None
