"""
Tenant schemas.
"""

from datetime import date
from typing import Optional

from pydantic import EmailStr, Field, field_validator, model_validator

from hostel_admin.models.base.enums import TenantStatus
from hostel_admin.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseUpdateSchema

__all__ = ["TenantCreate", "TenantUpdate", "TenantResponse", "LEASE_ORDER_MESSAGE", "lease_out_of_order"]

LEASE_ORDER_MESSAGE = "lease_end must not be before lease_start"


def _upper_bed(v: Optional[str]) -> Optional[str]:
    return v.upper() if v else v


def lease_out_of_order(lease_start: Optional[date], lease_end: Optional[date]) -> bool:
    return bool(lease_start and lease_end and lease_end < lease_start)


class TenantCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    room: Optional[str] = Field(default=None, max_length=20, examples=["101"])
    bed: Optional[str] = Field(default=None, max_length=5, examples=["A"])
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    status: TenantStatus = TenantStatus.PENDING
    hostel_id: Optional[int] = None

    @field_validator("bed")
    @classmethod
    def normalize_bed(cls, v: Optional[str]) -> Optional[str]:
        return _upper_bed(v)

    @model_validator(mode="after")
    def check_lease_dates(self) -> "TenantCreate":
        if lease_out_of_order(self.lease_start, self.lease_end):
            raise ValueError(LEASE_ORDER_MESSAGE)
        return self


class TenantUpdate(BaseUpdateSchema):
    """
    Partial tenant update. Dates sent together are checked here; a single
    date is checked against the stored one by the service.
    """

    non_nullable_fields = ("name", "status")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(default=None, max_length=50)
    room: Optional[str] = Field(default=None, max_length=20)
    bed: Optional[str] = Field(default=None, max_length=5)
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    status: Optional[TenantStatus] = None
    hostel_id: Optional[int] = None

    @field_validator("bed")
    @classmethod
    def normalize_bed(cls, v: Optional[str]) -> Optional[str]:
        return _upper_bed(v)

    @model_validator(mode="after")
    def check_lease_dates(self) -> "TenantUpdate":
        if lease_out_of_order(self.lease_start, self.lease_end):
            raise ValueError(LEASE_ORDER_MESSAGE)
        return self


class TenantResponse(BaseResponseSchema):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    room: Optional[str] = None
    bed: Optional[str] = None
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    status: TenantStatus
    hostel_id: Optional[int] = None
    hostel_name: Optional[str] = None
