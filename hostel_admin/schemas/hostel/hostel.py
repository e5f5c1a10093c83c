"""
Hostel request and response schemas.
"""

from typing import Optional

from pydantic import Field, field_validator

from hostel_admin.models.base.enums import HostelStatus
from hostel_admin.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema, BaseUpdateSchema
from hostel_admin.services.hostel.constants import MAX_FLOORS, MAX_ROOMS_PER_FLOOR

__all__ = [
    "HostelCreate",
    "HostelUpdate",
    "HostelResponse",
    "HostelStats",
]


class HostelCreate(BaseCreateSchema):
    name: str = Field(..., min_length=1, max_length=255, examples=["Green Valley Hostel"])
    street: Optional[str] = Field(default=None, max_length=255)
    city: str = Field(..., min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)

    total_floors: int = Field(..., ge=1, le=MAX_FLOORS, description="Number of floors")
    rooms_per_floor: int = Field(
        ...,
        ge=1,
        le=MAX_ROOMS_PER_FLOOR,
        description="Rooms on every floor; room numbers use two digits",
    )

    manager_name: Optional[str] = Field(default=None, max_length=255)
    manager_phone: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = None
    status: HostelStatus = HostelStatus.ACTIVE

    @field_validator("name", "city")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be blank")
        return v


class HostelUpdate(BaseUpdateSchema):
    non_nullable_fields = ("name", "city", "total_floors", "rooms_per_floor", "status")

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    street: Optional[str] = Field(default=None, max_length=255)
    city: Optional[str] = Field(default=None, min_length=1, max_length=100)
    state: Optional[str] = Field(default=None, max_length=100)
    country: Optional[str] = Field(default=None, max_length=100)
    zip_code: Optional[str] = Field(default=None, max_length=20)
    total_floors: Optional[int] = Field(default=None, ge=1, le=MAX_FLOORS)
    rooms_per_floor: Optional[int] = Field(default=None, ge=1, le=MAX_ROOMS_PER_FLOOR)
    manager_name: Optional[str] = Field(default=None, max_length=255)
    manager_phone: Optional[str] = Field(default=None, max_length=50)
    notes: Optional[str] = None
    status: Optional[HostelStatus] = None


class HostelResponse(BaseResponseSchema):
    name: str
    street: Optional[str] = None
    city: str
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    total_floors: int
    rooms_per_floor: int
    total_rooms: int
    manager_name: Optional[str] = None
    manager_phone: Optional[str] = None
    notes: Optional[str] = None
    status: HostelStatus


class HostelStats(BaseSchema):
    """Portfolio-wide occupancy summary."""

    total_hostels: int = Field(..., ge=0)
    total_rooms: int = Field(..., ge=0)
    total_capacity: int = Field(..., ge=0, description="Sum of floors x rooms per floor across hostels")
    total_seats: int = Field(..., ge=0, description="Seats across all hostels")
    occupied_rooms: int = Field(..., ge=0, description="Rooms with at least one occupied seat")
    occupied_seats: int = Field(..., ge=0)
    occupancy_rate: float = Field(..., ge=0, le=100, description="Occupied seats as a percentage of capacity")
