# --- File: hostel_admin/schemas/hostel/architecture.py ---
"""
Architecture data schemas: the derived floor -> room -> seat tree of a
hostel together with its occupancy aggregates.
"""

from typing import List, Optional

from pydantic import Field, computed_field

from hostel_admin.schemas.common.base import BaseSchema

__all__ = [
    "SeatSchema",
    "RoomSchema",
    "FloorSchema",
    "ArchitectureData",
]


class SeatSchema(BaseSchema):
    """Single bed-level seat."""

    id: str = Field(..., description='Seat id, "{floor}-{room}-{letter}" e.g. "2-01-A"')
    seat_number: str = Field(..., description="Seat letter (A-D)")
    is_occupied: bool = Field(default=False, description="Occupied by an active tenant")
    tenant_name: Optional[str] = Field(default=None, description="Occupant name")
    tenant_id: Optional[int] = Field(default=None, description="Occupant id")


class RoomSchema(BaseSchema):
    id: str = Field(..., description='Room id, "{floor}-{room}" e.g. "2-01"')
    floor_number: int = Field(..., ge=1)
    room_number: str = Field(..., description='Two digit room index, e.g. "01"')
    total_seats: int = Field(..., ge=0)
    seats: List[SeatSchema] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def occupied_seats(self) -> int:
        return sum(1 for seat in self.seats if seat.is_occupied)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def available_seats(self) -> int:
        return self.total_seats - self.occupied_seats


class FloorSchema(BaseSchema):
    floor_number: int = Field(..., ge=1)
    rooms: List[RoomSchema] = Field(default_factory=list)


class ArchitectureData(BaseSchema):
    """
    Complete derived structure of a hostel.

    ``occupied_seats + available_seats == total_seats`` always holds.
    """

    hostel_id: Optional[int] = Field(default=None, description="Hostel the tree was built for")
    floors: List[FloorSchema] = Field(default_factory=list)
    total_rooms: int = Field(..., ge=0)
    total_seats: int = Field(..., ge=0)
    occupied_seats: int = Field(..., ge=0)
    available_seats: int = Field(..., ge=0)
    unplaced_tenant_ids: List[int] = Field(
        default_factory=list,
        description="Active tenants whose room/bed matches no generated seat",
    )
    seat_conflicts: List[str] = Field(
        default_factory=list,
        description="Seat ids claimed by more than one active tenant",
    )
