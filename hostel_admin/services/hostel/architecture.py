# hostel_admin/services/hostel/architecture.py
"""
Occupancy model builder.

Synthesizes the floor -> room -> seat tree of a hostel from its configured
floor and room counts and joins the tenant list against it. Nothing here is
persisted; the tree is rebuilt on every request.

Seat matching rules:
- a tenant matches a seat when ``tenant.room == f"{floor}{room:02}"`` and
  ``tenant.bed == seat letter``;
- only tenants whose status is ``Active`` occupy seats;
- when several active tenants claim one seat, the first one in input order
  is the occupant and the seat is reported in ``seat_conflicts``;
- active tenants that match no generated seat are ignored for occupancy and
  reported in ``unplaced_tenant_ids``.
"""

from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from hostel_admin.core.exceptions import create_validation_error
from hostel_admin.core.logging import get_logger
from hostel_admin.models.base.enums import TenantStatus
from hostel_admin.schemas.hostel.architecture import (
    ArchitectureData,
    FloorSchema,
    RoomSchema,
    SeatSchema,
)
from hostel_admin.services.hostel.constants import SEAT_LETTERS, SEATS_PER_ROOM

logger = get_logger(__name__)

SeatKey = Tuple[str, str]


class TenantLike(Protocol):
    id: Any
    name: Any
    room: Optional[str]
    bed: Optional[str]
    status: Any


def room_label(floor_number: int, room_index: int) -> str:
    """Room number as tenants record it, e.g. floor 1 room 1 -> "101"."""
    return f"{floor_number}{room_index:02d}"


def room_id(floor_number: int, room_index: int) -> str:
    return f"{floor_number}-{room_index:02d}"


def seat_id(floor_number: int, room_index: int, letter: str) -> str:
    return f"{room_id(floor_number, room_index)}-{letter}"


def _normalize(value: Optional[str]) -> str:
    return str(value).strip() if value is not None else ""


def is_active(tenant: TenantLike) -> bool:
    status = tenant.status
    value = status.value if isinstance(status, TenantStatus) else status
    return value == TenantStatus.ACTIVE.value


def index_active_tenants(tenants: Iterable[TenantLike]) -> Tuple[Dict[SeatKey, TenantLike], Dict[SeatKey, List[Any]]]:
    """
    Index active tenants by (room label, bed letter).

    Returns the occupant per seat key (first active tenant wins) and, for
    keys claimed more than once, the ids of every claimant.
    """
    occupants: Dict[SeatKey, TenantLike] = {}
    claims: Dict[SeatKey, List[Any]] = {}

    for tenant in tenants:
        if not is_active(tenant):
            continue
        key = (_normalize(tenant.room), _normalize(tenant.bed).upper())
        claims.setdefault(key, []).append(tenant.id)
        occupants.setdefault(key, tenant)

    duplicates = {key: ids for key, ids in claims.items() if len(ids) > 1}
    return occupants, duplicates


def validate_layout(total_floors: int, rooms_per_floor: int) -> None:
    field_errors: Dict[str, List[str]] = {}
    if not isinstance(total_floors, int) or total_floors <= 0:
        field_errors["total_floors"] = ["must be a positive integer"]
    if not isinstance(rooms_per_floor, int) or rooms_per_floor <= 0:
        field_errors["rooms_per_floor"] = ["must be a positive integer"]
    if field_errors:
        raise create_validation_error(field_errors)


def build_architecture(
    total_floors: int,
    rooms_per_floor: int,
    tenants: Iterable[TenantLike],
    hostel_id: Optional[int] = None,
) -> ArchitectureData:
    """
    Build the seat tree and occupancy counters for a hostel layout.

    Raises:
        ValidationError: if either dimension is not a positive integer.
    """
    validate_layout(total_floors, rooms_per_floor)
    tenants = list(tenants)
    occupants, duplicates = index_active_tenants(tenants)

    floors: List[FloorSchema] = []
    placed_keys = set()
    conflicts: List[str] = []
    total_rooms = 0
    total_seats = 0
    occupied_seats = 0

    for floor_number in range(1, total_floors + 1):
        rooms: List[RoomSchema] = []

        for room_index in range(1, rooms_per_floor + 1):
            label = room_label(floor_number, room_index)
            seats: List[SeatSchema] = []

            for letter in SEAT_LETTERS[:SEATS_PER_ROOM]:
                key = (label, letter)
                occupant = occupants.get(key)
                sid = seat_id(floor_number, room_index, letter)

                seats.append(
                    SeatSchema(
                        id=sid,
                        seat_number=letter,
                        is_occupied=occupant is not None,
                        tenant_name=occupant.name if occupant is not None else None,
                        tenant_id=occupant.id if occupant is not None else None,
                    )
                )

                if occupant is not None:
                    occupied_seats += 1
                    placed_keys.add(key)
                if key in duplicates:
                    conflicts.append(sid)
                total_seats += 1

            rooms.append(
                RoomSchema(
                    id=room_id(floor_number, room_index),
                    floor_number=floor_number,
                    room_number=f"{room_index:02d}",
                    total_seats=SEATS_PER_ROOM,
                    seats=seats,
                )
            )
            total_rooms += 1

        floors.append(FloorSchema(floor_number=floor_number, rooms=rooms))

    unplaced = [
        tenant.id
        for tenant in tenants
        if is_active(tenant)
        and (_normalize(tenant.room), _normalize(tenant.bed).upper()) not in placed_keys
    ]

    if conflicts:
        logger.warning(
            f"Seats claimed by more than one active tenant: {', '.join(conflicts)}",
            extra={"hostel_id": hostel_id},
        )
    if unplaced:
        logger.debug(
            f"{len(unplaced)} active tenant(s) reference seats outside the layout",
            extra={"hostel_id": hostel_id},
        )

    return ArchitectureData(
        hostel_id=hostel_id,
        floors=floors,
        total_rooms=total_rooms,
        total_seats=total_seats,
        occupied_seats=occupied_seats,
        available_seats=total_seats - occupied_seats,
        unplaced_tenant_ids=unplaced,
        seat_conflicts=conflicts,
    )
