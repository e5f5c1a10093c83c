from hostel_admin.schemas.hostel.architecture import ArchitectureData, FloorSchema, RoomSchema, SeatSchema
from hostel_admin.schemas.hostel.hostel import HostelCreate, HostelResponse, HostelStats, HostelUpdate

__all__ = [
    "SeatSchema",
    "RoomSchema",
    "FloorSchema",
    "ArchitectureData",
    "HostelCreate",
    "HostelUpdate",
    "HostelResponse",
    "HostelStats",
]
