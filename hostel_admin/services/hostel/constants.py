"""
Hostel service constants and configuration.
"""

from typing import Final

# Every generated room has exactly this many seats.
SEATS_PER_ROOM: Final[int] = 4
SEAT_LETTERS: Final[tuple] = ("A", "B", "C", "D")

# Room indexes are rendered with two digits ("01".."99").
MAX_ROOMS_PER_FLOOR: Final[int] = 99
MAX_FLOORS: Final[int] = 200

# Success messages
SUCCESS_HOSTEL_CREATED: Final[str] = "Hostel created successfully"
SUCCESS_HOSTEL_UPDATED: Final[str] = "Hostel updated successfully"
SUCCESS_HOSTEL_DELETED: Final[str] = "Hostel deleted successfully"
SUCCESS_HOSTELS_FETCHED: Final[str] = "Hostels fetched successfully"
SUCCESS_ARCHITECTURE_FETCHED: Final[str] = "Hostel architecture fetched successfully"
SUCCESS_STATS_FETCHED: Final[str] = "Hostel statistics fetched successfully"
