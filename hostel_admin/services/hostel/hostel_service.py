"""
Core hostel service: CRUD, search, derived architecture and portfolio stats.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import DuplicateEntryError, HostelNotFoundError
from hostel_admin.core.pagination import normalize_pagination, paginate_items
from hostel_admin.models.hostel import Hostel
from hostel_admin.repositories.hostel_repository import HostelRepository
from hostel_admin.schemas.common.pagination import PaginatedResponse
from hostel_admin.schemas.hostel import (
    ArchitectureData,
    HostelCreate,
    HostelResponse,
    HostelStats,
    HostelUpdate,
)
from hostel_admin.services.base import BaseService, ServiceResult
from hostel_admin.services.hostel.architecture import build_architecture
from hostel_admin.services.hostel.constants import (
    SUCCESS_ARCHITECTURE_FETCHED,
    SUCCESS_HOSTEL_CREATED,
    SUCCESS_HOSTEL_DELETED,
    SUCCESS_HOSTEL_UPDATED,
    SUCCESS_HOSTELS_FETCHED,
    SUCCESS_STATS_FETCHED,
)


class HostelService(BaseService[Hostel, HostelRepository]):
    """
    High-level hostel operations.

    The floor/room/seat layout is never stored; it is rebuilt from the
    hostel dimensions and its tenants whenever it is requested.
    """

    def __init__(self, repository: HostelRepository, db_session: Session):
        super().__init__(repository, db_session)

    # =========================================================================
    # CRUD Operations
    # =========================================================================

    def create_hostel(self, request: HostelCreate) -> ServiceResult[HostelResponse]:
        try:
            self._logger.info(f"Creating hostel: {request.name}")
            with self.transaction():
                self._ensure_unique_name(request.name)
                hostel = self.repository.create(request.model_dump())
            return ServiceResult.success(HostelResponse.model_validate(hostel), message=SUCCESS_HOSTEL_CREATED)
        except Exception as e:
            return self._handle_exception(e, "create hostel")

    def get_hostel(self, hostel_id: int) -> ServiceResult[HostelResponse]:
        try:
            hostel = self._get_or_raise(hostel_id)
            return ServiceResult.success(HostelResponse.model_validate(hostel))
        except Exception as e:
            return self._handle_exception(e, "get hostel", hostel_id)

    def update_hostel(self, hostel_id: int, request: HostelUpdate) -> ServiceResult[HostelResponse]:
        try:
            data = request.model_dump(exclude_unset=True)
            with self.transaction():
                hostel = self._get_or_raise(hostel_id)
                if "name" in data:
                    self._ensure_unique_name(data["name"], exclude_id=hostel_id)
                hostel = self.repository.update(hostel, data)
            self._logger.info(f"Hostel {hostel_id} updated: {sorted(data)}")
            return ServiceResult.success(HostelResponse.model_validate(hostel), message=SUCCESS_HOSTEL_UPDATED)
        except Exception as e:
            return self._handle_exception(e, "update hostel", hostel_id)

    def delete_hostel(self, hostel_id: int) -> ServiceResult[None]:
        """Delete a hostel; its tenants and employees keep existing unassigned."""
        try:
            with self.transaction():
                hostel = self._get_or_raise(hostel_id)
                for person in list(hostel.tenants) + list(hostel.employees):
                    person.hostel_id = None
                self.repository.delete(hostel)
            return ServiceResult.success(None, message=SUCCESS_HOSTEL_DELETED)
        except Exception as e:
            return self._handle_exception(e, "delete hostel", hostel_id)

    def list_hostels(
        self,
        search: Optional[str] = None,
        city: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ServiceResult[PaginatedResponse[HostelResponse]]:
        """List hostels, optionally filtered by a free-text query and a city."""
        try:
            params = normalize_pagination(page, page_size)
            items, total = self.repository.search(
                query=search,
                city=city,
                offset=params.offset,
                limit=params.limit,
            )
            result = paginate_items(
                items=items,
                total_items=total,
                params=params,
                mapper=HostelResponse.model_validate,
            )
            return ServiceResult.success(result, message=SUCCESS_HOSTELS_FETCHED)
        except Exception as e:
            return self._handle_exception(e, "list hostels")

    # =========================================================================
    # Layout & Occupancy
    # =========================================================================

    def get_architecture(self, hostel_id: int) -> ServiceResult[ArchitectureData]:
        """
        Build the floor -> room -> seat tree of a hostel with its occupancy.
        """
        try:
            hostel = self._get_or_raise(hostel_id)
            tenants = self.repository.tenants_of(hostel_id)
            data = build_architecture(
                hostel.total_floors,
                hostel.rooms_per_floor,
                tenants,
                hostel_id=hostel.id,
            )
            return ServiceResult.success(data, message=SUCCESS_ARCHITECTURE_FETCHED)
        except Exception as e:
            return self._handle_exception(e, "get hostel architecture", hostel_id)

    def get_total_capacity(self) -> int:
        """Total rooms across every hostel (sum of floors x rooms per floor)."""
        _, total_rooms = self.repository.layout_totals()
        return total_rooms

    def get_stats(self) -> ServiceResult[HostelStats]:
        try:
            hostels: List[Hostel] = self.repository.list()
            total_rooms = 0
            total_seats = 0
            occupied_rooms = 0
            occupied_seats = 0

            for hostel in hostels:
                data = build_architecture(
                    hostel.total_floors,
                    hostel.rooms_per_floor,
                    self.repository.tenants_of(hostel.id),
                    hostel_id=hostel.id,
                )
                total_rooms += data.total_rooms
                total_seats += data.total_seats
                occupied_seats += data.occupied_seats
                occupied_rooms += sum(
                    1 for floor in data.floors for room in floor.rooms if room.occupied_seats > 0
                )

            rate = round(occupied_seats / total_seats * 100, 2) if total_seats else 0.0
            stats = HostelStats(
                total_hostels=len(hostels),
                total_rooms=total_rooms,
                total_capacity=self.get_total_capacity(),
                total_seats=total_seats,
                occupied_rooms=occupied_rooms,
                occupied_seats=occupied_seats,
                occupancy_rate=rate,
            )
            return ServiceResult.success(stats, message=SUCCESS_STATS_FETCHED)
        except Exception as e:
            return self._handle_exception(e, "get hostel stats")

    # =========================================================================
    # Helpers
    # =========================================================================

    def _get_or_raise(self, hostel_id: int) -> Hostel:
        hostel = self.repository.get(hostel_id)
        if hostel is None:
            raise HostelNotFoundError(hostel_id)
        return hostel

    def _ensure_unique_name(self, name: str, exclude_id: Optional[int] = None) -> None:
        existing = self.repository.find_by_name(name)
        if existing is not None and existing.id != exclude_id:
            raise DuplicateEntryError(
                f"Hostel with name '{name}' already exists",
                details={"field": "name"},
            )
