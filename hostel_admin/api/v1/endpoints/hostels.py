"""
Hostel endpoints, including the derived seat layout.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from hostel_admin.api import deps
from hostel_admin.models.people import User
from hostel_admin.schemas.common import PaginatedResponse, SuccessResponse
from hostel_admin.schemas.hostel import (
    ArchitectureData,
    HostelCreate,
    HostelResponse,
    HostelStats,
    HostelUpdate,
)
from hostel_admin.services.hostel.hostel_service import HostelService

router = APIRouter(prefix="/admin/hostels", tags=["Hostels"])


@router.get("", response_model=SuccessResponse[PaginatedResponse[HostelResponse]])
def list_hostels(
    search: Optional[str] = Query(default=None, description="Match on name, city or manager"),
    city: Optional[str] = Query(default=None),
    page: int = Query(default=1, ge=1),
    page_size: Optional[int] = Query(default=None, ge=1),
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    result = service.list_hostels(search=search, city=city, page=page, page_size=page_size)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/stats", response_model=SuccessResponse[HostelStats])
def get_hostel_stats(
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    result = service.get_stats()
    return SuccessResponse.create(result.message, result.unwrap())


@router.post("", response_model=SuccessResponse[HostelResponse], status_code=status.HTTP_201_CREATED)
def create_hostel(
    payload: HostelCreate,
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    result = service.create_hostel(payload)
    return SuccessResponse.create(result.message, result.unwrap())


@router.get("/{hostel_id}", response_model=SuccessResponse[HostelResponse])
def get_hostel(
    hostel_id: int,
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    result = service.get_hostel(hostel_id)
    return SuccessResponse.create("Hostel retrieved successfully", result.unwrap())


@router.put("/{hostel_id}", response_model=SuccessResponse[HostelResponse])
def update_hostel(
    hostel_id: int,
    payload: HostelUpdate,
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    result = service.update_hostel(hostel_id, payload)
    return SuccessResponse.create(result.message, result.unwrap())


@router.delete("/{hostel_id}", response_model=SuccessResponse[None])
def delete_hostel(
    hostel_id: int,
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    result = service.delete_hostel(hostel_id)
    result.unwrap()
    return SuccessResponse.create(result.message)


@router.get("/{hostel_id}/architecture", response_model=SuccessResponse[ArchitectureData])
def get_hostel_architecture(
    hostel_id: int,
    _: User = Depends(deps.get_current_user),
    service: HostelService = Depends(deps.get_hostel_service),
):
    """Floors, rooms and seats of a hostel with current occupancy."""
    result = service.get_architecture(hostel_id)
    return SuccessResponse.create(result.message, result.unwrap())
