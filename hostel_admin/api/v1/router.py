"""
API v1 Router - Main Entry Point
Aggregates all v1 admin endpoints.
"""

from fastapi import APIRouter

from hostel_admin.api.v1.endpoints import employees, hostels, permissions, roles, tables, tenants, users
from hostel_admin.core.logging import get_logger
from hostel_admin.schemas.common import ErrorResponse

logger = get_logger(__name__)

router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request"},
        401: {"model": ErrorResponse, "description": "Unauthorized"},
        403: {"model": ErrorResponse, "description": "Forbidden"},
        404: {"model": ErrorResponse, "description": "Not Found"},
        409: {"model": ErrorResponse, "description": "Conflict"},
        422: {"model": ErrorResponse, "description": "Validation Error"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    }
)

for module in (hostels, tenants, employees, tables, users, permissions, roles):
    router.include_router(module.router)

logger.debug(f"API v1 router ready with {len(router.routes)} routes")
