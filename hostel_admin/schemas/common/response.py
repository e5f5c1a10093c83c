# --- File: hostel_admin/schemas/common/response.py ---
"""
Standard API response wrappers for success and error payloads.
"""

from typing import Any, Dict, Generic, TypeVar, Union

from pydantic import Field

from hostel_admin.schemas.common.base import BaseSchema

T = TypeVar("T")

__all__ = [
    "SuccessResponse",
    "ErrorResponse",
]


class SuccessResponse(BaseSchema, Generic[T]):
    """Standard success response."""

    success: bool = Field(default=True, description="Success flag")
    message: str = Field(..., description="Response message")
    data: Union[T, None] = Field(default=None, description="Response data")

    @classmethod
    def create(
        cls,
        message: str,
        data: Union[T, None] = None,
    ):
        """Create success response."""
        return cls(success=True, message=message, data=data)


class ErrorResponse(BaseSchema):
    """Standard error response, used for OpenAPI documentation."""

    success: bool = Field(default=False, description="Success flag")
    message: str = Field(..., description="Error message")
    error_code: Union[str, None] = Field(
        default=None,
        description="Application error code",
    )
    details: Union[Dict[str, Any], None] = Field(
        default=None,
        description="Structured error details",
    )
    timestamp: Union[str, None] = Field(
        default=None,
        description="Error timestamp",
    )
    request_id: Union[str, None] = Field(
        default=None,
        description="Id of the failed request",
    )
