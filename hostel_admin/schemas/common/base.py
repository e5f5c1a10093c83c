# --- File: hostel_admin/schemas/common/base.py ---
"""
Base schema classes with common fields and configurations.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

__all__ = [
    "BaseSchema",
    "TimestampMixin",
    "BaseDBSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas inherit from this to ensure
    consistent behaviour (ORM loading, whitespace stripping, etc.).
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class TimestampMixin(BaseModel):
    """Mixin for timestamp fields."""

    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class BaseDBSchema(BaseSchema, TimestampMixin):
    """Base schema for database entities with ID and timestamps."""

    id: int = Field(..., description="Unique identifier")


class BaseCreateSchema(BaseSchema):
    """Base schema for create operations."""
    pass


class BaseUpdateSchema(BaseSchema):
    """
    Base schema for update operations.

    Note:
        Subclasses intended for partial updates declare their fields as
        Optional[...] with a None default; only fields explicitly set by
        the caller are applied (``model_dump(exclude_unset=True)``).
        Fields named in ``non_nullable_fields`` may be omitted but not
        cleared with an explicit null.
    """

    non_nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_cleared_required_fields(self):
        cleared = [
            name for name in self.non_nullable_fields
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if cleared:
            raise ValueError(f"{', '.join(cleared)} cannot be null")
        return self


class BaseResponseSchema(BaseDBSchema):
    """Base schema for API responses."""
    pass
