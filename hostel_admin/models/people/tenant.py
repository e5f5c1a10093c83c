# hostel_admin/models/people/tenant.py
"""
Tenant model.

``room`` and ``bed`` are free-form labels ("101", "A") entered by staff.
They are matched against the derived seat layout at read time; no foreign
key ties a tenant to a seat.
"""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_admin.models.base.base_model import BaseModel
from hostel_admin.models.base.enums import TenantStatus
from hostel_admin.models.base.mixins import ContactMixin, TimestampMixin
from hostel_admin.models.base.types import enum_column

if TYPE_CHECKING:
    from hostel_admin.models.hostel.hostel import Hostel

__all__ = ["Tenant"]


class Tenant(BaseModel, ContactMixin, TimestampMixin):
    """Person leasing a bed in a hostel."""

    __tablename__ = "tenants"
    __table_args__ = (
        Index("ix_tenants_hostel_room_bed", "hostel_id", "room", "bed"),
    )

    room: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    bed: Mapped[Optional[str]] = mapped_column(String(5), nullable=True)
    lease_start: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    lease_end: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[TenantStatus] = mapped_column(
        enum_column(TenantStatus),
        nullable=False,
        default=TenantStatus.PENDING,
        index=True,
    )

    hostel_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("hostels.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    hostel: Mapped[Optional["Hostel"]] = relationship("Hostel", back_populates="tenants")

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE

    @property
    def hostel_name(self) -> Optional[str]:
        return self.hostel.name if self.hostel else None
