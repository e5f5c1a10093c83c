# hostel_admin/models/hostel/hostel.py
"""
Hostel model.

A hostel's physical layout is described only by ``total_floors`` and
``rooms_per_floor``; floors, rooms and seats are derived on demand.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_admin.models.base.base_model import BaseModel
from hostel_admin.models.base.enums import HostelStatus
from hostel_admin.models.base.mixins import TimestampMixin
from hostel_admin.models.base.types import enum_column

if TYPE_CHECKING:
    from hostel_admin.models.people.employee import Employee
    from hostel_admin.models.people.tenant import Tenant

__all__ = ["Hostel"]


class Hostel(BaseModel, TimestampMixin):
    """Hostel property managed from the back office."""

    __tablename__ = "hostels"
    __table_args__ = (
        CheckConstraint("total_floors > 0", name="ck_hostels_total_floors_positive"),
        CheckConstraint("rooms_per_floor > 0", name="ck_hostels_rooms_per_floor_positive"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)

    # Address
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    zip_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Layout
    total_floors: Mapped[int] = mapped_column(Integer, nullable=False)
    rooms_per_floor: Mapped[int] = mapped_column(Integer, nullable=False)

    # Manager contact
    manager_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    manager_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    status: Mapped[HostelStatus] = mapped_column(
        enum_column(HostelStatus),
        nullable=False,
        default=HostelStatus.ACTIVE,
        index=True,
    )

    tenants: Mapped[List["Tenant"]] = relationship(
        "Tenant",
        back_populates="hostel",
        passive_deletes=True,
    )
    employees: Mapped[List["Employee"]] = relationship(
        "Employee",
        back_populates="hostel",
        passive_deletes=True,
    )

    @property
    def total_rooms(self) -> int:
        return self.total_floors * self.rooms_per_floor
