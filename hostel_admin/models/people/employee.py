# hostel_admin/models/people/employee.py
"""
Employee model backing the staff and manager tables.
"""

from datetime import date
from typing import TYPE_CHECKING, Optional

from sqlalchemy import Date, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_admin.models.base.base_model import BaseModel
from hostel_admin.models.base.enums import EmployeeRole, EmployeeStatus
from hostel_admin.models.base.mixins import ContactMixin, TimestampMixin
from hostel_admin.models.base.types import enum_column

if TYPE_CHECKING:
    from hostel_admin.models.hostel.hostel import Hostel

__all__ = ["Employee"]


class Employee(BaseModel, ContactMixin, TimestampMixin):
    __tablename__ = "employees"

    role: Mapped[EmployeeRole] = mapped_column(
        enum_column(EmployeeRole),
        nullable=False,
        default=EmployeeRole.STAFF,
        index=True,
    )
    joined_at: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    status: Mapped[EmployeeStatus] = mapped_column(
        enum_column(EmployeeStatus),
        nullable=False,
        default=EmployeeStatus.ACTIVE,
    )

    hostel_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("hostels.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    hostel: Mapped[Optional["Hostel"]] = relationship("Hostel", back_populates="employees")

    @property
    def hostel_name(self) -> Optional[str]:
        return self.hostel.name if self.hostel else None
