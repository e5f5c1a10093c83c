# hostel_admin/models/people/user.py
"""
Back-office user account.

Admins (``is_admin``) bypass permission checks; everyone else is granted
exactly the permissions of their assigned role.
"""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_admin.models.base.base_model import BaseModel
from hostel_admin.models.base.enums import UserStatus
from hostel_admin.models.base.mixins import TimestampMixin
from hostel_admin.models.base.types import enum_column

if TYPE_CHECKING:
    from hostel_admin.models.rbac.role import Role

__all__ = ["User"]


class User(BaseModel, TimestampMixin):
    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(100), nullable=False, unique=True, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    status: Mapped[UserStatus] = mapped_column(
        enum_column(UserStatus),
        nullable=False,
        default=UserStatus.ACTIVE,
    )
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    user_role_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("roles.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    user_role: Mapped[Optional["Role"]] = relationship(
        "Role",
        foreign_keys=[user_role_id],
        back_populates="users",
    )

    @property
    def role_name(self) -> Optional[str]:
        return self.user_role.role_name if self.user_role else None
