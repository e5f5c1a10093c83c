# hostel_admin/models/rbac/role.py
"""
User role model.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_admin.models.base.base_model import BaseModel
from hostel_admin.models.base.mixins import TimestampMixin
from hostel_admin.models.rbac.permission import role_permissions

if TYPE_CHECKING:
    from hostel_admin.models.people.user import User
    from hostel_admin.models.rbac.permission import Permission

__all__ = ["Role"]


class Role(BaseModel, TimestampMixin):
    """
    Named bundle of permissions.

    ``owner_user_id`` is NULL for global roles visible to every user;
    otherwise the role is private to the user who created it.
    """

    __tablename__ = "roles"
    __table_args__ = (
        UniqueConstraint("role_name", "owner_user_id", name="uq_roles_name_owner"),
    )

    role_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # Not a foreign key: users.user_role_id already points here.
    owner_user_id: Mapped[Optional[int]] = mapped_column(Integer, nullable=True, index=True)

    permissions: Mapped[List["Permission"]] = relationship(
        "Permission",
        secondary=role_permissions,
        back_populates="roles",
        order_by="Permission.id",
    )
    users: Mapped[List["User"]] = relationship(
        "User",
        back_populates="user_role",
        foreign_keys="User.user_role_id",
    )

    @property
    def is_global(self) -> bool:
        return self.owner_user_id is None

    def has_permission(self, resource: str, action: str) -> bool:
        return any(
            p.resource == resource and p.action.value == action
            for p in self.permissions
        )

    @property
    def user_count(self) -> int:
        return len(self.users)
