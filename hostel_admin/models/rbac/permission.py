# hostel_admin/models/rbac/permission.py
"""
Permission catalog and role assignment models.

The permission table is the single source of truth for the numeric ids
exchanged with the dashboard; see ``services.rbac.permission_catalog``.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Column, ForeignKey, Integer, String, Table, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostel_admin.models.base.base_model import Base, BaseModel
from hostel_admin.models.base.enums import PermissionAction
from hostel_admin.models.base.mixins import TimestampMixin
from hostel_admin.models.base.types import enum_column

if TYPE_CHECKING:
    from hostel_admin.models.rbac.role import Role

__all__ = ["Permission", "role_permissions"]


role_permissions = Table(
    "role_permissions",
    Base.metadata,
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
    Column("permission_id", Integer, ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True),
)


class Permission(BaseModel, TimestampMixin):
    """A single resource x action grant."""

    __tablename__ = "permissions"
    __table_args__ = (
        UniqueConstraint("resource", "action", name="uq_permissions_resource_action"),
    )

    resource: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    action: Mapped[PermissionAction] = mapped_column(
        enum_column(PermissionAction),
        nullable=False,
    )
    description: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    roles: Mapped[List["Role"]] = relationship(
        "Role",
        secondary=role_permissions,
        back_populates="permissions",
    )

    @property
    def key(self) -> str:
        """Catalog key, e.g. ``tenants_view_list``."""
        return f"{self.resource}_{self.action.value}"

    @property
    def role_count(self) -> int:
        return len(self.roles)
