"""
Repositories for the permission catalog and roles.
"""

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session, selectinload

from hostel_admin.models.base.enums import PermissionAction
from hostel_admin.models.rbac import Permission, Role
from hostel_admin.repositories.base import BaseRepository


class PermissionRepository(BaseRepository[Permission]):
    def __init__(self, db: Session):
        super().__init__(Permission, db)

    def all(self) -> List[Permission]:
        return self.list()

    def find(self, resource: str, action: PermissionAction) -> Optional[Permission]:
        stmt = select(Permission).where(Permission.resource == resource, Permission.action == action)
        return self.db.scalars(stmt).first()

    def search(
        self,
        resource: Optional[str] = None,
        action: Optional[PermissionAction] = None,
        query: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Permission], int]:
        criteria = []
        if resource:
            criteria.append(Permission.resource == resource)
        if action is not None:
            criteria.append(Permission.action == action)
        if query and query.strip():
            pattern = f"%{query.strip().lower()}%"
            criteria.append(
                or_(
                    func.lower(Permission.resource).like(pattern),
                    func.lower(Permission.action).like(pattern),
                    func.lower(func.coalesce(Permission.description, "")).like(pattern),
                )
            )

        items = self.list(
            *criteria,
            offset=offset,
            limit=limit,
            order_by=[Permission.resource, Permission.action],
        )
        return items, self.count(*criteria)


class RoleRepository(BaseRepository[Role]):
    def __init__(self, db: Session):
        super().__init__(Role, db)

    def get_with_permissions(self, role_id: int) -> Optional[Role]:
        stmt = (
            select(Role)
            .where(Role.id == role_id)
            .options(selectinload(Role.permissions), selectinload(Role.users))
        )
        return self.db.scalars(stmt).first()

    def visible_to(self, user_id: Optional[int]):
        """Criterion for roles a user may see: global ones plus their own."""
        if user_id is None:
            return Role.owner_user_id.is_(None)
        return or_(Role.owner_user_id.is_(None), Role.owner_user_id == user_id)

    def find_by_name(self, role_name: str, owner_user_id: Optional[int]) -> Optional[Role]:
        """Role with this name and exactly this owner (NULL for global)."""
        owner = Role.owner_user_id.is_(None) if owner_user_id is None else Role.owner_user_id == owner_user_id
        stmt = select(Role).where(func.lower(Role.role_name) == role_name.strip().lower(), owner)
        return self.db.scalars(stmt).first()

    def list_visible(
        self,
        user_id: Optional[int],
        is_admin: bool = False,
        query: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Role], int]:
        criteria = [] if is_admin else [self.visible_to(user_id)]
        if query and query.strip():
            pattern = f"%{query.strip().lower()}%"
            criteria.append(
                or_(
                    func.lower(Role.role_name).like(pattern),
                    func.lower(func.coalesce(Role.description, "")).like(pattern),
                )
            )
        items = self.list(*criteria, offset=offset, limit=limit, order_by=[Role.role_name, Role.id])
        return items, self.count(*criteria)
