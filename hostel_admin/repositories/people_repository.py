"""
Repositories for tenants, employees and user accounts.
"""

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from hostel_admin.models.base.enums import EmployeeRole, EmployeeStatus, TenantStatus
from hostel_admin.models.people import Employee, Tenant, User
from hostel_admin.models.rbac import Role
from hostel_admin.repositories.base import BaseRepository


def _contact_search(model, query: str):
    pattern = f"%{query.strip().lower()}%"
    return or_(
        func.lower(model.name).like(pattern),
        func.lower(func.coalesce(model.email, "")).like(pattern),
        func.lower(func.coalesce(model.phone, "")).like(pattern),
    )


class TenantRepository(BaseRepository[Tenant]):
    def __init__(self, db: Session):
        super().__init__(Tenant, db)

    def search(
        self,
        hostel_id: Optional[int] = None,
        status: Optional[TenantStatus] = None,
        query: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Tenant], int]:
        criteria = []
        if hostel_id is not None:
            criteria.append(Tenant.hostel_id == hostel_id)
        if status is not None:
            criteria.append(Tenant.status == status)
        if query and query.strip():
            criteria.append(_contact_search(Tenant, query))

        items = self.list(*criteria, offset=offset, limit=limit)
        return items, self.count(*criteria)

    def active_at_seat(self, hostel_id: int, room: str, bed: str, exclude_id: Optional[int] = None) -> List[Tenant]:
        criteria = [
            Tenant.hostel_id == hostel_id,
            Tenant.room == room,
            Tenant.bed == bed,
            Tenant.status == TenantStatus.ACTIVE,
        ]
        if exclude_id is not None:
            criteria.append(Tenant.id != exclude_id)
        return self.list(*criteria)


class EmployeeRepository(BaseRepository[Employee]):
    def __init__(self, db: Session):
        super().__init__(Employee, db)

    def search(
        self,
        role: Optional[EmployeeRole] = None,
        hostel_id: Optional[int] = None,
        status: Optional[EmployeeStatus] = None,
        query: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Employee], int]:
        criteria = []
        if role is not None:
            criteria.append(Employee.role == role)
        if hostel_id is not None:
            criteria.append(Employee.hostel_id == hostel_id)
        if status is not None:
            criteria.append(Employee.status == status)
        if query and query.strip():
            criteria.append(_contact_search(Employee, query))

        items = self.list(*criteria, offset=offset, limit=limit)
        return items, self.count(*criteria)


class UserRepository(BaseRepository[User]):
    def __init__(self, db: Session):
        super().__init__(User, db)

    def find_by_email_or_username(
        self,
        email: Optional[str],
        username: Optional[str],
        exclude_id: Optional[int] = None,
    ) -> Optional[User]:
        """First other account sharing the email or username (case-insensitive)."""
        matches = []
        if email:
            matches.append(func.lower(User.email) == email.lower())
        if username:
            matches.append(func.lower(User.username) == username.lower())
        if not matches:
            return None
        stmt = select(User).where(or_(*matches))
        if exclude_id is not None:
            stmt = stmt.where(User.id != exclude_id)
        return self.db.scalars(stmt).first()

    def owned_roles(self, user_id: int) -> List[Role]:
        return list(self.db.scalars(select(Role).where(Role.owner_user_id == user_id)))
