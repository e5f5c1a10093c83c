"""
Hostel repository.
"""

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from hostel_admin.models.hostel import Hostel
from hostel_admin.models.people import Tenant
from hostel_admin.repositories.base import BaseRepository


class HostelRepository(BaseRepository[Hostel]):
    def __init__(self, db: Session):
        super().__init__(Hostel, db)

    def find_by_name(self, name: str) -> Optional[Hostel]:
        return self.db.scalars(
            select(Hostel).where(func.lower(Hostel.name) == name.strip().lower())
        ).first()

    def search(
        self,
        query: Optional[str] = None,
        city: Optional[str] = None,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> Tuple[List[Hostel], int]:
        """
        Case-insensitive search on name, city and manager name, with an
        optional exact (case-insensitive) city filter.
        """
        criteria = []
        if query and query.strip():
            pattern = f"%{query.strip().lower()}%"
            criteria.append(
                or_(
                    func.lower(Hostel.name).like(pattern),
                    func.lower(Hostel.city).like(pattern),
                    func.lower(func.coalesce(Hostel.manager_name, "")).like(pattern),
                )
            )
        if city and city.strip():
            criteria.append(func.lower(Hostel.city) == city.strip().lower())

        items = self.list(*criteria, offset=offset, limit=limit, order_by=[Hostel.name])
        return items, self.count(*criteria)

    def layout_totals(self) -> Tuple[int, int]:
        """Return (hostel count, total rooms across hostels)."""
        row = self.db.execute(
            select(
                func.count(Hostel.id),
                func.coalesce(func.sum(Hostel.total_floors * Hostel.rooms_per_floor), 0),
            )
        ).one()
        return int(row[0]), int(row[1])

    def tenants_of(self, hostel_id: int) -> List[Tenant]:
        stmt = select(Tenant).where(Tenant.hostel_id == hostel_id).order_by(Tenant.id)
        return list(self.db.scalars(stmt))
