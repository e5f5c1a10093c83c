"""
Base repository with standardized CRUD operations and error handling.

Provides foundation for all domain repositories. Repositories flush but
never commit; the calling service owns the transaction.
"""

from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement

from hostel_admin.core.exceptions import DatabaseError, DuplicateEntryError
from hostel_admin.core.logging import get_logger
from hostel_admin.models.base import BaseModel

logger = get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one model class.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    # ==================== Read Operations ====================

    def get(self, entity_id: int) -> Optional[ModelType]:
        return self.db.get(self.model, entity_id)

    def get_many(self, ids: Sequence[int]) -> List[ModelType]:
        if not ids:
            return []
        stmt = select(self.model).where(self.model.id.in_(list(ids)))
        return list(self.db.scalars(stmt))

    def list(
        self,
        *criteria: ColumnElement,
        offset: int = 0,
        limit: Optional[int] = None,
        order_by: Optional[Sequence[Any]] = None,
    ) -> List[ModelType]:
        """
        List entities matching every criterion.

        Args:
            criteria: SQLAlchemy boolean expressions (ANDed)
            offset: Number of records to skip
            limit: Maximum number of records to return
            order_by: Ordering, defaults to primary key
        """
        stmt = select(self.model).where(*criteria)
        stmt = stmt.order_by(*(order_by or [self.model.id]))
        if offset:
            stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.scalars(stmt))

    def count(self, *criteria: ColumnElement) -> int:
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        return int(self.db.scalar(stmt) or 0)

    # ==================== Write Operations ====================

    def create(self, data: Dict[str, Any]) -> ModelType:
        entity = self.model(**data)
        return self.add(entity)

    def add(self, entity: ModelType) -> ModelType:
        try:
            self.db.add(entity)
            self.db.flush()
            self.db.refresh(entity)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                f"{self.model.__name__} already exists",
                details={"error": str(e.orig)},
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(f"Create failed: {e}") from e

        logger.info(f"Created {self.model.__name__} with id: {entity.id}")
        return entity

    def update(self, entity: ModelType, data: Dict[str, Any]) -> ModelType:
        for field, value in data.items():
            setattr(entity, field, value)
        try:
            self.db.flush()
            self.db.refresh(entity)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                f"{self.model.__name__} update conflicts with an existing record",
                details={"error": str(e.orig)},
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(f"Update failed: {e}") from e

        logger.info(f"Updated {self.model.__name__} {entity.id}: {sorted(data)}")
        return entity

    def delete(self, entity: ModelType) -> None:
        entity_id = entity.id
        try:
            self.db.delete(entity)
            self.db.flush()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise DatabaseError(f"Delete failed: {e}") from e

        logger.info(f"Deleted {self.model.__name__} with id: {entity_id}")
