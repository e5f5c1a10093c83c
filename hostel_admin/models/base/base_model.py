# --- File: hostel_admin/models/base/base_model.py ---
"""
Base model configuration for SQLAlchemy ORM.

Provides the declarative base and an abstract model with an integer
primary key.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

# Create declarative base
Base = declarative_base()


class BaseModel(Base):
    """
    Abstract base model with common fields and methods.

    Integer ids are part of the wire format (permission ids in
    particular), so every table uses an autoincrementing integer key.
    """

    __abstract__ = True

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Primary key",
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"
