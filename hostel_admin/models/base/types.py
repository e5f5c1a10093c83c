"""
Custom column types.
"""

from typing import Type

from sqlalchemy import Enum as SAEnum


def enum_column(enum_cls: Type, length: int = 32) -> SAEnum:
    """
    String-backed enum column that stores member values (not names),
    so rows stay readable and portable between SQLite and PostgreSQL.
    """
    return SAEnum(
        enum_cls,
        values_callable=lambda members: [member.value for member in members],
        native_enum=False,
        validate_strings=True,
        length=length,
    )
