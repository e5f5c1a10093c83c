# hostel_admin/db/init_db.py
"""Database initialization utilities."""
from sqlalchemy import inspect

from hostel_admin.config.settings import settings
from hostel_admin.core.logging import get_logger
from hostel_admin.db.base import Base, import_models
from hostel_admin.db.seed import seed_defaults
from hostel_admin.db.session import SessionLocal, engine

logger = get_logger(__name__)


def init_db() -> None:
    """
    Create missing tables and seed the default RBAC data.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations.
    """
    import_models()

    existing_tables = inspect(engine).get_table_names()
    Base.metadata.create_all(bind=engine)
    if existing_tables:
        logger.info(f"Database already initialized with {len(existing_tables)} tables")
    else:
        logger.info("Database tables created successfully")

    if settings.SEED_DEFAULT_DATA:
        with SessionLocal() as db:
            seed_defaults(db)


def drop_db() -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Use with caution.
    """
    Base.metadata.drop_all(bind=engine)
    logger.warning("All database tables dropped")


def reset_db() -> None:
    """
    Reset the database by dropping and recreating all tables.

    WARNING: This will delete all data! Use with caution.
    """
    logger.warning("Resetting database...")
    drop_db()
    init_db()
    logger.info("Database reset complete")


if __name__ == "__main__":
    init_db()
