"""SQLAlchemy Base class for all models."""
from hostel_admin.models.base import Base


def import_models() -> None:
    """Import all models to register them with SQLAlchemy."""
    import hostel_admin.models  # noqa: F401


import_models()

__all__ = ["Base", "import_models"]
