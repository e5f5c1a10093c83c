from hostel_admin.repositories.base.base_repository import BaseRepository

__all__ = ["BaseRepository"]
