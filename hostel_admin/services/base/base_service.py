"""
Base service class providing common functionality for all services.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hostel_admin.core.exceptions import BaseAppException, handle_database_exception
from hostel_admin.core.logging import get_logger
from hostel_admin.repositories.base.base_repository import BaseRepository
from hostel_admin.services.base.service_result import ErrorSeverity, ServiceResult

TModel = TypeVar("TModel")
TRepo = TypeVar("TRepo", bound=BaseRepository)


class BaseService(Generic[TModel, TRepo]):
    """
    Base service with common behaviors:
    - Shared logger and db session
    - Consistent error handling via ServiceResult
    - Transaction management utilities
    """

    def __init__(self, repository: TRepo, db_session: Session):
        self.repository: TRepo = repository
        self.db: Session = db_session
        self._logger = get_logger(self.__class__.__name__)

    # -------------------------------------------------------------------------
    # Exception & Error Handling
    # -------------------------------------------------------------------------

    def _handle_exception(
        self,
        exception: Exception,
        operation: str,
        entity_ref: Optional[Any] = None,
        additional_context: Optional[Dict[str, Any]] = None,
    ) -> ServiceResult:
        """
        Convert an exception into a ServiceResult failure with logging.

        Application exceptions keep their code and status; database errors
        are translated; anything else propagates.
        """
        context = {
            "operation": operation,
            "entity_ref": str(entity_ref) if entity_ref is not None else None,
            "exception_type": type(exception).__name__,
        }
        if additional_context:
            context.update(additional_context)

        if isinstance(exception, BaseAppException):
            self._logger.info(f"{operation} rejected: {exception.message}", extra=context)
            severity = ErrorSeverity.ERROR if exception.status_code >= 500 else ErrorSeverity.WARNING
            return ServiceResult.from_app_exception(exception, severity)

        if isinstance(exception, SQLAlchemyError):
            self._logger.error(f"Error during {operation}: {exception}", exc_info=True, extra=context)
            return ServiceResult.from_app_exception(
                handle_database_exception(exception), ErrorSeverity.CRITICAL
            )

        raise exception

    # -------------------------------------------------------------------------
    # Transaction Management
    # -------------------------------------------------------------------------

    @contextmanager
    def transaction(self):
        """
        Context manager for database transactions with automatic rollback.

        Example:
            with self.transaction():
                self.repository.create(...)
        """
        try:
            yield self.db
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
