from hostel_admin.services.base.base_service import BaseService
from hostel_admin.services.base.service_result import ErrorSeverity, ServiceError, ServiceResult

__all__ = ["BaseService", "ServiceResult", "ServiceError", "ErrorSeverity"]
