"""
Custom Exceptions for the Hostel Admin Application

This module defines custom exception classes used throughout the application
for better error handling and debugging.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"

    # Authentication & Authorization
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    INSUFFICIENT_PERMISSIONS = "INSUFFICIENT_PERMISSIONS"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    FOREIGN_KEY_VIOLATION = "FOREIGN_KEY_VIOLATION"

    # Business logic errors
    BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
    PERMISSION_CATALOG_MISMATCH = "PERMISSION_CATALOG_MISMATCH"

    # Domain specific not-found errors
    HOSTEL_NOT_FOUND = "HOSTEL_NOT_FOUND"
    TENANT_NOT_FOUND = "TENANT_NOT_FOUND"
    EMPLOYEE_NOT_FOUND = "EMPLOYEE_NOT_FOUND"
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "success": False,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when data validation fails"""

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 422
    ):
        details = {"field_errors": field_errors} if field_errors else {}
        super().__init__(message, error_code, details, status_code)


class BusinessRuleError(BaseAppException):
    """Exception raised when a request breaks a business rule"""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.BUSINESS_RULE_VIOLATION,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, error_code, details, 400)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.RESOURCE_NOT_FOUND,
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id is not None:
                message += f" (ID: {resource_id})"

        details = {
            "resource_type": resource_type,
            "resource_id": str(resource_id) if resource_id is not None else None
        }
        super().__init__(message, error_code, details, 404)


class HostelNotFoundError(ResourceNotFoundError):
    """Exception raised when hostel is not found"""

    def __init__(self, hostel_id: Optional[Any] = None):
        super().__init__("Hostel", hostel_id, error_code=ErrorCode.HOSTEL_NOT_FOUND)


class TenantNotFoundError(ResourceNotFoundError):
    """Exception raised when tenant is not found"""

    def __init__(self, tenant_id: Optional[Any] = None):
        super().__init__("Tenant", tenant_id, error_code=ErrorCode.TENANT_NOT_FOUND)


class EmployeeNotFoundError(ResourceNotFoundError):
    """Exception raised when employee is not found"""

    def __init__(self, employee_id: Optional[Any] = None):
        super().__init__("Employee", employee_id, error_code=ErrorCode.EMPLOYEE_NOT_FOUND)


class RoleNotFoundError(ResourceNotFoundError):
    """Exception raised when role is not found"""

    def __init__(self, role_id: Optional[Any] = None):
        super().__init__("Role", role_id, error_code=ErrorCode.ROLE_NOT_FOUND)


class UserNotFoundError(ResourceNotFoundError):
    """Exception raised when user account is not found"""

    def __init__(self, user_id: Optional[Any] = None):
        super().__init__("User", user_id, error_code=ErrorCode.USER_NOT_FOUND)


# ========================================
# Authentication & Authorization
# ========================================

class AuthenticationError(BaseAppException):
    """Exception raised when the acting user cannot be identified"""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, ErrorCode.AUTHENTICATION_FAILED, None, 401)


class AuthorizationError(BaseAppException):
    """Exception raised when the acting user lacks a permission"""

    def __init__(
        self,
        message: str = "Access denied",
        resource: Optional[str] = None,
        action: Optional[str] = None,
    ):
        details = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, ErrorCode.INSUFFICIENT_PERMISSIONS, details, 403)


# ========================================
# Database Exceptions
# ========================================

class DatabaseError(BaseAppException):
    """Exception raised for database errors"""

    def __init__(
        self,
        message: str = "Database error",
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message, error_code, details, status_code)


class DuplicateEntryError(DatabaseError):
    """Exception raised when a unique constraint would be violated"""

    def __init__(self, message: str = "Duplicate entry", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, details, 409)


class ForeignKeyViolationError(DatabaseError):
    """Exception raised when a referenced row does not exist"""

    def __init__(self, message: str = "Foreign key violation"):
        super().__init__(message, ErrorCode.FOREIGN_KEY_VIOLATION, None, 400)


# ========================================
# Utility Functions
# ========================================

def handle_database_exception(exc: Exception) -> BaseAppException:
    """Convert database exceptions to application exceptions"""
    error_message = str(exc)
    lowered = error_message.lower()

    if "duplicate" in lowered or "unique constraint" in lowered:
        return DuplicateEntryError(f"Duplicate entry: {error_message}")
    elif "foreign key" in lowered:
        return ForeignKeyViolationError(f"Foreign key violation: {error_message}")
    else:
        return DatabaseError(f"Database error: {error_message}")


def create_validation_error(field_errors: Dict[str, List[str]]) -> ValidationError:
    """Create a validation error with field-specific errors"""
    total_errors = sum(len(errors) for errors in field_errors.values())
    message = f"Validation failed with {total_errors} error(s)"
    return ValidationError(message, field_errors)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'BusinessRuleError',
    'ResourceNotFoundError',
    'HostelNotFoundError',
    'TenantNotFoundError',
    'EmployeeNotFoundError',
    'RoleNotFoundError',
    'UserNotFoundError',
    'AuthenticationError',
    'AuthorizationError',
    'DatabaseError',
    'DuplicateEntryError',
    'ForeignKeyViolationError',
    'handle_database_exception',
    'create_validation_error',
]
