"""
Exception handlers that render application, validation and database
errors into the standard error envelope.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from hostel_admin.core.exceptions import BaseAppException, ErrorCode, handle_database_exception
from hostel_admin.core.logging import get_logger

logger = get_logger(__name__)


def _error_body(request: Request, exc: BaseAppException) -> Dict[str, Any]:
    body = exc.to_dict()
    body["timestamp"] = datetime.now(timezone.utc).isoformat()
    body["request_id"] = getattr(request.state, "request_id", None)
    return body


async def handle_application_exception(request: Request, exc: BaseAppException) -> JSONResponse:
    """Handle custom application exceptions"""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        f"Application exception: {exc.error_code.value} - {exc.message}",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=exc.status_code, content=_error_body(request, exc))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle Pydantic request validation errors"""
    errors: List[Dict[str, Any]] = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        errors.append({
            "field": location[-1] if location else None,
            "message": error.get("msg"),
            "code": error.get("type"),
            "location": location,
        })

    logger.info(
        f"Request validation failed with {len(errors)} error(s)",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "success": False,
            "message": "Validation failed",
            "error_code": ErrorCode.VALIDATION_ERROR.value,
            "details": {"errors": errors},
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "request_id": getattr(request.state, "request_id", None),
        },
    )


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle database exceptions that escaped the repositories"""
    logger.error(f"Database error on {request.url.path}: {exc}", exc_info=True)
    app_exc = handle_database_exception(exc)
    return JSONResponse(status_code=app_exc.status_code, content=_error_body(request, app_exc))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, handle_application_exception)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
