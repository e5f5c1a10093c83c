"""
Logging utilities shared by every layer.

Modules obtain loggers through ``get_logger(__name__)``; the request id of
the current HTTP request is carried in a context variable and attached to
records by ``RequestContextFilter``.
"""

import logging
from contextvars import ContextVar
from typing import Optional

request_id: ContextVar[Optional[str]] = ContextVar('request_id', default=None)


class RequestContextFilter(logging.Filter):
    """Add the current request id to log records"""

    def filter(self, record: logging.LogRecord) -> bool:
        req_id = request_id.get()
        if req_id and not hasattr(record, 'request_id'):
            record.request_id = req_id
        return True


_context_filter = RequestContextFilter()


def get_logger(name: str) -> logging.Logger:
    """Get logger with request context"""
    logger = logging.getLogger(name)
    if _context_filter not in logger.filters:
        logger.addFilter(_context_filter)
    return logger
