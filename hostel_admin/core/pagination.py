# hostel_admin/core/pagination.py
from __future__ import annotations

"""
Core pagination helpers.

This module provides:
- `normalize_pagination` to clean up page/page_size inputs using defaults
  and clamping.
- `paginate_items` to map and wrap results in a `PaginatedResponse` schema.
"""

from typing import Callable, List, Optional, Sequence, TypeVar

from hostel_admin.config.settings import settings
from hostel_admin.schemas.common.pagination import PaginatedResponse, PaginationParams

TModel = TypeVar("TModel")
TSchema = TypeVar("TSchema")

DEFAULT_PAGE = 1


def normalize_pagination(
    page: Optional[int],
    page_size: Optional[int],
) -> PaginationParams:
    """
    Normalize raw page & page_size inputs into a PaginationParams object
    with sane defaults and a clamped max page size.

    Rules:
        - page < 1 or None -> DEFAULT_PAGE
        - page_size < 1 or None -> settings.DEFAULT_PAGE_SIZE
        - page_size > settings.MAX_PAGE_SIZE -> settings.MAX_PAGE_SIZE
    """
    if page is None or page < 1:
        page = DEFAULT_PAGE

    if page_size is None or page_size < 1:
        page_size = settings.DEFAULT_PAGE_SIZE

    if page_size > settings.MAX_PAGE_SIZE:
        page_size = settings.MAX_PAGE_SIZE

    return PaginationParams(page=page, page_size=page_size)


def paginate_items(
    *,
    items: Sequence[TModel],
    total_items: int,
    params: PaginationParams,
    mapper: Callable[[TModel], TSchema],
) -> PaginatedResponse[TSchema]:
    """Map and wrap one page of items into a PaginatedResponse."""
    mapped: List[TSchema] = [mapper(obj) for obj in items]
    return PaginatedResponse.create(
        items=mapped,
        total_items=total_items,
        page=params.page,
        page_size=params.page_size,
    )
