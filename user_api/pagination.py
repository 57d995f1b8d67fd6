"""
Name: Pagination Utilities

Responsibilities:
  - Page/offset arithmetic for page-numbered list endpoints
  - Standardized pagination metadata model
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100


class PaginationMeta(BaseModel):
    """Pagination metadata."""

    current_page: int = Field(description="Requested page (1-based)")
    per_page: int = Field(description="Page size")
    total: int = Field(description="Total number of items")
    total_pages: int = Field(description="Number of pages (ceiling division)")


def page_offset(page: int, per_page: int) -> int:
    """Offset of the first item of a 1-based page."""
    return (page - 1) * per_page


def total_pages(total: int, per_page: int) -> int:
    """Ceiling division; zero items means zero pages."""
    if total <= 0:
        return 0
    return -(-total // per_page)


def build_pagination(page: int, per_page: int, total: int) -> PaginationMeta:
    return PaginationMeta(
        current_page=page,
        per_page=per_page,
        total=total,
        total_pages=total_pages(total, per_page),
    )
