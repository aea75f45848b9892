"""Common schemas used across multiple API endpoints.

Provides the pagination envelope shared by every list response.
"""

from typing import Any

from pydantic import BaseModel, Field

from src.domain.value_objects import Page


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        page: Current page number (1-indexed).
        limit: Items per page.
        total: Total items across all pages.
        pages: Total number of pages.
    """

    page: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Items per page")
    total: int = Field(..., description="Total items available")
    pages: int = Field(..., description="Total number of pages")

    @classmethod
    def from_page(cls, page: Page[Any]) -> "PaginationMeta":
        """Create pagination metadata from a domain Page.

        Args:
            page: Page returned by a query handler.

        Returns:
            PaginationMeta instance.
        """
        return cls(
            page=page.page.page,
            limit=page.page.limit,
            total=page.total,
            pages=page.pages,
        )


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["healthy"])
    database: str = Field(..., examples=["ok"])
