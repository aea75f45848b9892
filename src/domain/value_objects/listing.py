"""Filter, sort and pagination value objects for read models.

Usage:
    page = PageRequest(page=2, limit=20)
    filters = ProjectFilter(skills=("python",), status=ProjectStatus.OPEN)
    result = Page(items=projects, total=41, page=page)
    result.pages  # 3
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Generic, TypeVar
from uuid import UUID

from src.domain.enums import (
    ApplicationStatus,
    ProjectSortField,
    ProjectStatus,
    SortDirection,
)

T = TypeVar("T")


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """One-based page window.

    Attributes:
        page: Page number, starting at 1.
        limit: Items per page.
    """

    page: int = 1
    limit: int = 20

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("page must be at least 1")
        if self.limit < 1:
            raise ValueError("limit must be at least 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True, slots=True, kw_only=True)
class Page(Generic[T]):
    """One page of a listing plus the size of the full result.

    Attributes:
        items: Items on this page.
        total: Number of items across all pages.
        page: Window that produced this page.
    """

    items: Sequence[T]
    total: int
    page: PageRequest

    @property
    def pages(self) -> int:
        """Number of pages (ceil of total / limit)."""
        return math.ceil(self.total / self.page.limit)


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectSort:
    field: ProjectSortField = ProjectSortField.CREATED_AT
    direction: SortDirection = SortDirection.DESC


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectFilter:
    """Project listing filters. Unset fields do not narrow the result.

    Attributes:
        skills: Match projects requiring any of these skills.
        budget_min: Lower bound of the wanted budget range.
        budget_max: Upper bound of the wanted budget range.
        search: Case-insensitive text matched against title and description.
        status: Exact status.
        client_id: Restrict to one owner's projects.
    """

    skills: tuple[str, ...] = ()
    budget_min: Decimal | None = None
    budget_max: Decimal | None = None
    search: str | None = None
    status: ProjectStatus | None = None
    client_id: UUID | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationFilter:
    """Filters for application listings.

    Attributes:
        status: Exact application status.
        since: Only applications submitted at or after this instant.
    """

    status: ApplicationStatus | None = None
    since: datetime | None = None
