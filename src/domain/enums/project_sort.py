"""Sort keys for project listings."""

from enum import Enum


class ProjectSortField(str, Enum):
    """Columns a project listing can be ordered by."""

    CREATED_AT = "created_at"
    BUDGET_MIN = "budget_min"
    BUDGET_MAX = "budget_max"
    DEADLINE = "deadline"
    TITLE = "title"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
