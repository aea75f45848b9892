"""Domain enums.

Usage:
    from src.domain.enums import ProjectStatus, ApplicationStatus
"""

from src.domain.enums.application_status import ApplicationStatus
from src.domain.enums.member_role import MemberRole
from src.domain.enums.project_sort import ProjectSortField, SortDirection
from src.domain.enums.project_status import ProjectStatus

__all__ = [
    "ApplicationStatus",
    "MemberRole",
    "ProjectSortField",
    "ProjectStatus",
    "SortDirection",
]
