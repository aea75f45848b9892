"""Application DTOs."""

from src.application.dtos.project_dtos import (
    ApplicantSummary,
    ApplicationUpdate,
    ApplicationView,
    DecisionResult,
    OwnerApplicationView,
    ProjectDetail,
    ProjectSummary,
)

__all__ = [
    "ApplicantSummary",
    "ApplicationUpdate",
    "ApplicationView",
    "DecisionResult",
    "OwnerApplicationView",
    "ProjectDetail",
    "ProjectSummary",
]
