"""Queries package (CQRS read side)."""

from src.application.queries.project_queries import (
    GetProject,
    ListApplicationUpdates,
    ListClientProjects,
    ListFreelancerApplications,
    ListProjectApplications,
    ListProjects,
    RecommendedProjects,
)

__all__ = [
    "GetProject",
    "ListApplicationUpdates",
    "ListClientProjects",
    "ListFreelancerApplications",
    "ListProjectApplications",
    "ListProjects",
    "RecommendedProjects",
]
