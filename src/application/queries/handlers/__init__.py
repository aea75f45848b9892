"""Query handlers."""

from src.application.queries.handlers.get_project_handler import GetProjectHandler
from src.application.queries.handlers.list_applications_handler import (
    ListApplicationUpdatesHandler,
    ListFreelancerApplicationsHandler,
    ListProjectApplicationsHandler,
)
from src.application.queries.handlers.list_projects_handler import (
    ListClientProjectsHandler,
    ListProjectsHandler,
    RecommendedProjectsHandler,
)

__all__ = [
    "GetProjectHandler",
    "ListApplicationUpdatesHandler",
    "ListClientProjectsHandler",
    "ListFreelancerApplicationsHandler",
    "ListProjectApplicationsHandler",
    "ListProjectsHandler",
    "RecommendedProjectsHandler",
]
