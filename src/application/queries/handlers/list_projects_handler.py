"""Project listing query handlers.

Handlers:
    - ListProjectsHandler: public listing (OPEN unless a status is given)
    - ListClientProjectsHandler: the caller's own projects, any status
    - RecommendedProjectsHandler: OPEN projects sharing a skill with the
      caller; with no declared skills, identical to the public listing

Architecture:
- Returns Result[Page[Project], ApplicationError]
- NO domain events (queries are side-effect free)
"""

from dataclasses import replace

from src.application.errors import ApplicationError, from_domain_error
from src.application.queries.project_queries import (
    ListClientProjects,
    ListProjects,
    RecommendedProjects,
)
from src.core.result import Failure, Result, Success
from src.domain.entities import Project
from src.domain.enums import ProjectStatus
from src.domain.errors import ProjectError
from src.domain.protocols import MemberDirectory, ProjectRepository
from src.domain.validators import normalize_skills
from src.domain.value_objects import (
    Page,
    ProjectFilter,
    ProjectSort,
    require_client,
    require_freelancer,
)


class ListProjectsHandler:
    """Handler for ListProjects query."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def handle(
        self, query: ListProjects
    ) -> Result[Page[Project], ApplicationError]:
        filters = query.filters
        if filters.status is None:
            filters = replace(filters, status=ProjectStatus.OPEN)
        filters = replace(filters, skills=tuple(normalize_skills(filters.skills)))

        page = await self._project_repo.list_projects(filters, query.sort, query.page)
        return Success(value=page)


class ListClientProjectsHandler:
    """Handler for ListClientProjects query."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def handle(
        self, query: ListClientProjects
    ) -> Result[Page[Project], ApplicationError]:
        client_result = require_client(query.principal)
        if isinstance(client_result, Failure):
            return Failure(error=from_domain_error(client_result.error))

        page = await self._project_repo.list_projects(
            ProjectFilter(client_id=client_result.value), query.sort, query.page
        )
        return Success(value=page)


class RecommendedProjectsHandler:
    """Handler for RecommendedProjects query.

    Dependencies (injected via constructor):
        - ProjectRepository: Project listing
        - MemberDirectory: The freelancer's declared skills
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        member_directory: MemberDirectory,
    ) -> None:
        self._project_repo = project_repo
        self._member_directory = member_directory

    async def handle(
        self, query: RecommendedProjects
    ) -> Result[Page[Project], ApplicationError]:
        freelancer_result = require_freelancer(
            query.principal, ProjectError.FREELANCER_VIEW_ONLY
        )
        if isinstance(freelancer_result, Failure):
            return Failure(error=from_domain_error(freelancer_result.error))

        member = await self._member_directory.get_member(freelancer_result.value)
        skills = normalize_skills(member.skills) if member else []

        page = await self._project_repo.list_projects(
            ProjectFilter(status=ProjectStatus.OPEN, skills=tuple(skills)),
            ProjectSort(),
            query.page,
        )
        return Success(value=page)
