"""Application listing query handlers.

Handlers:
    - ListProjectApplicationsHandler: one project's applications (owner only),
      with applicant profiles
    - ListFreelancerApplicationsHandler: one freelancer's applications across
      all projects, flattened, newest first, with a project summary each
    - ListApplicationUpdatesHandler: the freelancer's applications since a
      given instant, for polling status changes
"""

from src.application.dtos import (
    ApplicantSummary,
    ApplicationUpdate,
    ApplicationView,
    OwnerApplicationView,
    ProjectSummary,
)
from src.application.errors import (
    ApplicationError,
    from_domain_error,
    project_not_found,
)
from src.application.queries.project_queries import (
    ListApplicationUpdates,
    ListFreelancerApplications,
    ListProjectApplications,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.errors import ProjectError
from src.domain.protocols import MemberDirectory, ProjectRepository
from src.domain.validators import as_utc
from src.domain.value_objects import Page, require_freelancer


class ListProjectApplicationsHandler:
    """Handler for ListProjectApplications query.

    Applications come from the loaded aggregate in arrival order and are
    paginated in memory.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        member_directory: MemberDirectory,
    ) -> None:
        self._project_repo = project_repo
        self._member_directory = member_directory

    async def handle(
        self, query: ListProjectApplications
    ) -> Result[Page[OwnerApplicationView], ApplicationError]:
        project = await self._project_repo.get(query.project_id)
        if project is None:
            return Failure(error=project_not_found(query.project_id))

        if not project.is_owned_by(query.principal.member_id):
            return Failure(
                error=from_domain_error(
                    AuthorizationError(
                        code=ErrorCode.RESOURCE_NOT_OWNED,
                        message=ProjectError.NOT_OWNER,
                        required_permission="projects:applications:read",
                    )
                )
            )

        applications = [
            a
            for a in project.applications
            if query.status is None or a.status is query.status
        ]
        window = applications[query.page.offset : query.page.offset + query.page.limit]
        members = await self._member_directory.get_members(
            a.freelancer_id for a in window
        )

        views = [
            OwnerApplicationView(
                application=a,
                applicant=ApplicantSummary.of(a.freelancer_id, members.get(a.freelancer_id)),
            )
            for a in window
        ]
        return Success(value=Page(items=views, total=len(applications), page=query.page))


class ListFreelancerApplicationsHandler:
    """Handler for ListFreelancerApplications query."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        member_directory: MemberDirectory,
    ) -> None:
        self._project_repo = project_repo
        self._member_directory = member_directory

    async def handle(
        self, query: ListFreelancerApplications
    ) -> Result[Page[ApplicationView], ApplicationError]:
        freelancer_result = require_freelancer(
            query.principal, ProjectError.FREELANCER_VIEW_ONLY
        )
        if isinstance(freelancer_result, Failure):
            return Failure(error=from_domain_error(freelancer_result.error))

        listing = await self._project_repo.list_freelancer_applications(
            freelancer_result.value, query.filters, query.page
        )
        clients = await self._member_directory.get_members(
            entry.project.client_id for entry in listing.items
        )

        views = [
            ApplicationView(
                application=entry.application,
                project=ProjectSummary.of(
                    entry.project, clients.get(entry.project.client_id)
                ),
            )
            for entry in listing.items
        ]
        return Success(value=Page(items=views, total=listing.total, page=listing.page))


class ListApplicationUpdatesHandler:
    """Handler for ListApplicationUpdates query."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        member_directory: MemberDirectory,
    ) -> None:
        self._project_repo = project_repo
        self._member_directory = member_directory

    async def handle(
        self, query: ListApplicationUpdates
    ) -> Result[list[ApplicationUpdate], ApplicationError]:
        freelancer_result = require_freelancer(
            query.principal, ProjectError.FREELANCER_VIEW_ONLY
        )
        if isinstance(freelancer_result, Failure):
            return Failure(error=from_domain_error(freelancer_result.error))

        entries = await self._project_repo.list_application_updates(
            freelancer_result.value, as_utc(query.since)
        )
        clients = await self._member_directory.get_members(
            entry.project.client_id for entry in entries
        )

        updates = []
        for entry in entries:
            client = clients.get(entry.project.client_id)
            updates.append(
                ApplicationUpdate(
                    application_id=entry.application.id,
                    project_id=entry.project.id,
                    project_title=entry.project.title,
                    client_name=client.display_name if client else None,
                    status=entry.application.status,
                    applied_at=entry.application.applied_at,
                    decided_at=entry.application.decided_at,
                )
            )
        return Success(value=updates)
