"""Project and application handler factories.

Request-scoped handler instances. Every handler built for one request
shares that request's database session (FastAPI caches Depends per
request), so a handler's reads and its compare-and-set write go through
the same session.

Usage:
    @router.post("/projects/{project_id}/applications")
    async def submit_application(
        handler: SubmitApplicationHandler = Depends(get_submit_application_handler),
    ):
        result = await handler.handle(command)
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.core.container.events import get_event_bus
from src.core.container.infrastructure import get_db_session, get_logger

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        CreateProjectHandler,
        DecideApplicationHandler,
        DeleteProjectHandler,
        SubmitApplicationHandler,
        UpdateProjectHandler,
    )
    from src.application.queries.handlers import (
        GetProjectHandler,
        ListApplicationUpdatesHandler,
        ListClientProjectsHandler,
        ListFreelancerApplicationsHandler,
        ListProjectApplicationsHandler,
        ListProjectsHandler,
        RecommendedProjectsHandler,
    )
    from src.application.services import ProjectWriteService


def _project_writer(session: AsyncSession) -> "ProjectWriteService":
    from src.application.services import ProjectWriteService
    from src.infrastructure.persistence.repositories import ProjectRepository

    return ProjectWriteService(
        project_repo=ProjectRepository(session=session),
        logger=get_logger(),
        max_attempts=get_settings().aggregate_write_retries,
    )


# ============================================================================
# Command Handlers
# ============================================================================


async def get_create_project_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "CreateProjectHandler":
    from src.application.commands.handlers import CreateProjectHandler
    from src.infrastructure.persistence.repositories import ProjectRepository

    return CreateProjectHandler(
        project_repo=ProjectRepository(session=session),
        event_bus=get_event_bus(),
    )


async def get_update_project_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "UpdateProjectHandler":
    from src.application.commands.handlers import UpdateProjectHandler

    return UpdateProjectHandler(
        project_writer=_project_writer(session),
        event_bus=get_event_bus(),
    )


async def get_delete_project_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DeleteProjectHandler":
    from src.application.commands.handlers import DeleteProjectHandler

    return DeleteProjectHandler(
        project_writer=_project_writer(session),
        event_bus=get_event_bus(),
    )


async def get_submit_application_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "SubmitApplicationHandler":
    from src.application.commands.handlers import SubmitApplicationHandler

    return SubmitApplicationHandler(
        project_writer=_project_writer(session),
        event_bus=get_event_bus(),
    )


async def get_decide_application_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "DecideApplicationHandler":
    """Get DecideApplication command handler (request-scoped).

    Dependencies:
    - ProjectWriteService (compare-and-set writes with retry)
    - EventBus (app-scoped singleton)
    """
    from src.application.commands.handlers import DecideApplicationHandler

    return DecideApplicationHandler(
        project_writer=_project_writer(session),
        event_bus=get_event_bus(),
    )


# ============================================================================
# Query Handlers
# ============================================================================


async def get_get_project_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetProjectHandler":
    from src.application.queries.handlers import GetProjectHandler
    from src.infrastructure.persistence.repositories import ProjectRepository

    return GetProjectHandler(project_repo=ProjectRepository(session=session))


async def get_list_projects_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListProjectsHandler":
    from src.application.queries.handlers import ListProjectsHandler
    from src.infrastructure.persistence.repositories import ProjectRepository

    return ListProjectsHandler(project_repo=ProjectRepository(session=session))


async def get_list_client_projects_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListClientProjectsHandler":
    from src.application.queries.handlers import ListClientProjectsHandler
    from src.infrastructure.persistence.repositories import ProjectRepository

    return ListClientProjectsHandler(project_repo=ProjectRepository(session=session))


async def get_recommended_projects_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "RecommendedProjectsHandler":
    from src.application.queries.handlers import RecommendedProjectsHandler
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        ProjectRepository,
    )

    return RecommendedProjectsHandler(
        project_repo=ProjectRepository(session=session),
        member_directory=MemberRepository(session=session),
    )


async def get_list_project_applications_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListProjectApplicationsHandler":
    from src.application.queries.handlers import ListProjectApplicationsHandler
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        ProjectRepository,
    )

    return ListProjectApplicationsHandler(
        project_repo=ProjectRepository(session=session),
        member_directory=MemberRepository(session=session),
    )


async def get_list_freelancer_applications_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListFreelancerApplicationsHandler":
    from src.application.queries.handlers import ListFreelancerApplicationsHandler
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        ProjectRepository,
    )

    return ListFreelancerApplicationsHandler(
        project_repo=ProjectRepository(session=session),
        member_directory=MemberRepository(session=session),
    )


async def get_list_application_updates_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListApplicationUpdatesHandler":
    from src.application.queries.handlers import ListApplicationUpdatesHandler
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        ProjectRepository,
    )

    return ListApplicationUpdatesHandler(
        project_repo=ProjectRepository(session=session),
        member_directory=MemberRepository(session=session),
    )
