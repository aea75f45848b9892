"""Unit tests for the project command handlers.

Handlers run against an in-memory repository (same compare-and-set
contract as the SQL one) and a mocked event bus.

Reference:
    - src/application/commands/handlers/
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.application.commands import (
    CreateProject,
    DecideApplication,
    DeleteProject,
    SubmitApplication,
    UpdateProject,
)
from src.application.commands.handlers import (
    CreateProjectHandler,
    DecideApplicationHandler,
    DeleteProjectHandler,
    SubmitApplicationHandler,
    UpdateProjectHandler,
)
from src.application.errors import ApplicationErrorCode
from src.application.services import ProjectWriteService
from src.core.result import Failure, Success
from src.domain.enums import ApplicationStatus, ProjectStatus
from src.domain.events import (
    ApplicationDecided,
    ApplicationSubmitted,
    ProjectAssigned,
    ProjectCreated,
    ProjectDeleted,
    ProjectUpdated,
)
from src.domain.protocols import EventBusProtocol
from src.domain.value_objects import (
    ClientPrincipal,
    FreelancerPrincipal,
    MentorPrincipal,
    ProjectChanges,
)
from tests.factories import add_application, future, make_project, new_id
from tests.fakes import InMemoryProjectRepository


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def event_bus() -> AsyncMock:
    return AsyncMock(spec=EventBusProtocol)


@pytest.fixture
def repo() -> InMemoryProjectRepository:
    return InMemoryProjectRepository()


@pytest.fixture
def writer(repo) -> ProjectWriteService:
    return ProjectWriteService(project_repo=repo, logger=MagicMock(), max_attempts=3)


def _published(event_bus: AsyncMock) -> list:
    return [call.args[0] for call in event_bus.publish.await_args_list]


def _store(repo: InMemoryProjectRepository, project) -> None:
    repo.projects[project.id] = project


# =============================================================================
# CreateProject
# =============================================================================


class TestCreateProjectHandler:
    async def test_client_creates_open_project(self, repo, event_bus):
        handler = CreateProjectHandler(project_repo=repo, event_bus=event_bus)
        client_id = new_id()

        result = await handler.handle(
            CreateProject(
                principal=ClientPrincipal(member_id=client_id),
                title=" Analytics dashboard ",
                description="React front end over an existing REST API",
                required_skills=["react", "typescript", "react"],
                budget_min=Decimal("1000"),
                budget_max=Decimal("2000"),
                deadline=future(),
            )
        )

        assert isinstance(result, Success)
        project = result.value
        assert project.client_id == client_id
        assert project.title == "Analytics dashboard"
        assert project.required_skills == ["react", "typescript"]
        assert project.status is ProjectStatus.OPEN
        assert project.version == 0
        assert project.id in repo.projects
        (event,) = _published(event_bus)
        assert isinstance(event, ProjectCreated)
        assert event.project_id == project.id

    async def test_freelancer_cannot_post(self, repo, event_bus):
        handler = CreateProjectHandler(project_repo=repo, event_bus=event_bus)

        result = await handler.handle(
            CreateProject(
                principal=FreelancerPrincipal(member_id=new_id()),
                title="Title",
                description="Description",
                required_skills=["python"],
                budget_min=Decimal("1"),
                budget_max=Decimal("2"),
                deadline=future(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.FORBIDDEN
        assert repo.projects == {}
        event_bus.publish.assert_not_awaited()

    async def test_past_deadline_is_validation_failure(self, repo, event_bus):
        handler = CreateProjectHandler(project_repo=repo, event_bus=event_bus)

        result = await handler.handle(
            CreateProject(
                principal=ClientPrincipal(member_id=new_id()),
                title="Title",
                description="Description",
                required_skills=["python"],
                budget_min=Decimal("1"),
                budget_max=Decimal("2"),
                deadline=datetime.now(UTC) - timedelta(minutes=1),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        assert result.error.domain_error.field == "deadline"


# =============================================================================
# SubmitApplication
# =============================================================================


class TestSubmitApplicationHandler:
    @pytest.fixture
    def handler(self, writer, event_bus) -> SubmitApplicationHandler:
        return SubmitApplicationHandler(project_writer=writer, event_bus=event_bus)

    def _command(self, principal, project_id) -> SubmitApplication:
        return SubmitApplication(
            principal=principal,
            project_id=project_id,
            cover_letter="I have shipped three similar dashboards.",
            proposed_rate=Decimal("45"),
            estimated_duration="3 weeks",
        )

    async def test_freelancer_applies(self, handler, repo, event_bus):
        project = make_project()
        _store(repo, project)
        freelancer_id = new_id()

        result = await handler.handle(
            self._command(FreelancerPrincipal(member_id=freelancer_id), project.id)
        )

        assert isinstance(result, Success)
        assert result.value.status is ApplicationStatus.PENDING
        stored = repo.projects[project.id]
        assert stored.version == 1
        assert [a.freelancer_id for a in stored.applications] == [freelancer_id]
        (event,) = _published(event_bus)
        assert isinstance(event, ApplicationSubmitted)
        assert event.client_id == project.client_id

    async def test_unknown_project_is_not_found_before_role_check(
        self, handler, event_bus
    ):
        result = await handler.handle(
            self._command(ClientPrincipal(member_id=new_id()), new_id())
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.NOT_FOUND

    async def test_non_freelancer_is_forbidden(self, handler, repo, event_bus):
        project = make_project()
        _store(repo, project)

        result = await handler.handle(
            self._command(MentorPrincipal(member_id=new_id()), project.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.FORBIDDEN
        event_bus.publish.assert_not_awaited()

    async def test_duplicate_is_conflict(self, handler, repo, event_bus):
        project = make_project()
        freelancer_id = new_id()
        add_application(project, freelancer_id)
        _store(repo, project)

        result = await handler.handle(
            self._command(FreelancerPrincipal(member_id=freelancer_id), project.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.CONFLICT
        assert len(repo.projects[project.id].applications) == 1
        event_bus.publish.assert_not_awaited()


# =============================================================================
# DecideApplication
# =============================================================================


class TestDecideApplicationHandler:
    @pytest.fixture
    def handler(self, writer, event_bus) -> DecideApplicationHandler:
        return DecideApplicationHandler(project_writer=writer, event_bus=event_bus)

    async def test_accept_publishes_decision_and_assignment(
        self, handler, repo, event_bus
    ):
        project = make_project()
        chosen = add_application(project)
        other = add_application(project)
        _store(repo, project)

        result = await handler.handle(
            DecideApplication(
                principal=ClientPrincipal(member_id=project.client_id),
                project_id=project.id,
                application_id=chosen.id,
                decision=ApplicationStatus.ACCEPTED,
            )
        )

        assert isinstance(result, Success)
        decision = result.value
        assert decision.application.status is ApplicationStatus.ACCEPTED
        assert decision.project.status is ProjectStatus.ASSIGNED
        assert decision.auto_rejected == [other.id]

        decided, assigned = _published(event_bus)
        assert isinstance(decided, ApplicationDecided)
        assert decided.decision is ApplicationStatus.ACCEPTED
        assert decided.auto_rejected == ((other.id, other.freelancer_id),)
        assert isinstance(assigned, ProjectAssigned)
        assert assigned.freelancer_id == chosen.freelancer_id

    async def test_reject_publishes_decision_only(self, handler, repo, event_bus):
        project = make_project()
        target = add_application(project)
        _store(repo, project)

        result = await handler.handle(
            DecideApplication(
                principal=ClientPrincipal(member_id=project.client_id),
                project_id=project.id,
                application_id=target.id,
                decision=ApplicationStatus.REJECTED,
            )
        )

        assert isinstance(result, Success)
        assert result.value.project.status is ProjectStatus.OPEN
        (event,) = _published(event_bus)
        assert isinstance(event, ApplicationDecided)
        assert event.decision is ApplicationStatus.REJECTED

    async def test_freelancer_cannot_decide(self, handler, repo, event_bus):
        project = make_project()
        freelancer_id = new_id()
        application = add_application(project, freelancer_id)
        _store(repo, project)

        result = await handler.handle(
            DecideApplication(
                principal=FreelancerPrincipal(member_id=freelancer_id),
                project_id=project.id,
                application_id=application.id,
                decision=ApplicationStatus.ACCEPTED,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code is ApplicationErrorCode.FORBIDDEN
        event_bus.publish.assert_not_awaited()


# =============================================================================
# UpdateProject / DeleteProject
# =============================================================================


async def test_cancellation_publishes_auto_rejections(writer, repo, event_bus):
    project = make_project()
    pending = add_application(project)
    _store(repo, project)
    handler = UpdateProjectHandler(project_writer=writer, event_bus=event_bus)

    result = await handler.handle(
        UpdateProject(
            principal=ClientPrincipal(member_id=project.client_id),
            project_id=project.id,
            changes=ProjectChanges(status=ProjectStatus.CANCELLED),
        )
    )

    assert isinstance(result, Success)
    assert result.value.status is ProjectStatus.CANCELLED
    (event,) = _published(event_bus)
    assert isinstance(event, ProjectUpdated)
    assert event.changed_fields == ("status",)
    assert event.auto_rejected == ((pending.id, pending.freelancer_id),)


async def test_update_by_non_owner_is_forbidden(writer, repo, event_bus):
    project = make_project()
    _store(repo, project)
    handler = UpdateProjectHandler(project_writer=writer, event_bus=event_bus)

    result = await handler.handle(
        UpdateProject(
            principal=ClientPrincipal(member_id=new_id()),
            project_id=project.id,
            changes=ProjectChanges(title="Mine now"),
        )
    )

    assert isinstance(result, Failure)
    assert result.error.code is ApplicationErrorCode.FORBIDDEN


async def test_delete_removes_project(writer, repo, event_bus):
    project = make_project()
    _store(repo, project)
    handler = DeleteProjectHandler(project_writer=writer, event_bus=event_bus)

    result = await handler.handle(
        DeleteProject(
            principal=ClientPrincipal(member_id=project.client_id),
            project_id=project.id,
        )
    )

    assert result == Success(value=project.id)
    assert repo.projects == {}
    (event,) = _published(event_bus)
    assert isinstance(event, ProjectDeleted)


async def test_delete_with_applications_is_conflict(writer, repo, event_bus):
    project = make_project()
    add_application(project)
    _store(repo, project)
    handler = DeleteProjectHandler(project_writer=writer, event_bus=event_bus)

    result = await handler.handle(
        DeleteProject(
            principal=ClientPrincipal(member_id=project.client_id),
            project_id=project.id,
        )
    )

    assert isinstance(result, Failure)
    assert result.error.code is ApplicationErrorCode.CONFLICT
    assert project.id in repo.projects
