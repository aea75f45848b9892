"""CreateProject command handler.

Flow:
1. Require a client principal
2. Validate and normalize fields
3. Persist the new aggregate (status OPEN, version 0)
4. Publish ProjectCreated
"""

from uuid_extensions import uuid7

from src.application.commands.project_commands import CreateProject
from src.application.errors import ApplicationError, from_domain_error
from src.core.result import Failure, Result, Success
from src.domain.entities import Project
from src.domain.events import ProjectCreated
from src.domain.protocols import EventBusProtocol, ProjectRepository
from src.domain.validators import validate_project_fields
from src.domain.value_objects import require_client


class CreateProjectHandler:
    """Handler for CreateProject command."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        event_bus: EventBusProtocol,
    ) -> None:
        self._project_repo = project_repo
        self._event_bus = event_bus

    async def handle(self, cmd: CreateProject) -> Result[Project, ApplicationError]:
        """Handle CreateProject command.

        Returns:
            Success(Project): The stored project.
            Failure(ApplicationError): FORBIDDEN for non-clients,
                COMMAND_VALIDATION_FAILED for invalid fields.
        """
        client_result = require_client(cmd.principal)
        if isinstance(client_result, Failure):
            return Failure(error=from_domain_error(client_result.error))

        fields_result = validate_project_fields(
            title=cmd.title,
            description=cmd.description,
            required_skills=cmd.required_skills,
            budget_min=cmd.budget_min,
            budget_max=cmd.budget_max,
            deadline=cmd.deadline,
        )
        if isinstance(fields_result, Failure):
            return Failure(error=from_domain_error(fields_result.error))
        values = fields_result.value

        project = Project(
            id=uuid7(),
            client_id=client_result.value,
            title=values.title,
            description=values.description,
            required_skills=values.required_skills,
            budget_min=values.budget_min,
            budget_max=values.budget_max,
            deadline=values.deadline,
        )
        await self._project_repo.add(project)

        await self._event_bus.publish(
            ProjectCreated(
                project_id=project.id,
                client_id=project.client_id,
                title=project.title,
            )
        )
        return Success(value=project)
