"""SubmitApplication command handler.

Flow:
1. Load the project (NOT_FOUND if missing)
2. Require a freelancer principal (FORBIDDEN otherwise)
3. Project checks: open, not own project, not applied before (CONFLICT)
4. Field checks (COMMAND_VALIDATION_FAILED)
5. Version-checked write, retried if another writer got there first
6. Publish ApplicationSubmitted (delivery never blocks or fails the request)
"""

from uuid_extensions import uuid7

from src.application.commands.project_commands import SubmitApplication
from src.application.errors import ApplicationError
from src.application.services import ProjectWriteService
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Application, Project
from src.domain.events import ApplicationSubmitted
from src.domain.protocols import EventBusProtocol
from src.domain.value_objects import require_freelancer


class SubmitApplicationHandler:
    """Handler for SubmitApplication command."""

    def __init__(
        self,
        project_writer: ProjectWriteService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._project_writer = project_writer
        self._event_bus = event_bus

    async def handle(
        self, cmd: SubmitApplication
    ) -> Result[Application, ApplicationError]:
        """Handle SubmitApplication command.

        Returns:
            Success(Application): The pending application.
            Failure(ApplicationError): First failed precondition, or INTERNAL.
        """

        def submit(project: Project) -> Result[Application, DomainError]:
            freelancer_result = require_freelancer(cmd.principal)
            if isinstance(freelancer_result, Failure):
                return freelancer_result
            return project.submit_application(
                application_id=uuid7(),
                freelancer_id=freelancer_result.value,
                cover_letter=cmd.cover_letter,
                proposed_rate=cmd.proposed_rate,
                estimated_duration=cmd.estimated_duration,
            )

        result = await self._project_writer.mutate(cmd.project_id, submit)
        if isinstance(result, Failure):
            return result
        project, application = result.value

        await self._event_bus.publish(
            ApplicationSubmitted(
                project_id=project.id,
                application_id=application.id,
                freelancer_id=application.freelancer_id,
                client_id=project.client_id,
                project_title=project.title,
            )
        )
        return Success(value=application)
