"""UpdateProject command handler.

Owner-only partial update. Field edits need an OPEN project; a
cancellation also rejects the remaining pending applications in the same
version-checked write.
"""

from src.application.commands.project_commands import UpdateProject
from src.application.errors import ApplicationError
from src.application.services import ProjectWriteService
from src.core.result import Failure, Result, Success
from src.domain.entities import Project
from src.domain.events import ProjectUpdated
from src.domain.protocols import EventBusProtocol


class UpdateProjectHandler:
    """Handler for UpdateProject command."""

    def __init__(
        self,
        project_writer: ProjectWriteService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._project_writer = project_writer
        self._event_bus = event_bus

    async def handle(self, cmd: UpdateProject) -> Result[Project, ApplicationError]:
        """Handle UpdateProject command.

        Returns:
            Success(Project): Project after the committed write.
            Failure(ApplicationError): NOT_FOUND, FORBIDDEN (not owner),
                CONFLICT (not open / already closed), COMMAND_VALIDATION_FAILED,
                or INTERNAL.
        """
        caller_id = cmd.principal.member_id
        result = await self._project_writer.mutate(
            cmd.project_id,
            lambda project: project.apply_changes(cmd.changes, caller_id=caller_id),
        )
        if isinstance(result, Failure):
            return result
        project, auto_rejected = result.value

        await self._event_bus.publish(
            ProjectUpdated(
                project_id=project.id,
                client_id=project.client_id,
                title=project.title,
                changed_fields=tuple(cmd.changes.changed_fields()),
                status=project.status,
                auto_rejected=tuple((a.id, a.freelancer_id) for a in auto_rejected),
            )
        )
        return Success(value=project)
