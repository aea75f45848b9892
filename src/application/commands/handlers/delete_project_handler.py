"""DeleteProject command handler.

Owner-only, and only while the project has no applications.
"""

from uuid import UUID

from src.application.commands.project_commands import DeleteProject
from src.application.errors import ApplicationError
from src.application.services import ProjectWriteService
from src.core.result import Failure, Result, Success
from src.domain.events import ProjectDeleted
from src.domain.protocols import EventBusProtocol


class DeleteProjectHandler:
    """Handler for DeleteProject command."""

    def __init__(
        self,
        project_writer: ProjectWriteService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._project_writer = project_writer
        self._event_bus = event_bus

    async def handle(self, cmd: DeleteProject) -> Result[UUID, ApplicationError]:
        caller_id = cmd.principal.member_id
        result = await self._project_writer.remove(
            cmd.project_id,
            lambda project: project.ensure_deletable(caller_id=caller_id),
        )
        if isinstance(result, Failure):
            return result
        project = result.value

        await self._event_bus.publish(
            ProjectDeleted(project_id=project.id, client_id=project.client_id)
        )
        return Success(value=project.id)
