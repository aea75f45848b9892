"""DecideApplication command handler.

Accepting an application assigns the project and rejects every other
pending application; both happen in one version-checked write. Two owners'
tabs accepting different applications at the same time therefore cannot
both win: the loser reloads, finds the project assigned and its own
application rejected, and gets CONFLICT.

Events (published after commit):
    - ApplicationDecided (always)
    - ProjectAssigned (on acceptance)
"""

from src.application.commands.project_commands import DecideApplication
from src.application.dtos import DecisionResult
from src.application.errors import ApplicationError
from src.application.services import ProjectWriteService
from src.core.result import Failure, Result, Success
from src.domain.enums import ApplicationStatus
from src.domain.events import ApplicationDecided, ProjectAssigned
from src.domain.protocols import EventBusProtocol


class DecideApplicationHandler:
    """Handler for DecideApplication command."""

    def __init__(
        self,
        project_writer: ProjectWriteService,
        event_bus: EventBusProtocol,
    ) -> None:
        self._project_writer = project_writer
        self._event_bus = event_bus

    async def handle(
        self, cmd: DecideApplication
    ) -> Result[DecisionResult, ApplicationError]:
        """Handle DecideApplication command.

        Returns:
            Success(DecisionResult): Decided application and committed project.
            Failure(ApplicationError): NOT_FOUND (project or application),
                FORBIDDEN (not owner), CONFLICT (not pending), or INTERNAL.
        """
        caller_id = cmd.principal.member_id
        result = await self._project_writer.mutate(
            cmd.project_id,
            lambda project: project.decide_application(
                application_id=cmd.application_id,
                decision=cmd.decision,
                caller_id=caller_id,
            ),
        )
        if isinstance(result, Failure):
            return result
        project, outcome = result.value
        application = outcome.application

        await self._event_bus.publish(
            ApplicationDecided(
                project_id=project.id,
                application_id=application.id,
                freelancer_id=application.freelancer_id,
                client_id=project.client_id,
                project_title=project.title,
                decision=application.status,
                auto_rejected=tuple(
                    (rejected.id, rejected.freelancer_id)
                    for rejected in outcome.auto_rejected
                ),
            )
        )
        if application.status is ApplicationStatus.ACCEPTED:
            await self._event_bus.publish(
                ProjectAssigned(
                    project_id=project.id,
                    client_id=project.client_id,
                    freelancer_id=application.freelancer_id,
                    project_title=project.title,
                )
            )

        return Success(
            value=DecisionResult(
                application=application,
                project=project,
                auto_rejected=[rejected.id for rejected in outcome.auto_rejected],
            )
        )
