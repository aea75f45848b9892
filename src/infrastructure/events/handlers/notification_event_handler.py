"""Notification event handler.

Translates lifecycle events into NotificationDispatcher calls. Runs inside
the event bus delivery task, after the write has committed; a dispatcher
failure is logged here and goes no further.

Notifications:
    - ApplicationSubmitted -> owner: notify_submitted
    - ApplicationDecided   -> decided applicant: notify_decision
                              auto-rejected applicants: notify_decision(rejected),
                              when `notify_auto_rejected` is enabled
    - ProjectAssigned      -> owner: notify_assigned
    - ProjectUpdated       -> applicants rejected by a cancellation, same policy

Usage:
    >>> handler = NotificationEventHandler(
    ...     dispatcher=LoggingNotificationDispatcher(logger),
    ...     logger=logger,
    ...     notify_auto_rejected=settings.notify_auto_rejected,
    ... )
    >>> event_bus.subscribe(ApplicationSubmitted, handler.handle_application_submitted)
"""

from collections.abc import Awaitable
from uuid import UUID

from src.domain.enums import ApplicationStatus
from src.domain.events import (
    ApplicationDecided,
    ApplicationSubmitted,
    ProjectAssigned,
    ProjectUpdated,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_protocol import NotificationDispatcher


class NotificationEventHandler:
    """Event handler driving the notification dispatcher.

    Attributes:
        _dispatcher: Outbound notification port.
        _logger: Logger for dispatch failures.
        _notify_auto_rejected: Whether auto-rejected applicants are told.
    """

    def __init__(
        self,
        dispatcher: NotificationDispatcher,
        logger: LoggerProtocol,
        notify_auto_rejected: bool = True,
    ) -> None:
        self._dispatcher = dispatcher
        self._logger = logger
        self._notify_auto_rejected = notify_auto_rejected

    async def handle_application_submitted(self, event: ApplicationSubmitted) -> None:
        await self._dispatch(
            "submitted",
            event.project_id,
            self._dispatcher.notify_submitted(
                project_id=event.project_id,
                freelancer_id=event.freelancer_id,
                client_id=event.client_id,
            ),
        )

    async def handle_application_decided(self, event: ApplicationDecided) -> None:
        await self._dispatch(
            "decision",
            event.project_id,
            self._dispatcher.notify_decision(
                project_id=event.project_id,
                application_id=event.application_id,
                decision=event.decision,
                freelancer_id=event.freelancer_id,
                client_id=event.client_id,
                project_title=event.project_title,
            ),
        )
        await self._notify_rejected(
            event.project_id, event.client_id, event.project_title, event.auto_rejected
        )

    async def handle_project_assigned(self, event: ProjectAssigned) -> None:
        await self._dispatch(
            "assigned",
            event.project_id,
            self._dispatcher.notify_assigned(
                project_id=event.project_id,
                freelancer_id=event.freelancer_id,
                client_id=event.client_id,
                project_title=event.project_title,
            ),
        )

    async def handle_project_updated(self, event: ProjectUpdated) -> None:
        await self._notify_rejected(
            event.project_id, event.client_id, event.title, event.auto_rejected
        )

    async def _notify_rejected(
        self,
        project_id: UUID,
        client_id: UUID,
        project_title: str,
        rejected: tuple[tuple[UUID, UUID], ...],
    ) -> None:
        if not self._notify_auto_rejected:
            return
        for application_id, freelancer_id in rejected:
            await self._dispatch(
                "decision",
                project_id,
                self._dispatcher.notify_decision(
                    project_id=project_id,
                    application_id=application_id,
                    decision=ApplicationStatus.REJECTED,
                    freelancer_id=freelancer_id,
                    client_id=client_id,
                    project_title=project_title,
                ),
            )

    async def _dispatch(
        self, kind: str, project_id: UUID, delivery: Awaitable[None]
    ) -> None:
        # One failed delivery must not stop the remaining ones.
        try:
            await delivery
        except Exception as e:
            self._logger.error(
                "notification_failed",
                error=e,
                notification=kind,
                project_id=str(project_id),
            )
