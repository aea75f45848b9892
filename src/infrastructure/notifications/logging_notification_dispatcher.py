"""Logging notification dispatcher.

Bundled NotificationDispatcher adapter: records each notification as a
structured `notification_sent` log line. Real transports (email, in-app,
push) live in the notification subsystem and plug in behind the same
protocol.

Usage:
    >>> dispatcher = LoggingNotificationDispatcher(logger=get_logger())
    >>> await dispatcher.notify_submitted(
    ...     project_id=project.id, freelancer_id=freelancer_id, client_id=project.client_id
    ... )
"""

from uuid import UUID

from src.domain.enums import ApplicationStatus
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingNotificationDispatcher:
    """NotificationDispatcher that only logs."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def notify_submitted(
        self, *, project_id: UUID, freelancer_id: UUID, client_id: UUID
    ) -> None:
        self._logger.info(
            "notification_sent",
            template="application_submitted",
            recipient_id=str(client_id),
            project_id=str(project_id),
            freelancer_id=str(freelancer_id),
        )

    async def notify_decision(
        self,
        *,
        project_id: UUID,
        application_id: UUID,
        decision: ApplicationStatus,
        freelancer_id: UUID,
        client_id: UUID,
        project_title: str,
    ) -> None:
        self._logger.info(
            "notification_sent",
            template=f"application_{decision.value}",
            recipient_id=str(freelancer_id),
            project_id=str(project_id),
            application_id=str(application_id),
            client_id=str(client_id),
            project_title=project_title,
        )

    async def notify_assigned(
        self,
        *,
        project_id: UUID,
        freelancer_id: UUID,
        client_id: UUID,
        project_title: str,
    ) -> None:
        self._logger.info(
            "notification_sent",
            template="project_assigned",
            recipient_id=str(client_id),
            project_id=str(project_id),
            freelancer_id=str(freelancer_id),
            project_title=project_title,
        )
