"""Logging event handler for project lifecycle events.

Writes one INFO line per lifecycle event, keyed by snake_case event name.

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - project_id, application_id, client_id, freelancer_id where relevant

Usage:
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> event_bus.subscribe(ProjectCreated, logging_handler.handle_project_created)
"""

from src.domain.events import (
    ApplicationDecided,
    ApplicationSubmitted,
    ProjectAssigned,
    ProjectCreated,
    ProjectDeleted,
    ProjectUpdated,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of lifecycle events.

    Attributes:
        _logger: Logger protocol implementation (from container).
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def handle_project_created(self, event: ProjectCreated) -> None:
        self._logger.info(
            "project_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.project_id),
            client_id=str(event.client_id),
        )

    async def handle_project_updated(self, event: ProjectUpdated) -> None:
        self._logger.info(
            "project_updated",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.project_id),
            changed_fields=list(event.changed_fields),
            status=event.status.value,
            auto_rejected_count=len(event.auto_rejected),
        )

    async def handle_project_deleted(self, event: ProjectDeleted) -> None:
        self._logger.info(
            "project_deleted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.project_id),
            client_id=str(event.client_id),
        )

    async def handle_application_submitted(self, event: ApplicationSubmitted) -> None:
        self._logger.info(
            "application_submitted",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.project_id),
            application_id=str(event.application_id),
            freelancer_id=str(event.freelancer_id),
        )

    async def handle_application_decided(self, event: ApplicationDecided) -> None:
        """Log a decision, including how many applications it auto-rejected."""
        self._logger.info(
            "application_decided",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.project_id),
            application_id=str(event.application_id),
            decision=event.decision.value,
            auto_rejected_count=len(event.auto_rejected),
        )

    async def handle_project_assigned(self, event: ProjectAssigned) -> None:
        self._logger.info(
            "project_assigned",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            project_id=str(event.project_id),
            freelancer_id=str(event.freelancer_id),
        )
