"""NotificationDispatcher protocol (port).

Delivery (email, in-app, quiet hours, preferences) belongs to the
notification subsystem. Calls are best-effort: implementations may raise,
and the event handler that drives them logs and drops the failure.

Implementations:
    - LoggingNotificationDispatcher: src/infrastructure/notifications/
"""

from typing import Protocol
from uuid import UUID

from src.domain.enums import ApplicationStatus


class NotificationDispatcher(Protocol):
    """Outbound notifications about applications."""

    async def notify_submitted(
        self, *, project_id: UUID, freelancer_id: UUID, client_id: UUID
    ) -> None:
        """Tell the project owner a new application arrived."""
        ...

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
        """Tell an applicant their application was accepted or rejected."""
        ...

    async def notify_assigned(
        self,
        *,
        project_id: UUID,
        freelancer_id: UUID,
        client_id: UUID,
        project_title: str,
    ) -> None:
        """Tell the project owner the project is now assigned."""
        ...
