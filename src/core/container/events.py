"""Event bus and notification dispatcher, built once per process.

All subscriptions are made here, so the full map of who reacts to which
lifecycle event lives in one place.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol
    from src.domain.protocols.notification_protocol import NotificationDispatcher


@lru_cache()
def get_notification_dispatcher() -> "NotificationDispatcher":
    # Only the logging transport exists today
    from src.core.container.infrastructure import get_logger
    from src.infrastructure.notifications import LoggingNotificationDispatcher

    return LoggingNotificationDispatcher(logger=get_logger())


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Bus with the audit-log handler on every event and notifications on
    submissions, decisions, assignment and updates."""
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_logger
    from src.domain.events import (
        ApplicationDecided,
        ApplicationSubmitted,
        ProjectAssigned,
        ProjectCreated,
        ProjectDeleted,
        ProjectUpdated,
    )
    from src.infrastructure.events import InMemoryEventBus
    from src.infrastructure.events.handlers import (
        LoggingEventHandler,
        NotificationEventHandler,
    )

    settings = get_settings()
    logger = get_logger()

    event_bus = InMemoryEventBus(logger=logger)

    logging_handler = LoggingEventHandler(logger=logger)
    event_bus.subscribe(ProjectCreated, logging_handler.handle_project_created)
    event_bus.subscribe(ProjectUpdated, logging_handler.handle_project_updated)
    event_bus.subscribe(ProjectDeleted, logging_handler.handle_project_deleted)
    event_bus.subscribe(
        ApplicationSubmitted, logging_handler.handle_application_submitted
    )
    event_bus.subscribe(ApplicationDecided, logging_handler.handle_application_decided)
    event_bus.subscribe(ProjectAssigned, logging_handler.handle_project_assigned)

    notification_handler = NotificationEventHandler(
        dispatcher=get_notification_dispatcher(),
        logger=logger,
        notify_auto_rejected=settings.notify_auto_rejected,
    )
    event_bus.subscribe(
        ApplicationSubmitted, notification_handler.handle_application_submitted
    )
    event_bus.subscribe(
        ApplicationDecided, notification_handler.handle_application_decided
    )
    event_bus.subscribe(ProjectAssigned, notification_handler.handle_project_assigned)
    event_bus.subscribe(ProjectUpdated, notification_handler.handle_project_updated)

    return event_bus
