"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: Structured log line per lifecycle event
    - NotificationEventHandler: Drives the NotificationDispatcher

All handlers run inside the event bus delivery task, after the aggregate
write has committed.
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler
from src.infrastructure.events.handlers.notification_event_handler import (
    NotificationEventHandler,
)

__all__ = [
    "LoggingEventHandler",
    "NotificationEventHandler",
]
