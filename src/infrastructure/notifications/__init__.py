"""Notification dispatcher adapters."""

from src.infrastructure.notifications.logging_notification_dispatcher import (
    LoggingNotificationDispatcher,
)

__all__ = ["LoggingNotificationDispatcher"]
