"""Domain protocols (ports) package.

Protocols the domain needs; infrastructure provides the adapters.
"""

from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.member_directory import MemberDirectory
from src.domain.protocols.notification_protocol import NotificationDispatcher
from src.domain.protocols.project_repository import (
    ApplicationListing,
    ProjectRepository,
)

__all__ = [
    "ApplicationListing",
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    "MemberDirectory",
    "NotificationDispatcher",
    "ProjectRepository",
]
