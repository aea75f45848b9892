"""Domain events package.

Usage:
    from src.domain.events import ApplicationDecided, DomainEvent
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.project_events import (
    ApplicationDecided,
    ApplicationSubmitted,
    ProjectAssigned,
    ProjectCreated,
    ProjectDeleted,
    ProjectUpdated,
)

__all__ = [
    "ApplicationDecided",
    "ApplicationSubmitted",
    "DomainEvent",
    "ProjectAssigned",
    "ProjectCreated",
    "ProjectDeleted",
    "ProjectUpdated",
]
