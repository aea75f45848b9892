"""Infrastructure event implementations.

Event Bus:
    - InMemoryEventBus: fire-and-forget, fail-open event bus

Event Handlers:
    - LoggingEventHandler, NotificationEventHandler (see handlers/)
"""

from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

__all__ = [
    "InMemoryEventBus",
]
