"""Port through which committed project changes are announced.

Contract for implementations:

* `publish` schedules delivery and returns; it never raises and never
  waits for handlers.
* A failing handler is logged and does not stop the others.
* Routing is by exact event class; subclasses are not delivered to a
  parent's handlers.
* Handlers for one event run in no particular order.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from src.domain.events.base_event import DomainEvent

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBusProtocol(Protocol):
    def subscribe(
        self, event_type: type[DomainEvent], handler: EventHandler
    ) -> None: ...

    async def publish(self, event: DomainEvent) -> None:
        """Call only after the write that produced `event` has committed."""
        ...

    async def drain(self) -> None:
        """Wait for all scheduled deliveries (shutdown, tests)."""
        ...
