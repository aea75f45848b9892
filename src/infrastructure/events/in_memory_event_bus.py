"""Single-process event bus behind EventBusProtocol.

`publish` schedules delivery on the running loop and returns; the command
that published has already committed and answered by the time handlers run.
A handler that raises is logged as `event_handler_failed` and does not stop
the other handlers for the same event.

    bus = InMemoryEventBus(logger=get_logger())
    bus.subscribe(ApplicationSubmitted, notifications.on_application_submitted)
    await bus.publish(ApplicationSubmitted(...))
    await bus.drain()  # shutdown and tests
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """Routes by exact event class. Not thread-safe; one event loop only."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self._subscribers: defaultdict[type[DomainEvent], list[EventHandler]] = (
            defaultdict(list)
        )
        # strong refs so running deliveries are not garbage collected
        self._in_flight: set[asyncio.Task[None]] = set()

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._subscribers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        handlers = tuple(self._subscribers.get(type(event), ()))
        if not handlers:
            return

        self._logger.debug(
            "event_publishing",
            event_type=type(event).__name__,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )
        for handler in handlers:
            task = asyncio.create_task(self._run_handler(handler, event))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

    async def drain(self) -> None:
        """Block until nothing is in flight, counting events published meanwhile."""
        while self._in_flight:
            await asyncio.wait(tuple(self._in_flight))

    async def _run_handler(self, handler: EventHandler, event: DomainEvent) -> None:
        try:
            await handler(event)
        except Exception as exc:
            self._logger.error(
                "event_handler_failed",
                error=exc,
                event_type=type(event).__name__,
                event_id=str(event.event_id),
                handler_name=getattr(handler, "__qualname__", repr(handler)),
            )
