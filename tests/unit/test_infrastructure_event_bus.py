"""Unit tests for InMemoryEventBus.

Tests fire-and-forget delivery, exact-type routing, drain(), and
fail-open behaviour when a handler raises.

Reference:
    - src/infrastructure/events/in_memory_event_bus.py
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from src.domain.events import ProjectCreated, ProjectDeleted
from src.infrastructure.events import InMemoryEventBus
from tests.factories import new_id


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def event_bus(logger) -> InMemoryEventBus:
    return InMemoryEventBus(logger=logger)


def _created() -> ProjectCreated:
    return ProjectCreated(project_id=new_id(), client_id=new_id(), title="Dashboard")


async def test_publish_returns_before_handlers_finish(event_bus):
    release = asyncio.Event()
    seen = []

    async def slow_handler(event):
        await release.wait()
        seen.append(event)

    event_bus.subscribe(ProjectCreated, slow_handler)
    event = _created()

    await event_bus.publish(event)
    assert seen == []

    release.set()
    await event_bus.drain()
    assert seen == [event]


async def test_routes_by_exact_event_type(event_bus):
    created, deleted = [], []

    async def on_created(event):
        created.append(event)

    async def on_deleted(event):
        deleted.append(event)

    event_bus.subscribe(ProjectCreated, on_created)
    event_bus.subscribe(ProjectDeleted, on_deleted)

    await event_bus.publish(_created())
    await event_bus.drain()

    assert len(created) == 1
    assert deleted == []


async def test_publish_without_subscribers_is_noop(event_bus, logger):
    await event_bus.publish(_created())
    await event_bus.drain()

    logger.debug.assert_not_called()


async def test_failing_handler_does_not_stop_others(event_bus, logger):
    delivered = []

    async def broken(event):
        raise RuntimeError("smtp down")

    async def healthy(event):
        delivered.append(event)

    event_bus.subscribe(ProjectCreated, broken)
    event_bus.subscribe(ProjectCreated, healthy)

    await event_bus.publish(_created())
    await event_bus.drain()

    assert len(delivered) == 1
    logger.error.assert_called_once()
    args, kwargs = logger.error.call_args
    assert args[0] == "event_handler_failed"
    assert isinstance(kwargs["error"], RuntimeError)
    assert kwargs["event_type"] == "ProjectCreated"


async def test_drain_waits_for_events_published_by_handlers(event_bus):
    deleted = []

    async def cascade(event):
        await event_bus.publish(
            ProjectDeleted(project_id=event.project_id, client_id=event.client_id)
        )

    async def on_deleted(event):
        deleted.append(event)

    event_bus.subscribe(ProjectCreated, cascade)
    event_bus.subscribe(ProjectDeleted, on_deleted)

    await event_bus.publish(_created())
    await event_bus.drain()

    assert len(deleted) == 1
