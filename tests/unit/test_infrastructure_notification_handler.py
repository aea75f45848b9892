"""Unit tests for NotificationEventHandler.

Reference:
    - src/infrastructure/events/handlers/notification_event_handler.py
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.domain.enums import ApplicationStatus, ProjectStatus
from src.domain.events import (
    ApplicationDecided,
    ApplicationSubmitted,
    ProjectAssigned,
    ProjectUpdated,
)
from src.domain.protocols import NotificationDispatcher
from src.infrastructure.events.handlers import NotificationEventHandler
from tests.factories import new_id


@pytest.fixture
def dispatcher() -> AsyncMock:
    return AsyncMock(spec=NotificationDispatcher)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


def _accepted(auto_rejected=()) -> ApplicationDecided:
    return ApplicationDecided(
        project_id=new_id(),
        application_id=new_id(),
        freelancer_id=new_id(),
        client_id=new_id(),
        project_title="Dashboard",
        decision=ApplicationStatus.ACCEPTED,
        auto_rejected=auto_rejected,
    )


async def test_submission_notifies_owner(dispatcher, logger):
    handler = NotificationEventHandler(dispatcher=dispatcher, logger=logger)
    event = ApplicationSubmitted(
        project_id=new_id(),
        application_id=new_id(),
        freelancer_id=new_id(),
        client_id=new_id(),
        project_title="Dashboard",
    )

    await handler.handle_application_submitted(event)

    dispatcher.notify_submitted.assert_awaited_once_with(
        project_id=event.project_id,
        freelancer_id=event.freelancer_id,
        client_id=event.client_id,
    )


async def test_acceptance_notifies_auto_rejected_applicants(dispatcher, logger):
    rejected = ((new_id(), new_id()), (new_id(), new_id()))
    handler = NotificationEventHandler(dispatcher=dispatcher, logger=logger)

    await handler.handle_application_decided(_accepted(rejected))

    decisions = [
        call.kwargs["decision"] for call in dispatcher.notify_decision.await_args_list
    ]
    assert decisions == [
        ApplicationStatus.ACCEPTED,
        ApplicationStatus.REJECTED,
        ApplicationStatus.REJECTED,
    ]
    recipients = [
        call.kwargs["freelancer_id"]
        for call in dispatcher.notify_decision.await_args_list[1:]
    ]
    assert recipients == [freelancer_id for _, freelancer_id in rejected]


async def test_auto_rejected_notifications_can_be_disabled(dispatcher, logger):
    handler = NotificationEventHandler(
        dispatcher=dispatcher, logger=logger, notify_auto_rejected=False
    )

    await handler.handle_application_decided(_accepted(((new_id(), new_id()),)))

    assert dispatcher.notify_decision.await_count == 1


async def test_cancellation_notifies_rejected_applicants(dispatcher, logger):
    handler = NotificationEventHandler(dispatcher=dispatcher, logger=logger)
    event = ProjectUpdated(
        project_id=new_id(),
        client_id=new_id(),
        title="Dashboard",
        changed_fields=("status",),
        status=ProjectStatus.CANCELLED,
        auto_rejected=((new_id(), new_id()),),
    )

    await handler.handle_project_updated(event)

    dispatcher.notify_decision.assert_awaited_once()
    assert (
        dispatcher.notify_decision.await_args.kwargs["decision"]
        is ApplicationStatus.REJECTED
    )


async def test_dispatch_failure_is_logged_and_others_still_sent(dispatcher, logger):
    dispatcher.notify_decision.side_effect = [ConnectionError("down"), None]
    handler = NotificationEventHandler(dispatcher=dispatcher, logger=logger)

    await handler.handle_application_decided(_accepted(((new_id(), new_id()),)))

    assert dispatcher.notify_decision.await_count == 2
    logger.error.assert_called_once()
    assert logger.error.call_args.args[0] == "notification_failed"


async def test_assignment_notifies_owner(dispatcher, logger):
    handler = NotificationEventHandler(dispatcher=dispatcher, logger=logger)
    event = ProjectAssigned(
        project_id=new_id(),
        client_id=new_id(),
        freelancer_id=new_id(),
        project_title="Dashboard",
    )

    await handler.handle_project_assigned(event)

    dispatcher.notify_assigned.assert_awaited_once()
