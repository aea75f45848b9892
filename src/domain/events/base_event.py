"""Common fields for marketplace events.

Events are past-tense facts (ProjectCreated, ApplicationDecided) published
once the aggregate write has committed. Each one carries every id and
label its handlers need, so handlers never query storage.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    event_id: UUID = field(default_factory=uuid7)
    occurred_at: datetime = field(default_factory=_utcnow)
