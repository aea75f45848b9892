"""Project and application lifecycle events.

Published by the command handlers once the aggregate write has committed.
Subscribers (logging, notifications) run outside the request and can never
undo or fail the transition.

Events:
    ProjectCreated, ProjectUpdated, ProjectDeleted,
    ApplicationSubmitted, ApplicationDecided, ProjectAssigned
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import ApplicationStatus, ProjectStatus
from src.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class ProjectCreated(DomainEvent):
    project_id: UUID
    client_id: UUID
    title: str


@dataclass(frozen=True, kw_only=True, slots=True)
class ProjectUpdated(DomainEvent):
    """Owner changed project fields or cancelled it.

    Attributes:
        changed_fields: Names of the fields in the update.
        status: Project status after the update.
        auto_rejected: (application_id, freelancer_id) pairs rejected by a
            cancellation.
    """

    project_id: UUID
    client_id: UUID
    title: str
    changed_fields: tuple[str, ...]
    status: ProjectStatus
    auto_rejected: tuple[tuple[UUID, UUID], ...] = ()


@dataclass(frozen=True, kw_only=True, slots=True)
class ProjectDeleted(DomainEvent):
    project_id: UUID
    client_id: UUID


@dataclass(frozen=True, kw_only=True, slots=True)
class ApplicationSubmitted(DomainEvent):
    project_id: UUID
    application_id: UUID
    freelancer_id: UUID
    client_id: UUID
    project_title: str


@dataclass(frozen=True, kw_only=True, slots=True)
class ApplicationDecided(DomainEvent):
    """Owner accepted or rejected an application.

    Attributes:
        decision: ACCEPTED or REJECTED.
        auto_rejected: (application_id, freelancer_id) pairs rejected in the
            same write as an acceptance.
    """

    project_id: UUID
    application_id: UUID
    freelancer_id: UUID
    client_id: UUID
    project_title: str
    decision: ApplicationStatus
    auto_rejected: tuple[tuple[UUID, UUID], ...] = ()


@dataclass(frozen=True, kw_only=True, slots=True)
class ProjectAssigned(DomainEvent):
    project_id: UUID
    client_id: UUID
    freelancer_id: UUID
    project_title: str
