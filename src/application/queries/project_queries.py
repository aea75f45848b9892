"""Project and application queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. Queries NEVER
change state and do NOT emit domain events.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.domain.enums import ApplicationStatus
from src.domain.value_objects import (
    ApplicationFilter,
    PageRequest,
    Principal,
    ProjectFilter,
    ProjectSort,
)


@dataclass(frozen=True, kw_only=True)
class GetProject:
    """Get one project.

    Attributes:
        principal: None for an anonymous caller.
        include_applications: Attach applications. The owner sees all of
            them, another member only their own, an anonymous caller none.
    """

    principal: Principal | None
    project_id: UUID
    include_applications: bool = False


@dataclass(frozen=True, kw_only=True)
class ListProjects:
    """Public project listing.

    Attributes:
        filters: Listing filters. A filter without a status lists OPEN
            projects only.
    """

    filters: ProjectFilter = field(default_factory=ProjectFilter)
    sort: ProjectSort = field(default_factory=ProjectSort)
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True, kw_only=True)
class ListClientProjects:
    """The calling client's own projects, in every status."""

    principal: Principal
    sort: ProjectSort = field(default_factory=ProjectSort)
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True, kw_only=True)
class RecommendedProjects:
    """Open projects matching the calling freelancer's declared skills."""

    principal: Principal
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True, kw_only=True)
class ListProjectApplications:
    """Applications on one project (owner only).

    Attributes:
        status: Only applications with this status.
    """

    principal: Principal
    project_id: UUID
    status: ApplicationStatus | None = None
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True, kw_only=True)
class ListFreelancerApplications:
    """The calling freelancer's applications across all projects."""

    principal: Principal
    filters: ApplicationFilter = field(default_factory=ApplicationFilter)
    page: PageRequest = field(default_factory=PageRequest)


@dataclass(frozen=True, kw_only=True)
class ListApplicationUpdates:
    """The calling freelancer's applications submitted at or after `since`."""

    principal: Principal
    since: datetime
