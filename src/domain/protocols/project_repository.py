"""ProjectRepository protocol for project aggregate persistence.

Port (interface) for hexagonal architecture. The aggregate (project plus
its applications) is loaded and written as a unit; writes are
compare-and-set on `Project.version`.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities import Application, Project
from src.domain.value_objects import (
    ApplicationFilter,
    Page,
    PageRequest,
    ProjectFilter,
    ProjectSort,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationListing:
    """An application together with the project it belongs to."""

    application: Application
    project: Project


class ProjectRepository(Protocol):
    """Project repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Methods:
        get: Load an aggregate by ID
        add: Insert a new aggregate
        save: Version-checked write of a loaded aggregate
        delete: Version-checked removal
        list_projects: Filtered, sorted, paginated projects
        list_freelancer_applications: One freelancer's applications, flattened
        list_application_updates: One freelancer's applications since an instant
    """

    async def get(self, project_id: UUID) -> Project | None:
        """Load a project with its applications in arrival order.

        Args:
            project_id: Project identifier.

        Returns:
            Fresh Project if found, None otherwise.
        """
        ...

    async def add(self, project: Project) -> None:
        """Persist a new project (version 0) and commit."""
        ...

    async def save(self, project: Project) -> bool:
        """Write a loaded aggregate if nobody else wrote it since it was read.

        The write succeeds only when the stored version still equals
        `project.version`. On success the version is bumped, new
        applications are inserted, changed statuses are updated and the
        transaction commits. On a version mismatch nothing is written.

        Args:
            project: Aggregate previously returned by get() and mutated.

        Returns:
            True if committed, False if a concurrent writer won.
        """
        ...

    async def delete(self, project: Project) -> bool:
        """Remove a project if its stored version still matches.

        Returns:
            True if deleted, False if a concurrent writer won.
        """
        ...

    async def list_projects(
        self,
        filters: ProjectFilter,
        sort: ProjectSort,
        page: PageRequest,
    ) -> Page[Project]:
        """List projects (without applications).

        Skills match when any required skill is in `filters.skills`; the
        budget filter keeps projects whose range overlaps the wanted range;
        `search` is a case-insensitive substring match on title or
        description.
        """
        ...

    async def list_freelancer_applications(
        self,
        freelancer_id: UUID,
        filters: ApplicationFilter,
        page: PageRequest,
    ) -> Page[ApplicationListing]:
        """List a freelancer's applications across all projects.

        Ordered by applied_at descending and paginated over the flattened
        result.
        """
        ...

    async def list_application_updates(
        self, freelancer_id: UUID, since: datetime
    ) -> list[ApplicationListing]:
        ...
