"""ProjectRepository - SQLAlchemy implementation of ProjectRepository protocol.

Adapter for hexagonal architecture.
Maps between the domain Project aggregate and the projects,
project_skills and project_applications tables.

Every aggregate write is a compare-and-set on `projects.version`: the
UPDATE only matches while the stored version equals the version that was
read, and child rows are written in the same transaction. A zero-row match
rolls everything back and is reported to the caller, which reloads and
re-runs its checks.

Reference:
    - src/domain/protocols/project_repository.py
"""

from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import ColumnElement, delete, func, insert, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from src.domain.entities import Application, Project
from src.domain.enums import (
    ApplicationStatus,
    ProjectSortField,
    ProjectStatus,
    SortDirection,
)
from src.domain.protocols import ApplicationListing
from src.domain.value_objects import (
    ApplicationFilter,
    Page,
    PageRequest,
    ProjectFilter,
    ProjectSort,
)
from src.infrastructure.persistence.models.project import Project as ProjectModel
from src.infrastructure.persistence.models.project_application import (
    ProjectApplication as ProjectApplicationModel,
)
from src.infrastructure.persistence.models.project_skill import (
    ProjectSkill as ProjectSkillModel,
)

_SORT_COLUMNS = {
    ProjectSortField.CREATED_AT: ProjectModel.created_at,
    ProjectSortField.BUDGET_MIN: ProjectModel.budget_min,
    ProjectSortField.BUDGET_MAX: ProjectModel.budget_max,
    ProjectSortField.DEADLINE: ProjectModel.deadline,
    ProjectSortField.TITLE: ProjectModel.title,
}


class ProjectRepository:
    """SQLAlchemy implementation of ProjectRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = ProjectRepository(session)
        ...     project = await repo.get(project_id)
        ...     project.submit_application(...)
        ...     committed = await repo.save(project)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get(self, project_id: UUID) -> Project | None:
        """Load a project with its skills and applications.

        The identity map is refreshed so a reload after a lost
        compare-and-set sees the winner's state.

        Args:
            project_id: Project's unique identifier.

        Returns:
            Domain Project if found, None otherwise.
        """
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.id == project_id)
            .options(
                selectinload(ProjectModel.skills),
                selectinload(ProjectModel.applications),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model, with_applications=True)

    async def add(self, project: Project) -> None:
        """Insert a new project with its skills and applications.

        Args:
            project: Domain Project (version 0).

        Raises:
            IntegrityError: If a project with the same id already exists.
        """
        model = ProjectModel(
            id=project.id,
            client_id=project.client_id,
            title=project.title,
            description=project.description,
            budget_min=project.budget_min,
            budget_max=project.budget_max,
            deadline=project.deadline,
            status=project.status.value,
            assigned_freelancer_id=project.assigned_freelancer_id,
            version=project.version,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
        model.skills = [
            ProjectSkillModel(skill=skill, position=position)
            for position, skill in enumerate(project.required_skills)
        ]
        model.applications = [
            ProjectApplicationModel(**self._application_values(application, sequence))
            for sequence, application in enumerate(project.applications)
        ]
        self.session.add(model)
        await self.session.commit()

    async def save(self, project: Project) -> bool:
        """Version-checked write of a loaded aggregate.

        Args:
            project: Aggregate returned by get() and mutated in memory.

        Returns:
            True if the write committed (project.version is bumped),
            False if the stored version moved on (nothing written).
        """
        expected = project.version
        try:
            result = await self.session.execute(
                update(ProjectModel)
                .where(
                    ProjectModel.id == project.id,
                    ProjectModel.version == expected,
                )
                .values(
                    title=project.title,
                    description=project.description,
                    budget_min=project.budget_min,
                    budget_max=project.budget_max,
                    deadline=project.deadline,
                    status=project.status.value,
                    assigned_freelancer_id=project.assigned_freelancer_id,
                    version=expected + 1,
                    updated_at=project.updated_at,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount != 1:
                await self.session.rollback()
                return False

            await self._write_skills(project)
            await self._write_applications(project)
            await self.session.commit()
        except IntegrityError:
            # Unique (project_id, freelancer_id) or (project_id, sequence)
            # lost against a concurrent writer.
            await self.session.rollback()
            return False

        project.version = expected + 1
        return True

    async def delete(self, project: Project) -> bool:
        """Remove a project if its stored version still matches.

        Args:
            project: Aggregate returned by get().

        Returns:
            True if deleted, False if a concurrent writer won.
        """
        await self.session.execute(
            delete(ProjectSkillModel).where(ProjectSkillModel.project_id == project.id)
        )
        result = await self.session.execute(
            delete(ProjectModel)
            .where(
                ProjectModel.id == project.id,
                ProjectModel.version == project.version,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            await self.session.rollback()
            return False

        await self.session.commit()
        return True

    async def list_projects(
        self,
        filters: ProjectFilter,
        sort: ProjectSort,
        page: PageRequest,
    ) -> Page[Project]:
        """List projects matching filters (applications not loaded).

        Args:
            filters: Skill, budget, search, status and owner filters.
            sort: Sort field and direction; id breaks ties.
            page: Page window.

        Returns:
            Page of domain Projects with the total match count.
        """
        conditions = self._project_conditions(filters)

        count_stmt = select(func.count()).select_from(ProjectModel).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        column = _SORT_COLUMNS[sort.field]
        if sort.direction is SortDirection.ASC:
            order_by = (column.asc(), ProjectModel.id.asc())
        else:
            order_by = (column.desc(), ProjectModel.id.desc())

        stmt = (
            select(ProjectModel)
            .where(*conditions)
            .options(selectinload(ProjectModel.skills))
            .order_by(*order_by)
            .offset(page.offset)
            .limit(page.limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return Page(
            items=[self._to_domain(model) for model in models],
            total=total,
            page=page,
        )

    async def list_freelancer_applications(
        self,
        freelancer_id: UUID,
        filters: ApplicationFilter,
        page: PageRequest,
    ) -> Page[ApplicationListing]:
        """List one freelancer's applications across projects, newest first.

        Served by the (freelancer_id, applied_at) index instead of scanning
        every project.
        """
        conditions: list[ColumnElement[bool]] = [
            ProjectApplicationModel.freelancer_id == freelancer_id
        ]
        if filters.status is not None:
            conditions.append(ProjectApplicationModel.status == filters.status.value)
        if filters.since is not None:
            conditions.append(ProjectApplicationModel.applied_at >= filters.since)

        count_stmt = (
            select(func.count())
            .select_from(ProjectApplicationModel)
            .where(*conditions)
        )
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(ProjectApplicationModel)
            .where(*conditions)
            .options(
                joinedload(ProjectApplicationModel.project).selectinload(
                    ProjectModel.skills
                )
            )
            .order_by(
                ProjectApplicationModel.applied_at.desc(),
                ProjectApplicationModel.id.desc(),
            )
            .offset(page.offset)
            .limit(page.limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return Page(
            items=[self._to_listing(model) for model in models],
            total=total,
            page=page,
        )

    async def list_application_updates(
        self, freelancer_id: UUID, since: datetime
    ) -> list[ApplicationListing]:
        stmt = (
            select(ProjectApplicationModel)
            .where(
                ProjectApplicationModel.freelancer_id == freelancer_id,
                ProjectApplicationModel.applied_at >= since,
            )
            .options(
                joinedload(ProjectApplicationModel.project).selectinload(
                    ProjectModel.skills
                )
            )
            .order_by(
                ProjectApplicationModel.applied_at.desc(),
                ProjectApplicationModel.id.desc(),
            )
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return [self._to_listing(model) for model in result.scalars().all()]

    # -------------------------------------------------------------------------
    # Write helpers (run inside the compare-and-set transaction)
    # -------------------------------------------------------------------------

    async def _write_skills(self, project: Project) -> None:
        stored = await self.session.execute(
            select(ProjectSkillModel.skill)
            .where(ProjectSkillModel.project_id == project.id)
            .order_by(ProjectSkillModel.position)
        )
        if list(stored.scalars().all()) == project.required_skills:
            return

        await self.session.execute(
            delete(ProjectSkillModel).where(ProjectSkillModel.project_id == project.id)
        )
        await self.session.execute(
            insert(ProjectSkillModel),
            [
                {"project_id": project.id, "skill": skill, "position": position}
                for position, skill in enumerate(project.required_skills)
            ],
        )

    async def _write_applications(self, project: Project) -> None:
        stored = await self.session.execute(
            select(
                ProjectApplicationModel.id,
                ProjectApplicationModel.status,
            ).where(ProjectApplicationModel.project_id == project.id)
        )
        stored_status = {row.id: row.status for row in stored}

        new_rows = []
        for sequence, application in enumerate(project.applications):
            previous = stored_status.get(application.id)
            if previous is None:
                new_rows.append(self._application_values(application, sequence))
            elif previous != application.status.value:
                await self.session.execute(
                    update(ProjectApplicationModel)
                    .where(ProjectApplicationModel.id == application.id)
                    .values(
                        status=application.status.value,
                        decided_at=application.decided_at,
                        updated_at=project.updated_at,
                    )
                    .execution_options(synchronize_session=False)
                )

        if new_rows:
            await self.session.execute(insert(ProjectApplicationModel), new_rows)

    @staticmethod
    def _application_values(application: Application, sequence: int) -> dict:
        return {
            "id": application.id,
            "project_id": application.project_id,
            "freelancer_id": application.freelancer_id,
            "sequence": sequence,
            "cover_letter": application.cover_letter,
            "proposed_rate": application.proposed_rate,
            "estimated_duration": application.estimated_duration,
            "status": application.status.value,
            "applied_at": application.applied_at,
            "decided_at": application.decided_at,
            "created_at": application.applied_at,
            "updated_at": application.decided_at or application.applied_at,
        }

    # -------------------------------------------------------------------------
    # Mapping
    # -------------------------------------------------------------------------

    @staticmethod
    def _project_conditions(filters: ProjectFilter) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []

        if filters.status is not None:
            conditions.append(ProjectModel.status == filters.status.value)
        if filters.client_id is not None:
            conditions.append(ProjectModel.client_id == filters.client_id)
        if filters.skills:
            conditions.append(
                ProjectModel.skills.any(ProjectSkillModel.skill.in_(filters.skills))
            )
        # Ranges overlap: the project's range reaches the wanted range.
        if filters.budget_min is not None:
            conditions.append(ProjectModel.budget_max >= filters.budget_min)
        if filters.budget_max is not None:
            conditions.append(ProjectModel.budget_min <= filters.budget_max)
        if filters.search:
            pattern = f"%{_escape_like(filters.search)}%"
            conditions.append(
                or_(
                    ProjectModel.title.ilike(pattern, escape="\\"),
                    ProjectModel.description.ilike(pattern, escape="\\"),
                )
            )

        return conditions

    def _to_listing(self, model: ProjectApplicationModel) -> ApplicationListing:
        return ApplicationListing(
            application=self._application_to_domain(model),
            project=self._to_domain(model.project),
        )

    def _to_domain(self, model: ProjectModel, with_applications: bool = False) -> Project:
        """Convert database model to domain entity.

        Args:
            model: SQLAlchemy Project model.
            with_applications: Map the applications relationship too.

        Returns:
            Domain Project (applications empty unless requested).
        """
        applications = (
            [self._application_to_domain(a) for a in model.applications]
            if with_applications
            else []
        )
        return Project(
            id=model.id,
            client_id=model.client_id,
            title=model.title,
            description=model.description,
            required_skills=[s.skill for s in model.skills],
            budget_min=Decimal(model.budget_min),
            budget_max=Decimal(model.budget_max),
            deadline=_utc(model.deadline),
            status=ProjectStatus(model.status),
            assigned_freelancer_id=model.assigned_freelancer_id,
            applications=applications,
            version=model.version,
            created_at=_utc(model.created_at),
            updated_at=_utc(model.updated_at),
        )

    @staticmethod
    def _application_to_domain(model: ProjectApplicationModel) -> Application:
        return Application(
            id=model.id,
            project_id=model.project_id,
            freelancer_id=model.freelancer_id,
            cover_letter=model.cover_letter,
            proposed_rate=Decimal(model.proposed_rate),
            estimated_duration=model.estimated_duration,
            status=ApplicationStatus(model.status),
            applied_at=_utc(model.applied_at),
            decided_at=_utc(model.decided_at) if model.decided_at else None,
        )


def _utc(value: datetime) -> datetime:
    """SQLite returns naive datetimes; stored values are always UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
