"""Version-checked read-modify-write of project aggregates.

Every command that changes a project goes through this service:

1. Load the aggregate (with its version)
2. Run the command's domain change against it
3. Write it back only if the stored version is unchanged
4. If another writer got there first, reload and run the change again

The domain change is re-evaluated on every attempt, so a precondition that
a concurrent writer invalidated (application no longer pending, project no
longer open) surfaces as the normal domain failure instead of a lost update.

Usage:
    writer = ProjectWriteService(project_repo, logger, max_attempts=5)

    result = await writer.mutate(
        project_id,
        lambda project: project.decide_application(...),
    )
"""

from collections.abc import Callable
from uuid import UUID

from src.application.errors import (
    ApplicationError,
    from_domain_error,
    internal_error,
    project_not_found,
)
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Project
from src.domain.protocols import LoggerProtocol, ProjectRepository


class ProjectWriteService:
    """Compare-and-set writer for the project aggregate.

    Dependencies (injected via constructor):
        - ProjectRepository: Version-checked persistence
        - LoggerProtocol: Conflict and exhaustion logging
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        logger: LoggerProtocol,
        max_attempts: int,
    ) -> None:
        self._project_repo = project_repo
        self._logger = logger
        self._max_attempts = max_attempts

    async def mutate[T](
        self,
        project_id: UUID,
        change: Callable[[Project], Result[T, DomainError]],
    ) -> Result[tuple[Project, T], ApplicationError]:
        """Apply `change` to the current aggregate and persist it.

        Args:
            project_id: Aggregate to change.
            change: Domain operation; mutates the project in place and
                returns its own Result.

        Returns:
            Success((project, value)): Committed aggregate and the change's value.
            Failure(ApplicationError): Missing project, domain failure, or
                INTERNAL once every attempt lost the race.
        """
        for attempt in range(1, self._max_attempts + 1):
            project = await self._project_repo.get(project_id)
            if project is None:
                return Failure(error=project_not_found(project_id))

            outcome = change(project)
            if isinstance(outcome, Failure):
                return Failure(error=from_domain_error(outcome.error))

            violations = project.invariant_violations()
            if violations:
                self._logger.critical(
                    "project_invariant_violated",
                    project_id=str(project_id),
                    violations=violations,
                )
                return Failure(error=internal_error())

            if await self._project_repo.save(project):
                return Success(value=(project, outcome.value))

            self._logger.warning(
                "project_write_conflict",
                project_id=str(project_id),
                attempt=attempt,
            )

        return self._exhausted(project_id)

    async def remove(
        self,
        project_id: UUID,
        check: Callable[[Project], Result[None, DomainError]],
    ) -> Result[Project, ApplicationError]:
        """Delete the aggregate if `check` passes against its current state.

        Returns:
            Success(project): The deleted aggregate as last read.
            Failure(ApplicationError): Missing project, failed check, or INTERNAL.
        """
        for attempt in range(1, self._max_attempts + 1):
            project = await self._project_repo.get(project_id)
            if project is None:
                return Failure(error=project_not_found(project_id))

            outcome = check(project)
            if isinstance(outcome, Failure):
                return Failure(error=from_domain_error(outcome.error))

            if await self._project_repo.delete(project):
                return Success(value=project)

            self._logger.warning(
                "project_write_conflict",
                project_id=str(project_id),
                attempt=attempt,
            )

        return self._exhausted(project_id)

    def _exhausted(self, project_id: UUID) -> Failure[ApplicationError]:
        self._logger.error(
            "project_write_retries_exhausted",
            project_id=str(project_id),
            attempts=self._max_attempts,
        )
        return Failure(error=internal_error())
