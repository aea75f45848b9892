"""GetProject query handler.

Applications are private: the owner sees every application, any other
member sees only the one they submitted (if any), and an anonymous caller
sees none.
"""

from src.application.dtos import ProjectDetail
from src.application.errors import ApplicationError, project_not_found
from src.application.queries.project_queries import GetProject
from src.core.result import Failure, Result, Success
from src.domain.protocols import ProjectRepository


class GetProjectHandler:
    """Handler for GetProject query."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def handle(self, query: GetProject) -> Result[ProjectDetail, ApplicationError]:
        project = await self._project_repo.get(query.project_id)
        if project is None:
            return Failure(error=project_not_found(query.project_id))

        applications = None
        if query.include_applications:
            caller_id = query.principal.member_id if query.principal else None
            if caller_id is None:
                applications = []
            elif project.is_owned_by(caller_id):
                applications = list(project.applications)
            else:
                applications = [
                    a for a in project.applications if a.freelancer_id == caller_id
                ]

        return Success(
            value=ProjectDetail(
                project=project,
                applications=applications,
                application_count=len(project.applications),
            )
        )
