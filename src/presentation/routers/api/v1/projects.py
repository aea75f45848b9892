"""Projects resource handlers.

Handlers:
    list_projects              - Public listing (defaults to open projects)
    create_project             - Post a project (clients)
    list_my_projects           - Caller's own projects, every status
    list_recommended_projects  - Open projects matching a freelancer's skills
    get_project                - Project detail, optionally with applications
    update_project             - Partial update or cancellation (owner)
    delete_project             - Delete a project with no applications (owner)
    submit_application         - Apply to an open project (freelancers)
    list_project_applications  - Applications on a project (owner)
    decide_application         - Accept or reject an application (owner)

Routes are registered via ROUTE_REGISTRY in routes/registry.py.
Handlers translate HTTP input into commands/queries and Result values into
responses; business rules live in the domain.
"""

from decimal import Decimal
from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Query, Request, Response, status
from fastapi.responses import JSONResponse

from src.application.commands import (
    CreateProject,
    DecideApplication,
    DeleteProject,
    SubmitApplication,
    UpdateProject,
)
from src.application.commands.handlers import (
    CreateProjectHandler,
    DecideApplicationHandler,
    DeleteProjectHandler,
    SubmitApplicationHandler,
    UpdateProjectHandler,
)
from src.application.queries import (
    GetProject,
    ListClientProjects,
    ListProjectApplications,
    ListProjects,
    RecommendedProjects,
)
from src.application.queries.handlers import (
    GetProjectHandler,
    ListClientProjectsHandler,
    ListProjectApplicationsHandler,
    ListProjectsHandler,
    RecommendedProjectsHandler,
)
from src.core.container import (
    get_create_project_handler,
    get_decide_application_handler,
    get_delete_project_handler,
    get_get_project_handler,
    get_list_client_projects_handler,
    get_list_project_applications_handler,
    get_list_projects_handler,
    get_recommended_projects_handler,
    get_submit_application_handler,
    get_update_project_handler,
)
from src.core.result import Failure
from src.domain.enums import (
    ApplicationStatus,
    ProjectSortField,
    ProjectStatus,
    SortDirection,
)
from src.domain.value_objects import PageRequest, ProjectFilter, ProjectSort
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentPrincipal,
    OptionalPrincipal,
)
from src.presentation.routers.api.v1.dependencies import error_response, page_request
from src.schemas import (
    ApplicationCreateRequest,
    ApplicationDecisionRequest,
    ApplicationResponse,
    DecisionResponse,
    OwnerApplicationListResponse,
    ProjectCreateRequest,
    ProjectDetailResponse,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdateRequest,
)

PageParam = Annotated[PageRequest, Depends(page_request)]
ProjectIdParam = Annotated[UUID, Path(description="Project UUID")]


# =============================================================================
# Collection
# =============================================================================


async def list_projects(
    request: Request,
    page: PageParam,
    skills: Annotated[
        str | None,
        Query(description="Comma-separated skills; matches any", examples=["react,node"]),
    ] = None,
    budget_min: Annotated[Decimal | None, Query(ge=0)] = None,
    budget_max: Annotated[Decimal | None, Query(ge=0)] = None,
    search: Annotated[
        str | None, Query(description="Case-insensitive text in title or description")
    ] = None,
    project_status: Annotated[
        ProjectStatus | None,
        Query(alias="status", description="Defaults to open"),
    ] = None,
    sort_by: ProjectSortField = ProjectSortField.CREATED_AT,
    sort_order: SortDirection = SortDirection.DESC,
    handler: ListProjectsHandler = Depends(get_list_projects_handler),
) -> ProjectListResponse | JSONResponse:
    """List projects; no token needed.

    GET /api/v1/projects -> 200 OK
    """
    query = ListProjects(
        filters=ProjectFilter(
            skills=_split_skills(skills),
            budget_min=budget_min,
            budget_max=budget_max,
            search=search or None,
            status=project_status,
        ),
        sort=ProjectSort(field=sort_by, direction=sort_order),
        page=page,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ProjectListResponse.from_page(result.value)


async def create_project(
    request: Request,
    principal: CurrentPrincipal,
    data: ProjectCreateRequest,
    handler: CreateProjectHandler = Depends(get_create_project_handler),
) -> ProjectResponse | JSONResponse:
    """Post a new project.

    POST /api/v1/projects -> 201 Created

    Returns:
        ProjectResponse for the stored project.
        JSONResponse with RFC 9457 error (400 invalid fields, 403 not a client).
    """
    command = CreateProject(
        principal=principal,
        title=data.title,
        description=data.description,
        required_skills=data.required_skills,
        budget_min=data.budget_min,
        budget_max=data.budget_max,
        deadline=data.deadline,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ProjectResponse.from_entity(result.value)


async def list_my_projects(
    request: Request,
    principal: CurrentPrincipal,
    page: PageParam,
    sort_by: ProjectSortField = ProjectSortField.CREATED_AT,
    sort_order: SortDirection = SortDirection.DESC,
    handler: ListClientProjectsHandler = Depends(get_list_client_projects_handler),
) -> ProjectListResponse | JSONResponse:
    """List the caller's own projects in every status.

    GET /api/v1/projects/mine -> 200 OK
    """
    query = ListClientProjects(
        principal=principal,
        sort=ProjectSort(field=sort_by, direction=sort_order),
        page=page,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ProjectListResponse.from_page(result.value)


async def list_recommended_projects(
    request: Request,
    principal: CurrentPrincipal,
    page: PageParam,
    handler: RecommendedProjectsHandler = Depends(get_recommended_projects_handler),
) -> ProjectListResponse | JSONResponse:
    """Open projects requiring any of the freelancer's declared skills.

    GET /api/v1/projects/recommended -> 200 OK
    """
    result = await handler.handle(RecommendedProjects(principal=principal, page=page))

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ProjectListResponse.from_page(result.value)


# =============================================================================
# Single project
# =============================================================================


async def get_project(
    request: Request,
    principal: OptionalPrincipal,
    project_id: ProjectIdParam,
    include_applications: bool = False,
    handler: GetProjectHandler = Depends(get_get_project_handler),
) -> ProjectDetailResponse | JSONResponse:
    """Get a project.

    GET /api/v1/projects/{id}?include_applications=true -> 200 OK

    Anonymous callers may read it too. With include_applications the owner
    sees every application, a freelancer only their own, anonymous callers none.
    """
    query = GetProject(
        principal=principal,
        project_id=project_id,
        include_applications=include_applications,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ProjectDetailResponse.from_dto(result.value)


async def update_project(
    request: Request,
    principal: CurrentPrincipal,
    project_id: ProjectIdParam,
    data: ProjectUpdateRequest,
    handler: UpdateProjectHandler = Depends(get_update_project_handler),
) -> ProjectResponse | JSONResponse:
    """Update an open project, or cancel it with {"status": "cancelled"}.

    PATCH /api/v1/projects/{id} -> 200 OK
    """
    command = UpdateProject(
        principal=principal,
        project_id=project_id,
        changes=data.to_changes(),
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ProjectResponse.from_entity(result.value)


async def delete_project(
    request: Request,
    principal: CurrentPrincipal,
    project_id: ProjectIdParam,
    handler: DeleteProjectHandler = Depends(get_delete_project_handler),
) -> Response:
    """Delete a project that has no applications.

    DELETE /api/v1/projects/{id} -> 204 No Content
    """
    result = await handler.handle(
        DeleteProject(principal=principal, project_id=project_id)
    )

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Applications on a project
# =============================================================================


async def submit_application(
    request: Request,
    principal: CurrentPrincipal,
    project_id: ProjectIdParam,
    data: ApplicationCreateRequest,
    handler: SubmitApplicationHandler = Depends(get_submit_application_handler),
) -> ApplicationResponse | JSONResponse:
    """Apply to an open project.

    POST /api/v1/projects/{id}/applications -> 201 Created

    Returns:
        ApplicationResponse for the pending application.
        JSONResponse with RFC 9457 error (404 unknown project, 403 not a
        freelancer, 409 closed project / own project / already applied,
        400 invalid fields).
    """
    command = SubmitApplication(
        principal=principal,
        project_id=project_id,
        cover_letter=data.cover_letter,
        proposed_rate=data.proposed_rate,
        estimated_duration=data.estimated_duration,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ApplicationResponse.from_entity(result.value)


async def list_project_applications(
    request: Request,
    principal: CurrentPrincipal,
    project_id: ProjectIdParam,
    page: PageParam,
    application_status: Annotated[
        ApplicationStatus | None, Query(alias="status")
    ] = None,
    handler: ListProjectApplicationsHandler = Depends(
        get_list_project_applications_handler
    ),
) -> OwnerApplicationListResponse | JSONResponse:
    """List a project's applications with applicant profiles (owner only).

    GET /api/v1/projects/{id}/applications -> 200 OK
    """
    query = ListProjectApplications(
        principal=principal,
        project_id=project_id,
        status=application_status,
        page=page,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return OwnerApplicationListResponse.from_page(result.value)


async def decide_application(
    request: Request,
    principal: CurrentPrincipal,
    project_id: ProjectIdParam,
    application_id: Annotated[UUID, Path(description="Application UUID")],
    data: ApplicationDecisionRequest,
    handler: DecideApplicationHandler = Depends(get_decide_application_handler),
) -> DecisionResponse | JSONResponse:
    """Accept or reject a pending application.

    PATCH /api/v1/projects/{id}/applications/{appId} -> 200 OK

    Accepting assigns the project and rejects every other pending
    application in the same write.
    """
    command = DecideApplication(
        principal=principal,
        project_id=project_id,
        application_id=application_id,
        decision=data.status,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return DecisionResponse.from_dto(result.value)


def _split_skills(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ()
    return tuple(skill.strip() for skill in raw.split(",") if skill.strip())
