"""ROUTE_REGISTRY: every v1 endpoint in one list.

Public entries (project listing and detail) accept anonymous callers;
everything else needs a bearer token. Role checks are not repeated here;
the aggregate returns 403 when a client applies or a freelancer posts.

Order matters: literal paths are registered before templated ones.
"""

from src.presentation.routers.api.v1.applications import (
    list_my_applications,
    list_my_updates,
)
from src.presentation.routers.api.v1.projects import (
    create_project,
    decide_application,
    delete_project,
    get_project,
    list_my_projects,
    list_project_applications,
    list_projects,
    list_recommended_projects,
    submit_application,
    update_project,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)
from src.schemas import (
    ApplicationResponse,
    ApplicationUpdateListResponse,
    DecisionResponse,
    FreelancerApplicationListResponse,
    OwnerApplicationListResponse,
    ProjectDetailResponse,
    ProjectListResponse,
    ProjectResponse,
)

_PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
_CLIENT = AuthPolicy(level=AuthLevel.AUTHENTICATED, role="client")
_FREELANCER = AuthPolicy(level=AuthLevel.AUTHENTICATED, role="freelancer")

_UNAUTHORIZED = ErrorSpec(status=401, description="Missing or invalid bearer token")
_INVALID = ErrorSpec(status=400, description="A field breaks a business rule")
_FORBIDDEN = ErrorSpec(status=403, description="Wrong role or not the owner")
_NOT_FOUND = ErrorSpec(status=404, description="Project or application not found")
_CONFLICT = ErrorSpec(status=409, description="Not allowed in the project's current state")


ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Projects (10 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects",
        handler=list_projects,
        resource="projects",
        tags=["Projects"],
        summary="List projects",
        description="Filter by skills, budget overlap, text and status (default open).",
        operation_id="list_projects",
        response_model=ProjectListResponse,
        errors=[_UNAUTHORIZED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects",
        handler=create_project,
        resource="projects",
        tags=["Projects"],
        summary="Create project",
        operation_id="create_project",
        response_model=ProjectResponse,
        status_code=201,
        errors=[_UNAUTHORIZED, _INVALID, _FORBIDDEN],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_CLIENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/mine",
        handler=list_my_projects,
        resource="projects",
        tags=["Projects"],
        summary="List my projects",
        description="The caller's own projects in every status.",
        operation_id="list_my_projects",
        response_model=ProjectListResponse,
        errors=[_UNAUTHORIZED, _FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_CLIENT,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/recommended",
        handler=list_recommended_projects,
        resource="projects",
        tags=["Projects"],
        summary="List recommended projects",
        description="Open projects requiring any of the freelancer's declared skills.",
        operation_id="list_recommended_projects",
        response_model=ProjectListResponse,
        errors=[_UNAUTHORIZED, _FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_FREELANCER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/{project_id}",
        handler=get_project,
        resource="projects",
        tags=["Projects"],
        summary="Get project",
        operation_id="get_project",
        response_model=ProjectDetailResponse,
        errors=[_UNAUTHORIZED, _NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/projects/{project_id}",
        handler=update_project,
        resource="projects",
        tags=["Projects"],
        summary="Update or cancel project",
        operation_id="update_project",
        response_model=ProjectResponse,
        errors=[_UNAUTHORIZED, _INVALID, _FORBIDDEN, _NOT_FOUND, _CONFLICT],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_CLIENT,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/projects/{project_id}",
        handler=delete_project,
        resource="projects",
        tags=["Projects"],
        summary="Delete project",
        description="Only projects that never received an application.",
        operation_id="delete_project",
        response_model=None,
        status_code=204,
        errors=[_UNAUTHORIZED, _FORBIDDEN, _NOT_FOUND, _CONFLICT],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=_CLIENT,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects/{project_id}/applications",
        handler=submit_application,
        resource="applications",
        tags=["Projects"],
        summary="Apply to project",
        operation_id="submit_application",
        response_model=ApplicationResponse,
        status_code=201,
        errors=[_UNAUTHORIZED, _INVALID, _FORBIDDEN, _NOT_FOUND, _CONFLICT],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_FREELANCER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/{project_id}/applications",
        handler=list_project_applications,
        resource="applications",
        tags=["Projects"],
        summary="List applications on project",
        operation_id="list_project_applications",
        response_model=OwnerApplicationListResponse,
        errors=[_UNAUTHORIZED, _FORBIDDEN, _NOT_FOUND],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_CLIENT,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/projects/{project_id}/applications/{application_id}",
        handler=decide_application,
        resource="applications",
        tags=["Projects"],
        summary="Accept or reject application",
        description="Accepting assigns the project and rejects every other pending application.",
        operation_id="decide_application",
        response_model=DecisionResponse,
        errors=[_UNAUTHORIZED, _INVALID, _FORBIDDEN, _NOT_FOUND, _CONFLICT],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=_CLIENT,
    ),
    # =========================================================================
    # Applications (2 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/applications/mine",
        handler=list_my_applications,
        resource="applications",
        tags=["Applications"],
        summary="List my applications",
        operation_id="list_my_applications",
        response_model=FreelancerApplicationListResponse,
        errors=[_UNAUTHORIZED, _FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_FREELANCER,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/applications/mine/updates",
        handler=list_my_updates,
        resource="applications",
        tags=["Applications"],
        summary="List my application updates",
        description="Applications submitted at or after `since`, newest first.",
        operation_id="list_my_application_updates",
        response_model=ApplicationUpdateListResponse,
        errors=[_UNAUTHORIZED, _FORBIDDEN],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=_FREELANCER,
    ),
]
