"""Applications resource handlers (freelancer views).

Handlers:
    list_my_applications  - Caller's applications across all projects
    list_my_updates       - Caller's applications submitted since an instant

Routes are registered via ROUTE_REGISTRY in routes/registry.py.
"""

from datetime import datetime
from typing import Annotated

from fastapi import Depends, Query, Request
from fastapi.responses import JSONResponse

from src.application.queries import ListApplicationUpdates, ListFreelancerApplications
from src.application.queries.handlers import (
    ListApplicationUpdatesHandler,
    ListFreelancerApplicationsHandler,
)
from src.core.container import (
    get_list_application_updates_handler,
    get_list_freelancer_applications_handler,
)
from src.core.result import Failure
from src.domain.enums import ApplicationStatus
from src.domain.value_objects import ApplicationFilter, PageRequest
from src.presentation.routers.api.middleware.auth_dependencies import CurrentPrincipal
from src.presentation.routers.api.v1.dependencies import error_response, page_request
from src.schemas import ApplicationUpdateListResponse, FreelancerApplicationListResponse


async def list_my_applications(
    request: Request,
    principal: CurrentPrincipal,
    page: Annotated[PageRequest, Depends(page_request)],
    application_status: Annotated[
        ApplicationStatus | None, Query(alias="status")
    ] = None,
    handler: ListFreelancerApplicationsHandler = Depends(
        get_list_freelancer_applications_handler
    ),
) -> FreelancerApplicationListResponse | JSONResponse:
    """List the caller's applications, newest first, with project summaries.

    GET /api/v1/applications/mine -> 200 OK
    """
    query = ListFreelancerApplications(
        principal=principal,
        filters=ApplicationFilter(status=application_status),
        page=page,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return FreelancerApplicationListResponse.from_page(result.value)


async def list_my_updates(
    request: Request,
    principal: CurrentPrincipal,
    since: Annotated[
        datetime,
        Query(description="Only applications submitted at or after this instant"),
    ],
    handler: ListApplicationUpdatesHandler = Depends(
        get_list_application_updates_handler
    ),
) -> ApplicationUpdateListResponse | JSONResponse:
    """Status feed of the caller's recent applications.

    GET /api/v1/applications/mine/updates?since=2025-01-01T00:00:00Z -> 200 OK
    """
    result = await handler.handle(
        ListApplicationUpdates(principal=principal, since=since)
    )

    if isinstance(result, Failure):
        return error_response(request, result.error)

    return ApplicationUpdateListResponse.from_dtos(result.value)
