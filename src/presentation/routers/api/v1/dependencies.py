"""Shared query-parameter dependencies for v1 list endpoints."""

from typing import Annotated

from fastapi import Query, Request
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError
from src.core.config import get_settings
from src.domain.value_objects import PageRequest
from src.presentation.routers.api.middleware.trace_middleware import get_trace_id
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


def page_request(
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    limit: Annotated[
        int | None,
        Query(ge=1, description="Items per page (capped at the configured maximum)"),
    ] = None,
) -> PageRequest:
    """Build a PageRequest, applying the configured default and cap."""
    settings = get_settings()
    size = min(limit or settings.default_page_size, settings.max_page_size)
    return PageRequest(page=page, limit=size)


def error_response(request: Request, error: ApplicationError) -> JSONResponse:
    return ErrorResponseBuilder.from_application_error(
        error=error,
        request=request,
        trace_id=get_trace_id() or "",
    )
