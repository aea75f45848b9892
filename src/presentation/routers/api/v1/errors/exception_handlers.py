"""Global exception handlers.

Everything that escapes a route handler leaves as RFC 9457 Problem Details:

- HTTPException (the bearer dependency's 401) keeps its status and headers
- RequestValidationError becomes a 422 listing one entry per bad field
- Any other exception is logged and returned as an opaque 500

Handlers returning Result failures never reach this module; they go through
ErrorResponseBuilder instead.
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.config import get_settings
from src.core.container import get_logger
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status -> (title, type slug)
_PROBLEM_TYPES: dict[int, tuple[str, str]] = {
    status.HTTP_400_BAD_REQUEST: ("Bad Request", "bad-request"),
    status.HTTP_401_UNAUTHORIZED: ("Authentication Required", "unauthorized"),
    status.HTTP_403_FORBIDDEN: ("Access Denied", "forbidden"),
    status.HTTP_404_NOT_FOUND: ("Resource Not Found", "not-found"),
    status.HTTP_405_METHOD_NOT_ALLOWED: ("Method Not Allowed", "method-not-allowed"),
    status.HTTP_409_CONFLICT: ("Resource Conflict", "conflict"),
    status.HTTP_422_UNPROCESSABLE_ENTITY: ("Validation Failed", "validation-failed"),
    status.HTTP_500_INTERNAL_SERVER_ERROR: (
        "Internal Server Error",
        "internal-server-error",
    ),
}

# Location prefixes FastAPI adds in front of the field name
_LOCATION_PARTS = {"body", "query", "path", "header"}


def _problem_response(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    title, slug = _PROBLEM_TYPES.get(status_code, ("Error", "error"))
    problem = ProblemDetails(
        type=f"{get_settings().api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=problem.model_dump(exclude_none=True),
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render an HTTPException, preserving headers such as WWW-Authenticate."""
    assert isinstance(exc, HTTPException)

    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _problem_response(
        request,
        exc.status_code,
        detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Render malformed input (wrong types, unknown enum values, missing fields).

    Values that parse but break a business rule are not handled here; the
    domain reports those as 400 with a field code.
    """
    assert isinstance(exc, RequestValidationError)

    errors = [
        ErrorDetail(
            field=".".join(
                str(part) for part in error.get("loc", ()) if part not in _LOCATION_PARTS
            )
            or "request",
            code=error.get("type", "validation_error"),
            message=error.get("msg", "Invalid value"),
        )
        for error in exc.errors()
    ]
    return _problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure (storage outage and the like) with its trace id."""
    get_logger().error(
        "unhandled_exception",
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )
    return _problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Please contact support with the trace ID.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
