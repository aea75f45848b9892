"""Turn a handler's ApplicationError into an RFC 9457 response.

Status mapping:
    COMMAND_VALIDATION_FAILED -> 400
    FORBIDDEN                 -> 403
    NOT_FOUND                 -> 404
    CONFLICT                  -> 409
    INTERNAL                  -> 500 (no domain detail is exposed)
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from src.application.errors import ApplicationError, ApplicationErrorCode
from src.core.config import get_settings
from src.core.errors import ConflictError, DomainError, ValidationError
from src.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

_RESPONSES: dict[ApplicationErrorCode, tuple[int, str]] = {
    ApplicationErrorCode.COMMAND_VALIDATION_FAILED: (
        status.HTTP_400_BAD_REQUEST,
        "Validation Failed",
    ),
    ApplicationErrorCode.FORBIDDEN: (status.HTTP_403_FORBIDDEN, "Access Denied"),
    ApplicationErrorCode.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Resource Not Found"),
    ApplicationErrorCode.CONFLICT: (status.HTTP_409_CONFLICT, "Resource Conflict"),
}
_INTERNAL = (status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error")


class ErrorResponseBuilder:
    """Build Problem Details responses for Result failures.

    Example:
        >>> match await handler.handle(command):
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_application_error(
        ...             error=error, request=request, trace_id=get_trace_id() or ""
        ...         )
    """

    @staticmethod
    def from_application_error(
        error: ApplicationError,
        request: Request,
        trace_id: str,
    ) -> JSONResponse:
        status_code, title = _RESPONSES.get(error.code, _INTERNAL)

        problem = ProblemDetails(
            type=f"{get_settings().api_base_url}/errors/{error.code.value}",
            title=title,
            status=status_code,
            detail=error.message,
            instance=str(request.url.path),
            errors=_field_errors(error.domain_error),
            trace_id=trace_id or None,
        )
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
        )


def _field_errors(domain_error: DomainError | None) -> list[ErrorDetail] | None:
    if domain_error is None:
        return None

    match domain_error:
        case ValidationError(field=field):
            name = field
        case ConflictError(conflicting_field=field):
            name = field
        case _:
            name = None

    return [
        ErrorDetail(
            field=name or "request",
            code=domain_error.code.value,
            message=domain_error.message,
        )
    ]
