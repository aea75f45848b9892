"""What a handler returns to the HTTP layer when it fails.

`ApplicationErrorCode` is the outcome category (and so the HTTP status);
the originating DomainError rides along so the response can name the
field and domain code at fault.
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from src.domain.errors import ProjectError


class ApplicationErrorCode(Enum):
    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


_CODE_BY_KIND: tuple[tuple[type[DomainError], ApplicationErrorCode], ...] = (
    (ValidationError, ApplicationErrorCode.COMMAND_VALIDATION_FAILED),
    (NotFoundError, ApplicationErrorCode.NOT_FOUND),
    (ConflictError, ApplicationErrorCode.CONFLICT),
    (AuthorizationError, ApplicationErrorCode.FORBIDDEN),
)


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None


def from_domain_error(error: DomainError) -> ApplicationError:
    """Wrap a domain failure; unknown kinds are treated as bad input."""
    code = next(
        (app_code for kind, app_code in _CODE_BY_KIND if isinstance(error, kind)),
        ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    )
    return ApplicationError(code=code, message=error.message, domain_error=error)


def internal_error(message: str = "The request could not be completed") -> ApplicationError:
    """Opaque error returned when storage keeps failing; the cause is logged, not exposed."""
    return ApplicationError(code=ApplicationErrorCode.INTERNAL, message=message)


def project_not_found(project_id: UUID) -> ApplicationError:
    return ApplicationError(
        code=ApplicationErrorCode.NOT_FOUND,
        message=ProjectError.PROJECT_NOT_FOUND,
        domain_error=NotFoundError(
            code=ErrorCode.PROJECT_NOT_FOUND,
            message=ProjectError.PROJECT_NOT_FOUND,
            resource_type="Project",
            resource_id=str(project_id),
        ),
    )
