"""The four kinds of DomainError the marketplace reports.

Each kind maps to one HTTP status further out (400, 404, 409, 403), so
pick the kind by what the caller can do about it, then the ErrorCode by
what exactly went wrong:

    return Failure(error=ValidationError(
        code=ErrorCode.BUDGET_RANGE_INVALID,
        message="Minimum budget cannot exceed maximum budget",
        field="budget_min",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    # Request field at fault, reported back in the problem body
    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """The request is well formed but the aggregate's state forbids it.

    `conflicting_field` names what clashed: "status" for a lifecycle
    violation, "freelancer_id" for a second application by the same
    freelancer.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Wrong role, or not the owner of the project."""

    required_permission: str | None = None
