"""Errors handlers return to the HTTP layer, and helpers to build them."""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    internal_error,
    project_not_found,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
    "from_domain_error",
    "internal_error",
    "project_not_found",
]
