"""Unit tests for application error mapping and RFC 9457 responses.

Reference:
    - src/application/errors/application_error.py
    - src/presentation/routers/api/v1/errors/error_response_builder.py
"""

import json
from unittest.mock import MagicMock

import pytest

from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    from_domain_error,
    internal_error,
)
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder


@pytest.mark.parametrize(
    ("domain_error", "expected"),
    [
        (
            ValidationError(code=ErrorCode.TITLE_INVALID, message="bad", field="title"),
            ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ),
        (
            NotFoundError(
                code=ErrorCode.PROJECT_NOT_FOUND,
                message="missing",
                resource_type="Project",
                resource_id="1",
            ),
            ApplicationErrorCode.NOT_FOUND,
        ),
        (
            ConflictError(
                code=ErrorCode.PROJECT_NOT_OPEN,
                message="closed",
                resource_type="Project",
            ),
            ApplicationErrorCode.CONFLICT,
        ),
        (
            AuthorizationError(code=ErrorCode.RESOURCE_NOT_OWNED, message="nope"),
            ApplicationErrorCode.FORBIDDEN,
        ),
    ],
)
def test_from_domain_error_maps_category(domain_error, expected):
    error = from_domain_error(domain_error)

    assert error.code is expected
    assert error.message == domain_error.message
    assert error.domain_error is domain_error


def _request(path: str = "/api/v1/projects/123") -> MagicMock:
    request = MagicMock()
    request.url.path = path
    return request


@pytest.mark.parametrize(
    ("code", "status"),
    [
        (ApplicationErrorCode.COMMAND_VALIDATION_FAILED, 400),
        (ApplicationErrorCode.FORBIDDEN, 403),
        (ApplicationErrorCode.NOT_FOUND, 404),
        (ApplicationErrorCode.CONFLICT, 409),
        (ApplicationErrorCode.INTERNAL, 500),
    ],
)
def test_status_codes(code, status):
    response = ErrorResponseBuilder.from_application_error(
        error=ApplicationError(code=code, message="message"),
        request=_request(),
        trace_id="trace-1",
    )

    assert response.status_code == status
    body = json.loads(response.body)
    assert body["status"] == status
    assert body["type"].endswith(f"/errors/{code.value}")
    assert body["instance"] == "/api/v1/projects/123"
    assert body["trace_id"] == "trace-1"
    assert "errors" not in body


def test_validation_error_lists_field():
    error = from_domain_error(
        ValidationError(
            code=ErrorCode.BUDGET_RANGE_INVALID,
            message="Minimum budget cannot exceed maximum budget",
            field="budget_min",
        )
    )

    response = ErrorResponseBuilder.from_application_error(
        error=error, request=_request(), trace_id="t"
    )

    body = json.loads(response.body)
    assert body["errors"] == [
        {
            "field": "budget_min",
            "code": "budget_range_invalid",
            "message": "Minimum budget cannot exceed maximum budget",
        }
    ]


def test_conflict_names_conflicting_field():
    error = from_domain_error(
        ConflictError(
            code=ErrorCode.APPLICATION_ALREADY_EXISTS,
            message="You have already applied to this project",
            resource_type="Application",
            conflicting_field="freelancer_id",
        )
    )

    response = ErrorResponseBuilder.from_application_error(
        error=error, request=_request(), trace_id="t"
    )

    assert json.loads(response.body)["errors"][0]["field"] == "freelancer_id"


def test_internal_error_is_opaque():
    error = internal_error()

    assert error.code is ApplicationErrorCode.INTERNAL
    assert error.domain_error is None
