"""Unit tests for project and application field validators.

Reference:
    - src/domain/validators/project_validators.py
"""

from datetime import UTC, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.validators import (
    as_utc,
    normalize_skills,
    validate_budget,
    validate_deadline,
    validate_estimated_duration,
    validate_project_fields,
    validate_proposed_rate,
    validate_skills,
    validate_title,
)


def test_normalize_skills_keeps_first_seen_order():
    assert normalize_skills([" python", "SQL", "python", "", "  "]) == ["python", "SQL"]


def test_normalize_skills_is_case_sensitive():
    assert normalize_skills(["React", "react"]) == ["React", "react"]


@pytest.mark.parametrize("title", ["", "   ", "x" * 201])
def test_title_length_bounds(title):
    result = validate_title(title)

    assert isinstance(result, Failure)
    assert result.error.field == "title"


def test_title_at_limit_is_trimmed_and_accepted():
    result = validate_title(f"  {'x' * 200}  ")

    assert isinstance(result, Success)
    assert result.value == "x" * 200


@pytest.mark.parametrize(
    ("low", "high", "field", "code"),
    [
        (Decimal("-1"), Decimal("10"), "budget_min", ErrorCode.BUDGET_NEGATIVE),
        (Decimal("1"), Decimal("-10"), "budget_max", ErrorCode.BUDGET_NEGATIVE),
        (Decimal("20"), Decimal("10"), "budget_min", ErrorCode.BUDGET_RANGE_INVALID),
    ],
)
def test_budget_rules(low, high, field, code):
    result = validate_budget(low, high)

    assert isinstance(result, Failure)
    assert result.error.field == field
    assert result.error.code is code


def test_equal_budget_bounds_are_valid():
    assert isinstance(validate_budget(Decimal("100"), Decimal("100")), Success)


def test_deadline_must_be_after_now():
    now = datetime(2030, 1, 1, tzinfo=UTC)

    assert isinstance(validate_deadline(now, now), Failure)
    assert isinstance(validate_deadline(now + timedelta(seconds=1), now), Success)


def test_naive_deadline_is_read_as_utc():
    result = validate_deadline(datetime(2999, 1, 1), datetime(2030, 1, 1, tzinfo=UTC))

    assert isinstance(result, Success)
    assert result.value.tzinfo is UTC


def test_as_utc_converts_offsets():
    plus_two = timezone(timedelta(hours=2))

    converted = as_utc(datetime(2030, 1, 1, 12, tzinfo=plus_two))

    assert converted == datetime(2030, 1, 1, 10, tzinfo=UTC)


def test_project_fields_report_first_failure():
    result = validate_project_fields(
        title="",
        description="",
        required_skills=[],
        budget_min=Decimal("10"),
        budget_max=Decimal("1"),
        deadline=datetime(2000, 1, 1, tzinfo=UTC),
    )

    assert isinstance(result, Failure)
    assert result.error.field == "title"


def test_project_fields_require_a_skill():
    result = validate_project_fields(
        title="Title",
        description="Description",
        required_skills=[" ", ""],
        budget_min=Decimal("1"),
        budget_max=Decimal("2"),
        deadline=datetime.now(UTC) + timedelta(days=1),
    )

    assert isinstance(result, Failure)
    assert result.error.code is ErrorCode.SKILLS_REQUIRED


def test_skill_at_column_limit_is_accepted():
    result = validate_skills(["x" * 100])

    assert isinstance(result, Success)


def test_skill_over_column_limit_is_rejected():
    result = validate_skills(["python", "x" * 101])

    assert isinstance(result, Failure)
    assert result.error.field == "required_skills"
    assert result.error.code is ErrorCode.SKILL_TOO_LONG


def test_estimated_duration_length_limit():
    assert isinstance(validate_estimated_duration(" " + "x" * 100 + " "), Success)

    result = validate_estimated_duration("x" * 101)

    assert isinstance(result, Failure)
    assert result.error.field == "estimated_duration"
    assert result.error.code is ErrorCode.ESTIMATED_DURATION_TOO_LONG


@pytest.mark.parametrize(
    "amount", [Decimal("9999999999.99"), Decimal("0.10"), Decimal("12.500")]
)
def test_amounts_that_fit_the_money_column(amount):
    assert isinstance(validate_proposed_rate(amount), Success)
    assert isinstance(validate_budget(amount, amount), Success)


@pytest.mark.parametrize("amount", [Decimal("10000000000"), Decimal("1.005")])
def test_amounts_that_do_not_fit_are_rejected(amount):
    rate = validate_proposed_rate(amount)
    budget = validate_budget(Decimal("0"), amount)

    assert isinstance(rate, Failure)
    assert rate.error.code is ErrorCode.AMOUNT_OUT_OF_RANGE
    assert rate.error.field == "proposed_rate"
    assert isinstance(budget, Failure)
    assert budget.error.field == "budget_max"
