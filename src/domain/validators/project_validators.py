"""Field validation for projects and applications.

Pure functions, independent of storage. Each returns Success with the
normalized value or Failure with a ValidationError naming the field.

Reference:
    - src/domain/entities/project.py (callers)

Usage:
    from src.domain.validators import validate_cover_letter

    match validate_cover_letter(text):
        case Failure(error=error):
            return Failure(error=error)
        case Success(value=cover_letter):
            ...
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import Decimal

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import ProjectError

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 2000
COVER_LETTER_MAX_LENGTH = 1000
SKILL_MAX_LENGTH = 100
ESTIMATED_DURATION_MAX_LENGTH = 100

# NUMERIC(12, 2) columns
AMOUNT_LIMIT = Decimal("10000000000")
_CENT = Decimal("0.01")


def _invalid(code: ErrorCode, message: str, field: str) -> Failure[ValidationError]:
    return Failure(error=ValidationError(code=code, message=message, field=field))


def _amount_fits(value: Decimal) -> bool:
    return abs(value) < AMOUNT_LIMIT and value.quantize(_CENT) == value


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def validate_title(title: str) -> Result[str, ValidationError]:
    cleaned = title.strip()
    if not 1 <= len(cleaned) <= TITLE_MAX_LENGTH:
        return _invalid(ErrorCode.TITLE_INVALID, ProjectError.TITLE_INVALID, "title")
    return Success(value=cleaned)


def validate_description(description: str) -> Result[str, ValidationError]:
    cleaned = description.strip()
    if not 1 <= len(cleaned) <= DESCRIPTION_MAX_LENGTH:
        return _invalid(
            ErrorCode.DESCRIPTION_INVALID,
            ProjectError.DESCRIPTION_INVALID,
            "description",
        )
    return Success(value=cleaned)


def normalize_skills(skills: Iterable[str]) -> list[str]:
    """Strip, drop blanks and de-duplicate skills, keeping first-seen order.

    Example:
        >>> normalize_skills([" python", "SQL", "python", ""])
        ['python', 'SQL']
    """
    seen: dict[str, None] = {}
    for skill in skills:
        cleaned = skill.strip()
        if cleaned:
            seen.setdefault(cleaned, None)
    return list(seen)


def validate_skills(skills: Iterable[str]) -> Result[list[str], ValidationError]:
    normalized = normalize_skills(skills)
    if not normalized:
        return _invalid(
            ErrorCode.SKILLS_REQUIRED, ProjectError.SKILLS_REQUIRED, "required_skills"
        )
    if any(len(skill) > SKILL_MAX_LENGTH for skill in normalized):
        return _invalid(
            ErrorCode.SKILL_TOO_LONG, ProjectError.SKILL_TOO_LONG, "required_skills"
        )
    return Success(value=normalized)


def validate_budget(
    budget_min: Decimal, budget_max: Decimal
) -> Result[tuple[Decimal, Decimal], ValidationError]:
    """Check both bounds fit a money column and are ordered.

    Returns:
        Success((budget_min, budget_max)) or Failure naming the offending field.
    """
    if budget_min < 0:
        return _invalid(ErrorCode.BUDGET_NEGATIVE, ProjectError.BUDGET_NEGATIVE, "budget_min")
    if budget_max < 0:
        return _invalid(ErrorCode.BUDGET_NEGATIVE, ProjectError.BUDGET_NEGATIVE, "budget_max")
    for field, amount in (("budget_min", budget_min), ("budget_max", budget_max)):
        if not _amount_fits(amount):
            return _invalid(
                ErrorCode.AMOUNT_OUT_OF_RANGE, ProjectError.AMOUNT_OUT_OF_RANGE, field
            )
    if budget_min > budget_max:
        return _invalid(
            ErrorCode.BUDGET_RANGE_INVALID,
            ProjectError.BUDGET_RANGE_INVALID,
            "budget_min",
        )
    return Success(value=(budget_min, budget_max))


def validate_deadline(
    deadline: datetime, now: datetime | None = None
) -> Result[datetime, ValidationError]:
    deadline = as_utc(deadline)
    if deadline <= (now or datetime.now(UTC)):
        return _invalid(
            ErrorCode.DEADLINE_NOT_IN_FUTURE,
            ProjectError.DEADLINE_NOT_IN_FUTURE,
            "deadline",
        )
    return Success(value=deadline)


def validate_cover_letter(cover_letter: str) -> Result[str, ValidationError]:
    cleaned = cover_letter.strip()
    if not 1 <= len(cleaned) <= COVER_LETTER_MAX_LENGTH:
        return _invalid(
            ErrorCode.COVER_LETTER_INVALID,
            ProjectError.COVER_LETTER_INVALID,
            "cover_letter",
        )
    return Success(value=cleaned)


def validate_proposed_rate(rate: Decimal) -> Result[Decimal, ValidationError]:
    if rate < 0:
        return _invalid(
            ErrorCode.PROPOSED_RATE_NEGATIVE,
            ProjectError.PROPOSED_RATE_NEGATIVE,
            "proposed_rate",
        )
    if not _amount_fits(rate):
        return _invalid(
            ErrorCode.AMOUNT_OUT_OF_RANGE,
            ProjectError.AMOUNT_OUT_OF_RANGE,
            "proposed_rate",
        )
    return Success(value=rate)


def validate_estimated_duration(duration: str) -> Result[str, ValidationError]:
    cleaned = duration.strip()
    if not cleaned:
        return _invalid(
            ErrorCode.ESTIMATED_DURATION_REQUIRED,
            ProjectError.ESTIMATED_DURATION_REQUIRED,
            "estimated_duration",
        )
    if len(cleaned) > ESTIMATED_DURATION_MAX_LENGTH:
        return _invalid(
            ErrorCode.ESTIMATED_DURATION_TOO_LONG,
            ProjectError.ESTIMATED_DURATION_TOO_LONG,
            "estimated_duration",
        )
    return Success(value=cleaned)


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectFields:
    """Validated, normalized project fields."""

    title: str
    description: str
    required_skills: list[str]
    budget_min: Decimal
    budget_max: Decimal
    deadline: datetime


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationFields:
    """Validated, normalized application fields."""

    cover_letter: str
    proposed_rate: Decimal
    estimated_duration: str


def validate_project_fields(
    *,
    title: str,
    description: str,
    required_skills: Iterable[str],
    budget_min: Decimal,
    budget_max: Decimal,
    deadline: datetime,
    check_deadline: bool = True,
    now: datetime | None = None,
) -> Result[ProjectFields, ValidationError]:
    """Validate every project field, stopping at the first failure.

    Args:
        check_deadline: Require the deadline to be in the future. Updates
            that leave the deadline untouched pass False.
        now: Reference instant for the deadline check (defaults to now).

    Returns:
        Success(ProjectFields) with trimmed text and de-duplicated skills.
    """
    title_result = validate_title(title)
    if isinstance(title_result, Failure):
        return title_result
    description_result = validate_description(description)
    if isinstance(description_result, Failure):
        return description_result
    skills_result = validate_skills(required_skills)
    if isinstance(skills_result, Failure):
        return skills_result
    budget_result = validate_budget(budget_min, budget_max)
    if isinstance(budget_result, Failure):
        return budget_result

    if check_deadline:
        deadline_result = validate_deadline(deadline, now)
        if isinstance(deadline_result, Failure):
            return deadline_result
        deadline = deadline_result.value

    return Success(
        value=ProjectFields(
            title=title_result.value,
            description=description_result.value,
            required_skills=skills_result.value,
            budget_min=budget_min,
            budget_max=budget_max,
            deadline=as_utc(deadline),
        )
    )


def validate_application_fields(
    *, cover_letter: str, proposed_rate: Decimal, estimated_duration: str
) -> Result[ApplicationFields, ValidationError]:
    rate_result = validate_proposed_rate(proposed_rate)
    if isinstance(rate_result, Failure):
        return rate_result
    letter_result = validate_cover_letter(cover_letter)
    if isinstance(letter_result, Failure):
        return letter_result
    duration_result = validate_estimated_duration(estimated_duration)
    if isinstance(duration_result, Failure):
        return duration_result
    return Success(
        value=ApplicationFields(
            cover_letter=letter_result.value,
            proposed_rate=rate_result.value,
            estimated_duration=duration_result.value,
        )
    )
