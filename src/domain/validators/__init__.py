"""Validators package exports."""

from src.domain.validators.project_validators import (
    AMOUNT_LIMIT,
    COVER_LETTER_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    ESTIMATED_DURATION_MAX_LENGTH,
    SKILL_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    ApplicationFields,
    ProjectFields,
    as_utc,
    normalize_skills,
    validate_application_fields,
    validate_budget,
    validate_cover_letter,
    validate_deadline,
    validate_description,
    validate_estimated_duration,
    validate_project_fields,
    validate_proposed_rate,
    validate_skills,
    validate_title,
)

__all__ = [
    "AMOUNT_LIMIT",
    "COVER_LETTER_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "ESTIMATED_DURATION_MAX_LENGTH",
    "SKILL_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "ApplicationFields",
    "ProjectFields",
    "as_utc",
    "normalize_skills",
    "validate_application_fields",
    "validate_budget",
    "validate_cover_letter",
    "validate_deadline",
    "validate_description",
    "validate_estimated_duration",
    "validate_project_fields",
    "validate_proposed_rate",
    "validate_skills",
    "validate_title",
]
