"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError values. The presentation layer surfaces them in the `code` field
of RFC 9457 field errors.

Categories:
- Validation errors (*_INVALID, *_REQUIRED, *_NEGATIVE, *_TOO_LONG, *_OUT_OF_RANGE)
- Resource errors (*_NOT_FOUND)
- Conflict errors (PROJECT_NOT_OPEN, APPLICATION_*)
- Authorization errors (RESOURCE_NOT_OWNED, *_ROLE_REQUIRED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    TITLE_INVALID = "title_invalid"
    DESCRIPTION_INVALID = "description_invalid"
    SKILLS_REQUIRED = "skills_required"
    SKILL_TOO_LONG = "skill_too_long"
    AMOUNT_OUT_OF_RANGE = "amount_out_of_range"
    BUDGET_NEGATIVE = "budget_negative"
    BUDGET_RANGE_INVALID = "budget_range_invalid"
    DEADLINE_NOT_IN_FUTURE = "deadline_not_in_future"
    COVER_LETTER_INVALID = "cover_letter_invalid"
    PROPOSED_RATE_NEGATIVE = "proposed_rate_negative"
    ESTIMATED_DURATION_REQUIRED = "estimated_duration_required"
    ESTIMATED_DURATION_TOO_LONG = "estimated_duration_too_long"
    INVALID_STATUS_CHANGE = "invalid_status_change"
    INVALID_DECISION = "invalid_decision"

    # Resource errors
    PROJECT_NOT_FOUND = "project_not_found"
    APPLICATION_NOT_FOUND = "application_not_found"

    # Conflict errors
    PROJECT_NOT_OPEN = "project_not_open"
    PROJECT_HAS_APPLICATIONS = "project_has_applications"
    OWN_PROJECT_APPLICATION = "own_project_application"
    APPLICATION_ALREADY_EXISTS = "application_already_exists"
    APPLICATION_NOT_PENDING = "application_not_pending"

    # Authorization errors
    RESOURCE_NOT_OWNED = "resource_not_owned"
    CLIENT_ROLE_REQUIRED = "client_role_required"
    FREELANCER_ROLE_REQUIRED = "freelancer_role_required"
