"""Project domain error messages.

Human-readable messages paired with the ErrorCode carried by the
DomainError values that the Project aggregate and the validators return.

Usage:
    from src.domain.errors import ProjectError

    return Failure(error=ConflictError(
        code=ErrorCode.PROJECT_NOT_OPEN,
        message=ProjectError.NOT_OPEN,
        resource_type="Project",
    ))
"""


class ProjectError:
    """Project and application error messages."""

    # -------------------------------------------------------------------------
    # Validation Errors
    # -------------------------------------------------------------------------

    TITLE_INVALID = "Title must be between 1 and 200 characters"
    DESCRIPTION_INVALID = "Description must be between 1 and 2000 characters"
    SKILLS_REQUIRED = "At least one required skill must be provided"
    SKILL_TOO_LONG = "Each skill must be at most 100 characters"
    AMOUNT_OUT_OF_RANGE = (
        "Amounts must be below 10,000,000,000 with at most 2 decimal places"
    )
    BUDGET_NEGATIVE = "Budget values must not be negative"
    BUDGET_RANGE_INVALID = "Minimum budget cannot exceed maximum budget"
    DEADLINE_NOT_IN_FUTURE = "Deadline must be in the future"
    COVER_LETTER_INVALID = "Cover letter must be between 1 and 1000 characters"
    PROPOSED_RATE_NEGATIVE = "Proposed rate must not be negative"
    ESTIMATED_DURATION_REQUIRED = "Estimated duration is required"
    ESTIMATED_DURATION_TOO_LONG = "Estimated duration must be at most 100 characters"
    INVALID_STATUS_CHANGE = "Project status can only be changed to cancelled"
    INVALID_DECISION = "Decision must be accepted or rejected"

    # -------------------------------------------------------------------------
    # Resource Errors
    # -------------------------------------------------------------------------

    PROJECT_NOT_FOUND = "Project not found"
    APPLICATION_NOT_FOUND = "Application not found"

    # -------------------------------------------------------------------------
    # State Errors
    # -------------------------------------------------------------------------

    NOT_OPEN = "Project is not open for changes"
    NOT_OPEN_FOR_APPLICATIONS = "Project is not accepting applications"
    ALREADY_CLOSED = "Project is already cancelled or completed"
    HAS_APPLICATIONS = "Cannot delete a project that has applications"
    OWN_PROJECT = "Cannot apply to your own project"
    ALREADY_APPLIED = "You have already applied to this project"
    NOT_PENDING = "Application has already been decided"

    # -------------------------------------------------------------------------
    # Authorization Errors
    # -------------------------------------------------------------------------

    NOT_OWNER = "Only the project owner can perform this action"
    CLIENT_ONLY = "Only clients can post projects"
    FREELANCER_ONLY = "Only freelancers can apply to projects"
    FREELANCER_VIEW_ONLY = "Only freelancers have applications and recommendations"
