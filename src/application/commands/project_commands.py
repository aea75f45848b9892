"""Project and application commands (CQRS write operations).

Commands represent caller intent to change a project aggregate.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- `principal` is the caller as resolved by the identity boundary
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.domain.enums import ApplicationStatus
from src.domain.value_objects import Principal, ProjectChanges


@dataclass(frozen=True, kw_only=True)
class CreateProject:
    """Post a new project (clients only).

    Example:
        >>> command = CreateProject(
        ...     principal=ClientPrincipal(member_id=client_id),
        ...     title="Analytics dashboard",
        ...     description="React front end over an existing REST API",
        ...     required_skills=["react", "typescript"],
        ...     budget_min=Decimal("1000"),
        ...     budget_max=Decimal("2000"),
        ...     deadline=datetime.now(UTC) + timedelta(days=30),
        ... )
        >>> result = await handler.handle(command)
    """

    principal: Principal
    title: str
    description: str
    required_skills: list[str]
    budget_min: Decimal
    budget_max: Decimal
    deadline: datetime


@dataclass(frozen=True, kw_only=True)
class UpdateProject:
    """Owner's partial update, including cancellation.

    Attributes:
        project_id: Project to change.
        changes: Fields to change; unset fields are kept.
    """

    principal: Principal
    project_id: UUID
    changes: ProjectChanges


@dataclass(frozen=True, kw_only=True)
class DeleteProject:
    principal: Principal
    project_id: UUID


@dataclass(frozen=True, kw_only=True)
class SubmitApplication:
    """Freelancer applies to an open project.

    Attributes:
        cover_letter: 1-1000 characters.
        proposed_rate: Non-negative rate.
        estimated_duration: Free-text estimate ("3 weeks").
    """

    principal: Principal
    project_id: UUID
    cover_letter: str
    proposed_rate: Decimal
    estimated_duration: str


@dataclass(frozen=True, kw_only=True)
class DecideApplication:
    """Owner accepts or rejects a pending application.

    Attributes:
        decision: ACCEPTED or REJECTED.
    """

    principal: Principal
    project_id: UUID
    application_id: UUID
    decision: ApplicationStatus
