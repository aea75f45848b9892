"""Owner-supplied partial update of a project.

A field left as None is not part of the update. The only status an owner
may set is CANCELLED.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal

from src.domain.enums import ProjectStatus


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectChanges:
    """Partial project update.

    Attributes:
        title: New title.
        description: New description.
        required_skills: Replacement skill list.
        budget_min: New lower budget.
        budget_max: New upper budget.
        deadline: New deadline.
        status: Requested status (only CANCELLED is accepted).
    """

    title: str | None = None
    description: str | None = None
    required_skills: list[str] | None = None
    budget_min: Decimal | None = None
    budget_max: Decimal | None = None
    deadline: datetime | None = None
    status: ProjectStatus | None = None

    def changed_fields(self) -> list[str]:
        """Names of the fields present in this update."""
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]

    def has_field_changes(self) -> bool:
        """True when anything other than status is being changed."""
        return any(name != "status" for name in self.changed_fields())

    def is_cancellation_only(self) -> bool:
        return self.status is ProjectStatus.CANCELLED and not self.has_field_changes()
