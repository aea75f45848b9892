"""Application entity.

A freelancer's bid on a project. Applications belong to exactly one
Project and are only ever changed through the Project aggregate.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from uuid import UUID

from src.domain.enums import ApplicationStatus


@dataclass
class Application:
    """Freelancer application embedded in a Project aggregate.

    Attributes:
        id: Unique application identifier.
        project_id: Owning project.
        freelancer_id: Applicant.
        cover_letter: Pitch text (1-1000 characters).
        proposed_rate: Proposed rate, never negative.
        estimated_duration: Free-text duration estimate.
        status: PENDING until the owner decides.
        applied_at: Submission instant (UTC).
        decided_at: When the status left PENDING.
    """

    id: UUID
    project_id: UUID
    freelancer_id: UUID
    cover_letter: str
    proposed_rate: Decimal
    estimated_duration: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    applied_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    decided_at: datetime | None = None

    def is_pending(self) -> bool:
        return self.status is ApplicationStatus.PENDING

    def mark(self, status: ApplicationStatus, when: datetime) -> None:
        """Move a pending application to a terminal status.

        Raises:
            ValueError: If the application was already decided. Callers
                check is_pending() first; reaching this is a programming error.
        """
        if not self.is_pending():
            raise ValueError(f"Application {self.id} is already {self.status.value}")
        self.status = status
        self.decided_at = when
