"""Application status.

Only PENDING -> ACCEPTED and PENDING -> REJECTED are legal. ACCEPTED and
REJECTED are terminal.
"""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Freelancer application status."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    def is_terminal(self) -> bool:
        return self is not ApplicationStatus.PENDING

    @classmethod
    def decisions(cls) -> tuple["ApplicationStatus", ...]:
        """Statuses an owner may decide an application into."""
        return (cls.ACCEPTED, cls.REJECTED)
