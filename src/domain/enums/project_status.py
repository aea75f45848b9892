"""Project lifecycle status.

Transitions:
    OPEN -> ASSIGNED   (an application is accepted)
    OPEN -> CANCELLED  (owner cancels)
    ASSIGNED -> CANCELLED
    ASSIGNED -> COMPLETED  (reserved for the delivery workflow)

COMPLETED and CANCELLED are terminal.
"""

from enum import Enum


class ProjectStatus(str, Enum):
    """Project lifecycle status."""

    OPEN = "open"
    ASSIGNED = "assigned"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check whether no further transition is possible.

        Returns:
            True for COMPLETED and CANCELLED.
        """
        return self in (ProjectStatus.COMPLETED, ProjectStatus.CANCELLED)
