"""Commands package (CQRS write side)."""

from src.application.commands.project_commands import (
    CreateProject,
    DecideApplication,
    DeleteProject,
    SubmitApplication,
    UpdateProject,
)

__all__ = [
    "CreateProject",
    "DecideApplication",
    "DeleteProject",
    "SubmitApplication",
    "UpdateProject",
]
