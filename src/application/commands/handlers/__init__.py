"""Command handlers."""

from src.application.commands.handlers.create_project_handler import (
    CreateProjectHandler,
)
from src.application.commands.handlers.decide_application_handler import (
    DecideApplicationHandler,
)
from src.application.commands.handlers.delete_project_handler import (
    DeleteProjectHandler,
)
from src.application.commands.handlers.submit_application_handler import (
    SubmitApplicationHandler,
)
from src.application.commands.handlers.update_project_handler import (
    UpdateProjectHandler,
)

__all__ = [
    "CreateProjectHandler",
    "DecideApplicationHandler",
    "DeleteProjectHandler",
    "SubmitApplicationHandler",
    "UpdateProjectHandler",
]
