"""Application services shared by command handlers."""

from src.application.services.project_write_service import ProjectWriteService

__all__ = ["ProjectWriteService"]
