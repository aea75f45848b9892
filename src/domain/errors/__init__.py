"""Domain errors package.

Usage:
    from src.domain.errors import AuthenticationError, ProjectError
"""

from src.domain.errors.authentication_error import AuthenticationError
from src.domain.errors.project_error import ProjectError

__all__ = ["AuthenticationError", "ProjectError"]
