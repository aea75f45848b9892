"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.member_repository import (
    MemberRepository,
)
from src.infrastructure.persistence.repositories.project_repository import (
    ProjectRepository,
)

__all__ = [
    "MemberRepository",
    "ProjectRepository",
]
