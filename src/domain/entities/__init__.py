"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.application import Application
from src.domain.entities.member import MemberProfile
from src.domain.entities.project import DecisionOutcome, Project

__all__ = [
    "Application",
    "DecisionOutcome",
    "MemberProfile",
    "Project",
]
