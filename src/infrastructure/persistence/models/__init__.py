"""Database models for persistence layer.

SQLAlchemy models mapping to database tables. These are infrastructure
concerns and are not imported by the domain layer.

Models Organization:
    - project.py: Project aggregate root row
    - project_skill.py: Ordered required skills
    - project_application.py: Applications (part of the project aggregate)
    - member.py: Member profiles (read-only projection)

Note:
    Domain entities (dataclasses) live in src/domain/entities/ and are
    mapped to these models by the repositories.
"""

from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.project import Project
from src.infrastructure.persistence.models.project_application import (
    ProjectApplication,
)
from src.infrastructure.persistence.models.project_skill import ProjectSkill

__all__ = [
    "Member",
    "Project",
    "ProjectApplication",
    "ProjectSkill",
]
