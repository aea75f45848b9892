"""Project skill database model (ordered required skills)."""

from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.project import Project


class ProjectSkill(BaseModel):
    """One required skill of a project.

    Fields:
        project_id: FK to projects (CASCADE delete)
        skill: Skill name
        position: Order within the project's skill list

    Indexes:
        - ix_project_skills_skill: skill-intersection filter
        - uq_project_skills_project_skill: no duplicate skill per project
    """

    __tablename__ = "project_skills"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    skill: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    position: Mapped[int] = mapped_column(Integer, nullable=False)

    project: Mapped["Project"] = relationship(back_populates="skills")

    __table_args__ = (
        UniqueConstraint("project_id", "skill", name="uq_project_skills_project_skill"),
    )
