"""Project database model.

Relational rendering of the project aggregate root. Skills and
applications live in child tables; `version` is the compare-and-set token
every aggregate write checks and bumps.

Reference:
    - src/domain/entities/project.py
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import DateTime, Index, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.project_application import (
        ProjectApplication,
    )
    from src.infrastructure.persistence.models.project_skill import ProjectSkill


class Project(BaseMutableModel):
    """Project model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        client_id: Owning member
        title: Project title (max 200)
        description: Project description (max 2000)
        budget_min: Lower budget bound
        budget_max: Upper budget bound
        deadline: Delivery deadline
        status: open, assigned, completed, cancelled
        assigned_freelancer_id: Set only while assigned
        version: Optimistic concurrency token

    Indexes:
        - ix_projects_client_id: "my projects" lookup
        - ix_projects_status_created_at: default public listing
    """

    __tablename__ = "projects"

    client_id: Mapped[UUID] = mapped_column(
        Uuid,
        nullable=False,
        index=True,
        comment="Owning client member id",
    )

    title: Mapped[str] = mapped_column(String(200), nullable=False)

    description: Mapped[str] = mapped_column(String(2000), nullable=False)

    budget_min: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
    )

    budget_max: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
    )

    deadline: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="open",
        comment="open, assigned, completed, cancelled",
    )

    assigned_freelancer_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        nullable=True,
    )

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Bumped by every committed aggregate write",
    )

    skills: Mapped[list["ProjectSkill"]] = relationship(
        back_populates="project",
        order_by="ProjectSkill.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    applications: Mapped[list["ProjectApplication"]] = relationship(
        back_populates="project",
        order_by="ProjectApplication.sequence",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("ix_projects_status_created_at", "status", "created_at"),
    )
