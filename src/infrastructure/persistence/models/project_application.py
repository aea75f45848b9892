"""Project application database model.

Applications are part of the project aggregate and are only written by
ProjectRepository.save() in the same transaction as the project row.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING
from uuid import UUID

from sqlalchemy import (
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.infrastructure.persistence.base import BaseMutableModel

if TYPE_CHECKING:
    from src.infrastructure.persistence.models.project import Project


class ProjectApplication(BaseMutableModel):
    """Application model.

    Fields:
        project_id: FK to projects (CASCADE delete)
        freelancer_id: Applicant member id
        sequence: Arrival order within the project (0-based)
        cover_letter: Pitch text (max 1000)
        proposed_rate: Non-negative rate
        estimated_duration: Free-text estimate
        status: pending, accepted, rejected
        applied_at: Submission time
        decided_at: When the status left pending

    Indexes:
        - uq_project_applications_project_freelancer: one application per
          freelancer per project
        - uq_project_applications_project_sequence: stable arrival order
        - ix_project_applications_freelancer_applied: "my applications"
          fan-out query, newest first
    """

    __tablename__ = "project_applications"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    freelancer_id: Mapped[UUID] = mapped_column(Uuid, nullable=False)

    sequence: Mapped[int] = mapped_column(Integer, nullable=False)

    cover_letter: Mapped[str] = mapped_column(String(1000), nullable=False)

    proposed_rate: Mapped[Decimal] = mapped_column(
        Numeric(precision=12, scale=2),
        nullable=False,
    )

    estimated_duration: Mapped[str] = mapped_column(String(100), nullable=False)

    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        comment="pending, accepted, rejected",
    )

    applied_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    decided_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    project: Mapped["Project"] = relationship(back_populates="applications")

    __table_args__ = (
        UniqueConstraint(
            "project_id",
            "freelancer_id",
            name="uq_project_applications_project_freelancer",
        ),
        UniqueConstraint(
            "project_id",
            "sequence",
            name="uq_project_applications_project_sequence",
        ),
        Index(
            "ix_project_applications_freelancer_applied",
            "freelancer_id",
            "applied_at",
        ),
    )
