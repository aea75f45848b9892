"""create_marketplace_tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Create members, projects, project_skills and project_applications."""
    op.create_table(
        "members",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("role", sa.String(length=20), nullable=False),
        sa.Column("display_name", sa.String(length=200), nullable=False),
        sa.Column("company_name", sa.String(length=200), nullable=True),
        sa.Column("skills", sa.JSON(), nullable=False),
        sa.Column("hourly_rate", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "projects",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "client_id",
            sa.Uuid(),
            nullable=False,
            comment="Owning client member id",
        ),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=2000), nullable=False),
        sa.Column("budget_min", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("budget_max", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("deadline", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="open, assigned, completed, cancelled",
        ),
        sa.Column("assigned_freelancer_id", sa.Uuid(), nullable=True),
        sa.Column(
            "version",
            sa.Integer(),
            nullable=False,
            comment="Bumped by every committed aggregate write",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_projects_client_id", "projects", ["client_id"])
    op.create_index(
        "ix_projects_status_created_at", "projects", ["status", "created_at"]
    )

    op.create_table(
        "project_skills",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("skill", sa.String(length=100), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "project_id", "skill", name="uq_project_skills_project_skill"
        ),
    )
    op.create_index("ix_project_skills_project_id", "project_skills", ["project_id"])
    op.create_index("ix_project_skills_skill", "project_skills", ["skill"])

    op.create_table(
        "project_applications",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("project_id", sa.Uuid(), nullable=False),
        sa.Column("freelancer_id", sa.Uuid(), nullable=False),
        sa.Column("sequence", sa.Integer(), nullable=False),
        sa.Column("cover_letter", sa.String(length=1000), nullable=False),
        sa.Column("proposed_rate", sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column("estimated_duration", sa.String(length=100), nullable=False),
        sa.Column(
            "status",
            sa.String(length=20),
            nullable=False,
            comment="pending, accepted, rejected",
        ),
        sa.Column("applied_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("decided_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "project_id",
            "freelancer_id",
            name="uq_project_applications_project_freelancer",
        ),
        sa.UniqueConstraint(
            "project_id",
            "sequence",
            name="uq_project_applications_project_sequence",
        ),
    )
    op.create_index(
        "ix_project_applications_project_id", "project_applications", ["project_id"]
    )
    op.create_index(
        "ix_project_applications_freelancer_applied",
        "project_applications",
        ["freelancer_id", "applied_at"],
    )


def downgrade() -> None:
    """Drop marketplace tables (children first)."""
    op.drop_index(
        "ix_project_applications_freelancer_applied", table_name="project_applications"
    )
    op.drop_index("ix_project_applications_project_id", table_name="project_applications")
    op.drop_table("project_applications")
    op.drop_index("ix_project_skills_skill", table_name="project_skills")
    op.drop_index("ix_project_skills_project_id", table_name="project_skills")
    op.drop_table("project_skills")
    op.drop_index("ix_projects_status_created_at", table_name="projects")
    op.drop_index("ix_projects_client_id", table_name="projects")
    op.drop_table("projects")
    op.drop_table("members")
