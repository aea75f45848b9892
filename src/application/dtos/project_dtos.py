"""Project and application DTOs (Data Transfer Objects).

Read models returned by handlers to the presentation layer.

DTOs:
    - DecisionResult: Decided application plus the committed project
    - ProjectSummary: Denormalized project header for application views
    - ApplicantSummary: Applicant profile shown to the project owner
    - ApplicationView: Freelancer-facing application with its project
    - OwnerApplicationView: Owner-facing application with its applicant
    - ApplicationUpdate: Status update feed entry
    - ProjectDetail: Single project with the applications the caller may see
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from src.domain.entities import Application, MemberProfile, Project
from src.domain.enums import ApplicationStatus, ProjectStatus


@dataclass(frozen=True, kw_only=True)
class DecisionResult:
    """Outcome of DecideApplication.

    Attributes:
        application: Application after the decision.
        project: Project after the committed write.
        auto_rejected: IDs of applications rejected in the same write.
    """

    application: Application
    project: Project
    auto_rejected: list[UUID]


@dataclass(frozen=True, kw_only=True)
class ProjectSummary:
    project_id: UUID
    title: str
    budget_min: Decimal
    budget_max: Decimal
    deadline: datetime
    status: ProjectStatus
    client_id: UUID
    client_name: str | None
    client_company: str | None

    @classmethod
    def of(cls, project: Project, client: MemberProfile | None) -> "ProjectSummary":
        return cls(
            project_id=project.id,
            title=project.title,
            budget_min=project.budget_min,
            budget_max=project.budget_max,
            deadline=project.deadline,
            status=project.status,
            client_id=project.client_id,
            client_name=client.display_name if client else None,
            client_company=client.company_name if client else None,
        )


@dataclass(frozen=True, kw_only=True)
class ApplicantSummary:
    freelancer_id: UUID
    display_name: str | None
    skills: list[str]
    hourly_rate: Decimal | None

    @classmethod
    def of(cls, freelancer_id: UUID, member: MemberProfile | None) -> "ApplicantSummary":
        if member is None:
            return cls(
                freelancer_id=freelancer_id, display_name=None, skills=[], hourly_rate=None
            )
        return cls(
            freelancer_id=freelancer_id,
            display_name=member.display_name,
            skills=list(member.skills),
            hourly_rate=member.hourly_rate,
        )


@dataclass(frozen=True, kw_only=True)
class ApplicationView:
    """A freelancer's application with a summary of its project."""

    application: Application
    project: ProjectSummary


@dataclass(frozen=True, kw_only=True)
class OwnerApplicationView:
    """An application as the project owner sees it."""

    application: Application
    applicant: ApplicantSummary


@dataclass(frozen=True, kw_only=True)
class ApplicationUpdate:
    application_id: UUID
    project_id: UUID
    project_title: str
    client_name: str | None
    status: ApplicationStatus
    applied_at: datetime
    decided_at: datetime | None


@dataclass(frozen=True, kw_only=True)
class ProjectDetail:
    """Single project as returned by GetProject.

    Attributes:
        project: The project.
        applications: Visible applications, or None when not requested.
        application_count: Number of applications on the project.
    """

    project: Project
    applications: list[Application] | None
    application_count: int
