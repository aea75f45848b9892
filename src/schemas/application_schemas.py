"""Application request and response schemas.

Pydantic schemas for application endpoints. Includes:
- Request schemas (client -> API)
- Response schemas (API -> client)
- Entity/DTO-to-schema conversion methods

Field limits (cover letter length, non-negative rate) are checked by the
domain so violations come back as 400 Problem Details with a field code.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import (
    ApplicantSummary,
    ApplicationUpdate,
    ApplicationView,
    DecisionResult,
    OwnerApplicationView,
    ProjectSummary,
)
from src.domain.entities import Application
from src.domain.enums import ApplicationStatus, ProjectStatus
from src.domain.value_objects import Page
from src.schemas.common_schemas import PaginationMeta


# =============================================================================
# Request Schemas
# =============================================================================


class ApplicationCreateRequest(BaseModel):
    """Request schema for submitting an application."""

    cover_letter: str = Field(
        ...,
        description="Pitch to the client (1-1000 characters)",
        examples=["I have shipped three React dashboards for logistics teams."],
    )
    proposed_rate: Decimal = Field(..., description="Proposed rate", examples=["45.00"])
    estimated_duration: str = Field(..., examples=["3 weeks"])


class ApplicationDecisionRequest(BaseModel):
    """Request schema for accepting or rejecting an application.

    Attributes:
        status: "accepted" or "rejected".
    """

    status: ApplicationStatus = Field(..., examples=["accepted"])


# =============================================================================
# Response Schemas
# =============================================================================


class ApplicationResponse(BaseModel):
    """Single application response."""

    id: UUID
    project_id: UUID
    freelancer_id: UUID
    cover_letter: str
    proposed_rate: Decimal
    estimated_duration: str
    status: ApplicationStatus
    applied_at: datetime
    decided_at: datetime | None = None

    @classmethod
    def from_entity(cls, application: Application) -> "ApplicationResponse":
        return cls(
            id=application.id,
            project_id=application.project_id,
            freelancer_id=application.freelancer_id,
            cover_letter=application.cover_letter,
            proposed_rate=application.proposed_rate,
            estimated_duration=application.estimated_duration,
            status=application.status,
            applied_at=application.applied_at,
            decided_at=application.decided_at,
        )


class DecisionResponse(BaseModel):
    """Response for an application decision.

    Attributes:
        application: The decided application.
        project_status: Project status after the write.
        assigned_freelancer_id: Assigned freelancer (accept only).
        auto_rejected: Applications rejected by the same write.
    """

    application: ApplicationResponse
    project_status: ProjectStatus
    assigned_freelancer_id: UUID | None = None
    auto_rejected: list[UUID] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, result: DecisionResult) -> "DecisionResponse":
        return cls(
            application=ApplicationResponse.from_entity(result.application),
            project_status=result.project.status,
            assigned_freelancer_id=result.project.assigned_freelancer_id,
            auto_rejected=list(result.auto_rejected),
        )


class ApplicantResponse(BaseModel):
    freelancer_id: UUID
    display_name: str | None = None
    skills: list[str] = Field(default_factory=list)
    hourly_rate: Decimal | None = None

    @classmethod
    def from_dto(cls, applicant: ApplicantSummary) -> "ApplicantResponse":
        return cls(
            freelancer_id=applicant.freelancer_id,
            display_name=applicant.display_name,
            skills=list(applicant.skills),
            hourly_rate=applicant.hourly_rate,
        )


class OwnerApplicationResponse(ApplicationResponse):
    """Application as the project owner sees it, with the applicant profile."""

    applicant: ApplicantResponse

    @classmethod
    def from_dto(cls, view: OwnerApplicationView) -> "OwnerApplicationResponse":
        base = ApplicationResponse.from_entity(view.application)
        return cls(
            **base.model_dump(),
            applicant=ApplicantResponse.from_dto(view.applicant),
        )


class OwnerApplicationListResponse(BaseModel):
    data: list[OwnerApplicationResponse]
    pagination: PaginationMeta

    @classmethod
    def from_page(
        cls, page: Page[OwnerApplicationView]
    ) -> "OwnerApplicationListResponse":
        return cls(
            data=[OwnerApplicationResponse.from_dto(view) for view in page.items],
            pagination=PaginationMeta.from_page(page),
        )


class ProjectSummaryResponse(BaseModel):
    """Denormalized project header embedded in freelancer application views."""

    id: UUID
    title: str
    budget_min: Decimal
    budget_max: Decimal
    deadline: datetime
    status: ProjectStatus
    client_id: UUID
    client_name: str | None = None
    client_company: str | None = None

    @classmethod
    def from_dto(cls, summary: ProjectSummary) -> "ProjectSummaryResponse":
        return cls(
            id=summary.project_id,
            title=summary.title,
            budget_min=summary.budget_min,
            budget_max=summary.budget_max,
            deadline=summary.deadline,
            status=summary.status,
            client_id=summary.client_id,
            client_name=summary.client_name,
            client_company=summary.client_company,
        )


class FreelancerApplicationResponse(ApplicationResponse):
    project: ProjectSummaryResponse

    @classmethod
    def from_dto(cls, view: ApplicationView) -> "FreelancerApplicationResponse":
        base = ApplicationResponse.from_entity(view.application)
        return cls(
            **base.model_dump(),
            project=ProjectSummaryResponse.from_dto(view.project),
        )


class FreelancerApplicationListResponse(BaseModel):
    data: list[FreelancerApplicationResponse]
    pagination: PaginationMeta

    @classmethod
    def from_page(
        cls, page: Page[ApplicationView]
    ) -> "FreelancerApplicationListResponse":
        return cls(
            data=[FreelancerApplicationResponse.from_dto(view) for view in page.items],
            pagination=PaginationMeta.from_page(page),
        )


class ApplicationUpdateResponse(BaseModel):
    application_id: UUID
    project_id: UUID
    project_title: str
    client_name: str | None = None
    status: ApplicationStatus
    applied_at: datetime
    decided_at: datetime | None = None

    @classmethod
    def from_dto(cls, update: ApplicationUpdate) -> "ApplicationUpdateResponse":
        return cls(
            application_id=update.application_id,
            project_id=update.project_id,
            project_title=update.project_title,
            client_name=update.client_name,
            status=update.status,
            applied_at=update.applied_at,
            decided_at=update.decided_at,
        )


class ApplicationUpdateListResponse(BaseModel):
    data: list[ApplicationUpdateResponse]
    count: int

    @classmethod
    def from_dtos(
        cls, updates: list[ApplicationUpdate]
    ) -> "ApplicationUpdateListResponse":
        return cls(
            data=[ApplicationUpdateResponse.from_dto(u) for u in updates],
            count=len(updates),
        )
