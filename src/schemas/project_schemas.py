"""Project request and response schemas.

Pydantic schemas for project endpoints. Includes:
- Request schemas (client -> API)
- Response schemas (API -> client)
- Entity/DTO-to-schema conversion methods

Value constraints (title length, budget ordering, future deadline) are
enforced by the domain, so a bad value is a 400 with a field-level code
rather than a 422.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from src.application.dtos import ProjectDetail
from src.domain.entities import Project
from src.domain.enums import ProjectStatus
from src.domain.value_objects import Page, ProjectChanges
from src.schemas.application_schemas import ApplicationResponse
from src.schemas.common_schemas import PaginationMeta


# =============================================================================
# Request Schemas
# =============================================================================


class ProjectCreateRequest(BaseModel):
    """Request schema for posting a project.

    Attributes:
        title: 1-200 characters.
        description: 1-2000 characters.
        required_skills: At least one skill.
        budget_min: Lower budget bound (>= 0).
        budget_max: Upper budget bound (>= budget_min).
        deadline: Must be in the future.
    """

    title: str = Field(..., examples=["Build a React analytics dashboard"])
    description: str = Field(
        ..., examples=["Charts for weekly shipment volume with CSV export."]
    )
    required_skills: list[str] = Field(..., examples=[["react", "node"]])
    budget_min: Decimal = Field(..., examples=["500"])
    budget_max: Decimal = Field(..., examples=["1500"])
    deadline: datetime = Field(..., examples=["2030-01-31T00:00:00Z"])


class ProjectUpdateRequest(BaseModel):
    """Request schema for a partial project update.

    Omitted fields are kept. `status` only accepts "cancelled"; other
    values are rejected by the domain.
    """

    title: str | None = None
    description: str | None = None
    required_skills: list[str] | None = None
    budget_min: Decimal | None = None
    budget_max: Decimal | None = None
    deadline: datetime | None = None
    status: ProjectStatus | None = None

    def to_changes(self) -> ProjectChanges:
        return ProjectChanges(
            title=self.title,
            description=self.description,
            required_skills=self.required_skills,
            budget_min=self.budget_min,
            budget_max=self.budget_max,
            deadline=self.deadline,
            status=self.status,
        )


# =============================================================================
# Response Schemas
# =============================================================================


class ProjectResponse(BaseModel):
    """Single project response (applications not included)."""

    id: UUID = Field(..., description="Project unique identifier")
    client_id: UUID = Field(..., description="Owning client")
    title: str
    description: str
    required_skills: list[str]
    budget_min: Decimal
    budget_max: Decimal
    deadline: datetime
    status: ProjectStatus
    assigned_freelancer_id: UUID | None = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectResponse":
        return cls(
            id=project.id,
            client_id=project.client_id,
            title=project.title,
            description=project.description,
            required_skills=list(project.required_skills),
            budget_min=project.budget_min,
            budget_max=project.budget_max,
            deadline=project.deadline,
            status=project.status,
            assigned_freelancer_id=project.assigned_freelancer_id,
            created_at=project.created_at,
            updated_at=project.updated_at,
        )


class ProjectDetailResponse(ProjectResponse):
    """Project with the applications visible to the caller.

    Attributes:
        application_count: Number of applications on the project.
        applications: Present only when requested with include_applications.
    """

    application_count: int
    applications: list[ApplicationResponse] | None = None

    @classmethod
    def from_dto(cls, detail: ProjectDetail) -> "ProjectDetailResponse":
        base = ProjectResponse.from_entity(detail.project)
        applications = None
        if detail.applications is not None:
            applications = [
                ApplicationResponse.from_entity(a) for a in detail.applications
            ]
        return cls(
            **base.model_dump(),
            application_count=detail.application_count,
            applications=applications,
        )


class ProjectListResponse(BaseModel):
    data: list[ProjectResponse]
    pagination: PaginationMeta

    @classmethod
    def from_page(cls, page: Page[Project]) -> "ProjectListResponse":
        return cls(
            data=[ProjectResponse.from_entity(p) for p in page.items],
            pagination=PaginationMeta.from_page(page),
        )
