"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas import ProjectCreateRequest, ProjectResponse
"""

from src.schemas.application_schemas import (
    ApplicantResponse,
    ApplicationCreateRequest,
    ApplicationDecisionRequest,
    ApplicationResponse,
    ApplicationUpdateListResponse,
    ApplicationUpdateResponse,
    DecisionResponse,
    FreelancerApplicationListResponse,
    FreelancerApplicationResponse,
    OwnerApplicationListResponse,
    OwnerApplicationResponse,
    ProjectSummaryResponse,
)
from src.schemas.common_schemas import HealthResponse, PaginationMeta
from src.schemas.project_schemas import (
    ProjectCreateRequest,
    ProjectDetailResponse,
    ProjectListResponse,
    ProjectResponse,
    ProjectUpdateRequest,
)

__all__ = [
    # Common
    "HealthResponse",
    "PaginationMeta",
    # Projects
    "ProjectCreateRequest",
    "ProjectDetailResponse",
    "ProjectListResponse",
    "ProjectResponse",
    "ProjectUpdateRequest",
    # Applications
    "ApplicantResponse",
    "ApplicationCreateRequest",
    "ApplicationDecisionRequest",
    "ApplicationResponse",
    "ApplicationUpdateListResponse",
    "ApplicationUpdateResponse",
    "DecisionResponse",
    "FreelancerApplicationListResponse",
    "FreelancerApplicationResponse",
    "OwnerApplicationListResponse",
    "OwnerApplicationResponse",
    "ProjectSummaryResponse",
]
