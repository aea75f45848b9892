"""Unversioned, unauthenticated endpoints for probes and smoke checks."""

from fastapi import APIRouter, Depends, Response, status

from src.core.config import get_settings
from src.core.container import get_database
from src.infrastructure.persistence.database import Database
from src.schemas import HealthResponse

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    settings = get_settings()
    return {
        "message": f"{settings.app_name} API",
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"model": HealthResponse}},
)
async def health(
    response: Response,
    database: Database = Depends(get_database),
) -> HealthResponse:
    """200 while the database answers, 503 otherwise."""
    if await database.check_connection():
        return HealthResponse(status="healthy", database="ok")

    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="unhealthy", database="unavailable")
