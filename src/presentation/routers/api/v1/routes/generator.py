"""Mount ROUTE_REGISTRY entries on a FastAPI router.

    v1_router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_principal,
)
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    for metadata in registry:
        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=_build_responses(metadata.errors) if metadata.errors else None,
            dependencies=_build_dependencies(metadata.auth_policy),
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Route-level auth guard.

    Handlers that also declare CurrentPrincipal reuse the cached result,
    so the token is verified once per request.
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []
        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_principal)]
        case _:
            raise ValueError(f"Unknown auth level: {auth_policy.level}")


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    return {
        error.status: {
            "description": error.description,
            "model": error.model or ProblemDetails,
        }
        for error in errors
    }
