"""Route registry for the v1 API.

Modules:
    metadata: RouteMetadata and the policy enums
    registry: ROUTE_REGISTRY, one entry per endpoint
    generator: register_routes_from_registry()
"""

from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

__all__ = [
    "AuthLevel",
    "AuthPolicy",
    "ErrorSpec",
    "HTTPMethod",
    "IdempotencyLevel",
    "RouteMetadata",
]
