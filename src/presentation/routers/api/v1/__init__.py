"""API v1 routers.

Every route is generated from ROUTE_REGISTRY (routes/registry.py).

Resources:
    /api/v1/projects                                  - Project listing and lifecycle
    /api/v1/projects/{id}/applications                - Applications on a project
    /api/v1/projects/{id}/applications/{app_id}       - Application decisions
    /api/v1/applications/mine                         - Freelancer's applications
    /api/v1/applications/mine/updates                 - Freelancer's status feed

Listing projects and reading one project are open to anonymous callers;
every other route requires a bearer token.
"""

from fastapi import APIRouter

from src.core.config import get_settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

v1_router = APIRouter(prefix=get_settings().api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]
