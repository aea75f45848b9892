"""Declarative route description used by ROUTE_REGISTRY.

Each v1 endpoint is one RouteMetadata entry: method, path, handler,
OpenAPI text, documented error statuses and who may call it. The
generator turns the entries into FastAPI routes at import time.

Usage:
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/mine",
        handler=list_my_projects,
        resource="projects",
        tags=["Projects"],
        summary="List my projects",
        response_model=ProjectListResponse,
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AuthPolicy(level=AuthLevel.AUTHENTICATED),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


class HTTPMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthLevel(str, Enum):
    """Who may call a route.

    Attributes:
        PUBLIC: Anyone. A bearer token, when sent, must still be valid;
            the handler sees the caller through OptionalPrincipal.
        AUTHENTICATED: A valid bearer token is required (401 otherwise).
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    level: AuthLevel
    # Role the domain will insist on; documentation only, the aggregate checks it
    role: str | None = None


class IdempotencyLevel(str, Enum):
    """RFC 9110 method semantics, recorded per route."""

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    status: int
    description: str
    model: type[BaseModel] | None = None


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Everything needed to mount one endpoint.

    `path` is relative to the v1 prefix. Entries are mounted in registry
    order, so literal paths ("/projects/mine") must precede the templated
    paths they would otherwise be captured by ("/projects/{project_id}").
    """

    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    resource: str
    tags: Sequence[str]

    summary: str
    description: str | None = None
    operation_id: str | None = None

    response_model: type[BaseModel] | None = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy
    deprecated: bool = False
