"""ROUTE_REGISTRY stays in step with the mounted v1 routes.

Reference:
    - src/presentation/routers/api/v1/routes/registry.py
    - src/presentation/routers/api/v1/routes/generator.py
"""

from fastapi.routing import APIRoute

from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.metadata import AuthLevel
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

PUBLIC_ENDPOINTS = {
    "GET /projects",
    "GET /projects/{project_id}",
}


def _mounted() -> dict[str, APIRoute]:
    return {
        f"{method} {route.path.removeprefix('/api/v1')}": route
        for route in v1_router.routes
        if isinstance(route, APIRoute)
        for method in route.methods
    }


class TestRegistryCompleteness:
    def test_every_entry_is_mounted_and_nothing_else(self):
        registered = {f"{e.method.value} {e.path}" for e in ROUTE_REGISTRY}

        assert set(_mounted()) == registered
        assert len(registered) == 12

    def test_operation_ids_are_present_and_unique(self):
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]

        assert all(operation_ids)
        assert len(set(operation_ids)) == len(operation_ids)

    def test_literal_paths_precede_templated_ones(self):
        paths = [entry.path for entry in ROUTE_REGISTRY]

        assert paths.index("/projects/mine") < paths.index("/projects/{project_id}")
        assert paths.index("/projects/recommended") < paths.index(
            "/projects/{project_id}"
        )


class TestAuthPolicies:
    def test_only_project_reads_are_public(self):
        public = {
            f"{e.method.value} {e.path}"
            for e in ROUTE_REGISTRY
            if e.auth_policy.level is AuthLevel.PUBLIC
        }

        assert public == PUBLIC_ENDPOINTS

    def test_authenticated_routes_carry_the_bearer_guard(self):
        mounted = _mounted()

        for entry in ROUTE_REGISTRY:
            route = mounted[f"{entry.method.value} {entry.path}"]
            guarded = bool(route.dependencies)
            assert guarded is (entry.auth_policy.level is AuthLevel.AUTHENTICATED), (
                entry.path
            )
