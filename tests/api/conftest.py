"""Fixtures for API tests.

Requests go through the real application (middleware, auth dependency,
handlers, repositories) with the request session pointed at a per-test
SQLite database. Bearer tokens are signed with the configured secret.
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal
from typing import Any
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.core.container import (
    get_database,
    get_db_session,
    get_event_bus,
    get_token_service,
)
from src.domain.enums import MemberRole
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.models import Member as MemberModel
from src.main import app
from tests.factories import new_id


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def client(database):
    async def session_override():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = session_override
    app.dependency_overrides[get_database] = lambda: database
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as http:
            yield http
    finally:
        app.dependency_overrides.clear()
        await get_event_bus().drain()


def auth(member_id: UUID, role: MemberRole) -> dict[str, str]:
    token = get_token_service().generate_access_token(member_id, role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def client_id() -> UUID:
    return new_id()


@pytest.fixture
def client_headers(client_id) -> dict[str, str]:
    return auth(client_id, MemberRole.CLIENT)


@pytest.fixture
def freelancer_id() -> UUID:
    return new_id()


@pytest.fixture
def freelancer_headers(freelancer_id) -> dict[str, str]:
    return auth(freelancer_id, MemberRole.FREELANCER)


@pytest.fixture
def seed_member(database):
    async def seed(
        member_id: UUID,
        role: MemberRole,
        display_name: str,
        *,
        skills: list[str] | None = None,
        company_name: str | None = None,
        hourly_rate: Decimal | None = None,
    ) -> None:
        async with database.get_session() as session:
            session.add(
                MemberModel(
                    id=member_id,
                    role=role.value,
                    display_name=display_name,
                    company_name=company_name,
                    skills=skills or [],
                    hourly_rate=hourly_rate,
                )
            )

    return seed


def project_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "title": "Build a React analytics dashboard",
        "description": "Charts for weekly shipment volume with CSV export.",
        "required_skills": ["react", "node"],
        "budget_min": "500",
        "budget_max": "1500",
        "deadline": (datetime.now(UTC) + timedelta(days=30)).isoformat(),
    }
    payload.update(overrides)
    return payload


def application_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "cover_letter": "I have shipped three similar dashboards.",
        "proposed_rate": "45",
        "estimated_duration": "3 weeks",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def post_project(client, client_headers):
    async def post(headers: dict[str, str] | None = None, **overrides: Any) -> dict:
        response = await client.post(
            "/api/v1/projects",
            json=project_payload(**overrides),
            headers=headers or client_headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return post


@pytest.fixture
def apply(client):
    async def submit(project_id: str, headers: dict[str, str], **overrides: Any):
        return await client.post(
            f"/api/v1/projects/{project_id}/applications",
            json=application_payload(**overrides),
            headers=headers,
        )

    return submit
