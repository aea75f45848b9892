"""API tests for /api/v1/applications (freelancer views).

Reference:
    - src/presentation/routers/api/v1/applications.py
"""

from datetime import UTC, datetime, timedelta

from src.domain.enums import MemberRole
from tests.api.conftest import auth
from tests.factories import new_id

MINE = "/api/v1/applications/mine"


async def test_mine_lists_applications_with_project_summary(
    client,
    client_id,
    post_project,
    apply,
    seed_member,
    freelancer_headers,
):
    await seed_member(
        client_id, MemberRole.CLIENT, "Acme Buyer", company_name="Acme Corp"
    )
    first = await post_project(title="First")
    second = await post_project(title="Second")
    await apply(first["id"], freelancer_headers)
    await apply(second["id"], freelancer_headers)

    response = await client.get(MINE, headers=freelancer_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["pagination"]["total"] == 2
    assert [a["project"]["title"] for a in body["data"]] == ["Second", "First"]
    summary = body["data"][0]["project"]
    assert summary["id"] == second["id"]
    assert summary["client_name"] == "Acme Buyer"
    assert summary["client_company"] == "Acme Corp"
    assert summary["status"] == "open"


async def test_mine_filters_by_status(
    client, client_headers, post_project, apply, freelancer_headers
):
    kept = await post_project()
    rejected = await post_project()
    await apply(kept["id"], freelancer_headers)
    application = (await apply(rejected["id"], freelancer_headers)).json()
    await client.patch(
        f"/api/v1/projects/{rejected['id']}/applications/{application['id']}",
        json={"status": "rejected"},
        headers=client_headers,
    )

    response = await client.get(
        MINE, params={"status": "rejected"}, headers=freelancer_headers
    )

    data = response.json()["data"]
    assert [a["id"] for a in data] == [application["id"]]
    assert data[0]["decided_at"] is not None


async def test_mine_shows_auto_rejection(
    client, client_headers, post_project, apply, freelancer_headers
):
    project = await post_project()
    mine = (await apply(project["id"], freelancer_headers)).json()
    winner = (await apply(project["id"], auth(new_id(), MemberRole.FREELANCER))).json()
    await client.patch(
        f"/api/v1/projects/{project['id']}/applications/{winner['id']}",
        json={"status": "accepted"},
        headers=client_headers,
    )

    response = await client.get(MINE, headers=freelancer_headers)

    entry = response.json()["data"][0]
    assert entry["id"] == mine["id"]
    assert entry["status"] == "rejected"
    assert entry["project"]["status"] == "assigned"


async def test_mine_is_freelancer_only(client, client_headers):
    response = await client.get(MINE, headers=client_headers)

    assert response.status_code == 403


async def test_updates_since(client, post_project, apply, freelancer_headers):
    project = await post_project(title="Fresh")
    await apply(project["id"], freelancer_headers)
    an_hour_ago = (datetime.now(UTC) - timedelta(hours=1)).isoformat()
    tomorrow = (datetime.now(UTC) + timedelta(days=1)).isoformat()

    recent = await client.get(
        f"{MINE}/updates", params={"since": an_hour_ago}, headers=freelancer_headers
    )
    future = await client.get(
        f"{MINE}/updates", params={"since": tomorrow}, headers=freelancer_headers
    )

    assert recent.status_code == 200
    body = recent.json()
    assert body["count"] == 1
    assert body["data"][0]["project_title"] == "Fresh"
    assert body["data"][0]["status"] == "pending"
    assert future.json() == {"data": [], "count": 0}


async def test_updates_requires_since(client, freelancer_headers):
    response = await client.get(f"{MINE}/updates", headers=freelancer_headers)

    assert response.status_code == 422
    assert response.json()["errors"][0]["field"] == "since"


async def test_updates_is_freelancer_only(client, client_headers):
    response = await client.get(
        f"{MINE}/updates",
        params={"since": datetime.now(UTC).isoformat()},
        headers=client_headers,
    )

    assert response.status_code == 403
