"""Integration tests for ProjectRepository against SQLite.

Tests aggregate round-trips, the version-checked write, listing filters
and the freelancer application views.

Reference:
    - src/infrastructure/persistence/repositories/project_repository.py
"""

from datetime import UTC, datetime, timedelta
from decimal import Decimal

import pytest

from src.domain.enums import (
    ApplicationStatus,
    ProjectSortField,
    ProjectStatus,
    SortDirection,
)
from src.domain.value_objects import (
    ApplicationFilter,
    PageRequest,
    ProjectFilter,
    ProjectSort,
)
from src.infrastructure.persistence.repositories import ProjectRepository
from tests.factories import add_application, make_project, new_id


# =============================================================================
# Aggregate round-trip and compare-and-set
# =============================================================================


async def test_add_then_get_round_trips(session):
    repo = ProjectRepository(session)
    project = make_project(skills=["react", "node", "sql"])

    await repo.add(project)
    loaded = await repo.get(project.id)

    assert loaded is not None
    assert loaded.client_id == project.client_id
    assert loaded.required_skills == ["react", "node", "sql"]
    assert loaded.budget_min == Decimal("500")
    assert loaded.budget_max == Decimal("1500")
    assert loaded.deadline.tzinfo is not None
    assert loaded.status is ProjectStatus.OPEN
    assert loaded.applications == []
    assert loaded.version == 0


async def test_get_unknown_returns_none(session):
    assert await ProjectRepository(session).get(new_id()) is None


async def test_save_bumps_version_and_persists_applications(session):
    repo = ProjectRepository(session)
    project = make_project()
    await repo.add(project)

    loaded = await repo.get(project.id)
    first = add_application(loaded)
    second = add_application(loaded)
    assert await repo.save(loaded) is True
    assert loaded.version == 1

    reloaded = await repo.get(project.id)
    assert reloaded.version == 1
    assert [a.id for a in reloaded.applications] == [first.id, second.id]
    assert reloaded.applications[0].cover_letter == first.cover_letter
    assert reloaded.applications[0].proposed_rate == Decimal("45")


async def test_save_persists_decision(session):
    repo = ProjectRepository(session)
    project = make_project()
    chosen = add_application(project)
    other = add_application(project)
    await repo.add(project)

    loaded = await repo.get(project.id)
    loaded.decide_application(
        application_id=chosen.id,
        decision=ApplicationStatus.ACCEPTED,
        caller_id=project.client_id,
    )
    assert await repo.save(loaded)

    reloaded = await repo.get(project.id)
    assert reloaded.status is ProjectStatus.ASSIGNED
    assert reloaded.assigned_freelancer_id == chosen.freelancer_id
    statuses = {a.id: a.status for a in reloaded.applications}
    assert statuses == {
        chosen.id: ApplicationStatus.ACCEPTED,
        other.id: ApplicationStatus.REJECTED,
    }
    assert all(a.decided_at is not None for a in reloaded.applications)
    assert reloaded.invariant_violations() == []


async def test_save_replaces_skills(session):
    repo = ProjectRepository(session)
    project = make_project(skills=["react"])
    await repo.add(project)

    loaded = await repo.get(project.id)
    loaded.required_skills = ["python", "react"]
    assert await repo.save(loaded)

    assert (await repo.get(project.id)).required_skills == ["python", "react"]


async def test_stale_save_writes_nothing(database):
    project = make_project()
    async with database.async_session() as setup:
        await ProjectRepository(setup).add(project)

    async with (
        database.async_session() as session_a,
        database.async_session() as session_b,
    ):
        repo_a, repo_b = ProjectRepository(session_a), ProjectRepository(session_b)
        copy_a = await repo_a.get(project.id)
        copy_b = await repo_b.get(project.id)

        winner = add_application(copy_a)
        assert await repo_a.save(copy_a) is True

        loser = add_application(copy_b)
        assert await repo_b.save(copy_b) is False
        assert copy_b.version == 0

        current = await repo_b.get(project.id)
        assert current.version == 1
        assert [a.id for a in current.applications] == [winner.id]
        assert loser.id not in {a.id for a in current.applications}


async def test_delete_is_version_guarded(database):
    project = make_project()
    async with database.async_session() as setup:
        await ProjectRepository(setup).add(project)

    async with (
        database.async_session() as session_a,
        database.async_session() as session_b,
    ):
        repo_a, repo_b = ProjectRepository(session_a), ProjectRepository(session_b)
        stale = await repo_b.get(project.id)

        current = await repo_a.get(project.id)
        current.title = "Renamed"
        assert await repo_a.save(current)

        assert await repo_b.delete(stale) is False
        fresh = await repo_b.get(project.id)
        assert await repo_b.delete(fresh) is True
        assert await repo_b.get(project.id) is None


# =============================================================================
# Project listings
# =============================================================================


@pytest.fixture
async def catalogue(session):
    """Five projects with distinct budgets, skills, text and creation times."""
    base = datetime(2030, 1, 1, tzinfo=UTC)
    client_id = new_id()
    projects = [
        make_project(
            title="React dashboard",
            skills=["react", "node"],
            budget_min=Decimal("500"),
            budget_max=Decimal("1500"),
            created_at=base,
            client_id=client_id,
        ),
        make_project(
            title="Python ETL",
            description="Nightly loads, 100% remote",
            skills=["python", "sql"],
            budget_min=Decimal("2000"),
            budget_max=Decimal("4000"),
            created_at=base + timedelta(hours=1),
        ),
        make_project(
            title="Landing page",
            skills=["html"],
            budget_min=Decimal("100"),
            budget_max=Decimal("300"),
            created_at=base + timedelta(hours=2),
            client_id=client_id,
        ),
        make_project(
            title="Mobile app",
            description="1000 screens, remote",
            skills=["react-native"],
            budget_min=Decimal("5000"),
            budget_max=Decimal("9000"),
            created_at=base + timedelta(hours=3),
        ),
        make_project(
            title="Old React widget",
            skills=["react"],
            budget_min=Decimal("200"),
            budget_max=Decimal("400"),
            created_at=base + timedelta(hours=4),
            status=ProjectStatus.CANCELLED,
        ),
    ]
    repo = ProjectRepository(session)
    for project in projects:
        await repo.add(project)
    return repo, projects, client_id


async def _titles(repo, filters, sort=None, page=None):
    result = await repo.list_projects(
        filters, sort or ProjectSort(), page or PageRequest(limit=50)
    )
    return [p.title for p in result.items]


async def test_status_filter(catalogue):
    repo, _, _ = catalogue

    titles = await _titles(repo, ProjectFilter(status=ProjectStatus.OPEN))

    assert titles == ["Mobile app", "Landing page", "Python ETL", "React dashboard"]


async def test_skills_match_any_exact_skill(catalogue):
    repo, _, _ = catalogue

    titles = await _titles(
        repo, ProjectFilter(status=ProjectStatus.OPEN, skills=("react", "sql"))
    )

    assert titles == ["Python ETL", "React dashboard"]


async def test_budget_filter_matches_overlapping_ranges(catalogue):
    repo, _, _ = catalogue

    titles = await _titles(
        repo,
        ProjectFilter(
            status=ProjectStatus.OPEN,
            budget_min=Decimal("1000"),
            budget_max=Decimal("2500"),
        ),
    )

    assert titles == ["Python ETL", "React dashboard"]


async def test_budget_lower_bound_only(catalogue):
    repo, _, _ = catalogue

    titles = await _titles(
        repo, ProjectFilter(status=ProjectStatus.OPEN, budget_min=Decimal("4000"))
    )

    assert titles == ["Mobile app", "Python ETL"]


async def test_search_is_case_insensitive_over_title_and_description(catalogue):
    repo, _, _ = catalogue

    assert await _titles(repo, ProjectFilter(search="REACT")) == [
        "Old React widget",
        "React dashboard",
    ]
    assert await _titles(repo, ProjectFilter(search="remote")) == [
        "Mobile app",
        "Python ETL",
    ]


async def test_search_wildcards_are_literal(catalogue):
    repo, _, _ = catalogue

    assert await _titles(repo, ProjectFilter(search="100%")) == ["Python ETL"]
    assert await _titles(repo, ProjectFilter(search="_")) == []


async def test_client_filter_covers_every_status(catalogue):
    repo, _, client_id = catalogue

    titles = await _titles(repo, ProjectFilter(client_id=client_id))

    assert titles == ["Landing page", "React dashboard"]


async def test_sort_by_budget_ascending(catalogue):
    repo, _, _ = catalogue

    titles = await _titles(
        repo,
        ProjectFilter(status=ProjectStatus.OPEN),
        ProjectSort(field=ProjectSortField.BUDGET_MIN, direction=SortDirection.ASC),
    )

    assert titles == ["Landing page", "React dashboard", "Python ETL", "Mobile app"]


async def test_pagination_reports_total(catalogue):
    repo, _, _ = catalogue

    page = await repo.list_projects(
        ProjectFilter(status=ProjectStatus.OPEN),
        ProjectSort(),
        PageRequest(page=2, limit=3),
    )

    assert page.total == 4
    assert page.pages == 2
    assert [p.title for p in page.items] == ["React dashboard"]


# =============================================================================
# Freelancer views
# =============================================================================


async def test_freelancer_applications_newest_first_with_projects(session):
    repo = ProjectRepository(session)
    freelancer_id = new_id()
    base = datetime(2030, 1, 1, tzinfo=UTC)
    older, newer, foreign = make_project(), make_project(), make_project()
    add_application(older, freelancer_id, applied_at=base)
    add_application(newer, freelancer_id, applied_at=base + timedelta(days=1))
    add_application(foreign, applied_at=base + timedelta(days=2))
    rejected = add_application(newer, applied_at=base)
    newer.decide_application(
        application_id=rejected.id,
        decision=ApplicationStatus.REJECTED,
        caller_id=newer.client_id,
    )
    for project in (older, newer, foreign):
        await repo.add(project)

    page = await repo.list_freelancer_applications(
        freelancer_id, ApplicationFilter(), PageRequest()
    )

    assert page.total == 2
    assert [entry.project.id for entry in page.items] == [newer.id, older.id]
    assert all(e.application.freelancer_id == freelancer_id for e in page.items)
    assert page.items[0].project.required_skills == newer.required_skills


async def test_freelancer_applications_status_filter(session):
    repo = ProjectRepository(session)
    freelancer_id = new_id()
    kept, dropped = make_project(), make_project()
    add_application(kept, freelancer_id)
    application = add_application(dropped, freelancer_id)
    dropped.decide_application(
        application_id=application.id,
        decision=ApplicationStatus.REJECTED,
        caller_id=dropped.client_id,
    )
    await repo.add(kept)
    await repo.add(dropped)

    page = await repo.list_freelancer_applications(
        freelancer_id,
        ApplicationFilter(status=ApplicationStatus.REJECTED),
        PageRequest(),
    )

    assert [entry.project.id for entry in page.items] == [dropped.id]


async def test_application_updates_since(session):
    repo = ProjectRepository(session)
    freelancer_id = new_id()
    base = datetime(2030, 1, 1, tzinfo=UTC)
    old, recent = make_project(), make_project()
    add_application(old, freelancer_id, applied_at=base - timedelta(days=3))
    add_application(recent, freelancer_id, applied_at=base + timedelta(hours=1))
    await repo.add(old)
    await repo.add(recent)

    entries = await repo.list_application_updates(freelancer_id, base)

    assert [entry.project.id for entry in entries] == [recent.id]
    assert entries[0].application.applied_at == base + timedelta(hours=1)
