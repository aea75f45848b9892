"""Integration tests for MemberRepository against SQLite.

Reference:
    - src/infrastructure/persistence/repositories/member_repository.py
"""

from decimal import Decimal

import pytest

from src.domain.enums import MemberRole
from src.infrastructure.persistence.models import Member as MemberModel
from src.infrastructure.persistence.repositories import MemberRepository
from tests.factories import new_id


@pytest.fixture
async def members(session):
    client = MemberModel(
        id=new_id(),
        role=MemberRole.CLIENT.value,
        display_name="Acme Buyer",
        company_name="Acme",
        skills=[],
    )
    freelancer = MemberModel(
        id=new_id(),
        role=MemberRole.FREELANCER.value,
        display_name="Dana Dev",
        skills=["react", "node"],
        hourly_rate=Decimal("55.50"),
    )
    session.add_all([client, freelancer])
    await session.commit()
    return client, freelancer


async def test_get_member_maps_profile(session, members):
    _, freelancer = members

    profile = await MemberRepository(session).get_member(freelancer.id)

    assert profile is not None
    assert profile.role is MemberRole.FREELANCER
    assert profile.display_name == "Dana Dev"
    assert profile.skills == ["react", "node"]
    assert profile.hourly_rate == Decimal("55.50")
    assert profile.company_name is None


async def test_get_member_unknown_returns_none(session, members):
    assert await MemberRepository(session).get_member(new_id()) is None


async def test_get_members_returns_found_ids_only(session, members):
    client, freelancer = members
    unknown = new_id()

    found = await MemberRepository(session).get_members(
        [client.id, freelancer.id, freelancer.id, unknown]
    )

    assert set(found) == {client.id, freelancer.id}
    assert found[client.id].company_name == "Acme"
    assert found[client.id].hourly_rate is None


async def test_get_members_empty_input(session):
    assert await MemberRepository(session).get_members([]) == {}
