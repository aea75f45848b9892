"""Unit tests for Principal resolution and role guards.

Reference:
    - src/domain/value_objects/principal.py
"""

import pytest

from src.core.errors import AuthorizationError
from src.core.result import Failure, Success
from src.domain.enums import MemberRole
from src.domain.value_objects import (
    AdminPrincipal,
    ClientPrincipal,
    FreelancerPrincipal,
    MentorPrincipal,
    principal_for,
    require_client,
    require_freelancer,
)
from tests.factories import new_id


@pytest.mark.parametrize(
    ("role", "variant"),
    [
        (MemberRole.CLIENT, ClientPrincipal),
        (MemberRole.FREELANCER, FreelancerPrincipal),
        (MemberRole.MENTOR, MentorPrincipal),
        (MemberRole.ADMIN, AdminPrincipal),
    ],
)
def test_principal_for_maps_every_role(role, variant):
    member_id = new_id()

    principal = principal_for(member_id, role)

    assert isinstance(principal, variant)
    assert principal.member_id == member_id


def test_require_client():
    member_id = new_id()

    assert require_client(ClientPrincipal(member_id=member_id)) == Success(
        value=member_id
    )
    denied = require_client(FreelancerPrincipal(member_id=member_id))
    assert isinstance(denied, Failure)
    assert isinstance(denied.error, AuthorizationError)


def test_require_freelancer_uses_given_message():
    denied = require_freelancer(AdminPrincipal(member_id=new_id()), "nope")

    assert isinstance(denied, Failure)
    assert denied.error.message == "nope"
