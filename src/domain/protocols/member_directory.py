"""MemberDirectory protocol: read-only view of member profiles.

Profiles are owned by the identity subsystem. The marketplace only reads
display names and declared skills.
"""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from src.domain.entities import MemberProfile


class MemberDirectory(Protocol):
    """Member lookup port."""

    async def get_member(self, member_id: UUID) -> MemberProfile | None:
        """Find one member.

        Returns:
            MemberProfile if known, None otherwise.
        """
        ...

    async def get_members(self, member_ids: Iterable[UUID]) -> dict[UUID, MemberProfile]:
        """Find several members at once.

        Unknown IDs are absent from the returned mapping.
        """
        ...
