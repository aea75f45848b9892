"""MemberRepository - SQLAlchemy implementation of the MemberDirectory port.

Read-only: member profiles are written by the identity subsystem.
"""

from collections.abc import Iterable
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import MemberProfile
from src.domain.enums import MemberRole
from src.infrastructure.persistence.models.member import Member as MemberModel


class MemberRepository:
    """SQLAlchemy implementation of MemberDirectory protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_member(self, member_id: UUID) -> MemberProfile | None:
        stmt = select(MemberModel).where(MemberModel.id == member_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def get_members(self, member_ids: Iterable[UUID]) -> dict[UUID, MemberProfile]:
        """Find several members in one query.

        Args:
            member_ids: IDs to look up (duplicates allowed).

        Returns:
            Mapping of found IDs to profiles; unknown IDs are absent.
        """
        ids = set(member_ids)
        if not ids:
            return {}

        stmt = select(MemberModel).where(MemberModel.id.in_(ids))
        result = await self.session.execute(stmt)
        return {model.id: self._to_domain(model) for model in result.scalars().all()}

    @staticmethod
    def _to_domain(model: MemberModel) -> MemberProfile:
        return MemberProfile(
            id=model.id,
            role=MemberRole(model.role),
            display_name=model.display_name,
            company_name=model.company_name,
            skills=list(model.skills or []),
            hourly_rate=Decimal(model.hourly_rate) if model.hourly_rate is not None else None,
        )
