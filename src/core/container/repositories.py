"""Per-request repositories, all sharing the request's session (and so its transaction)."""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import (
        MemberRepository,
        ProjectRepository,
    )


async def get_project_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "ProjectRepository":
    from src.infrastructure.persistence.repositories import ProjectRepository

    return ProjectRepository(session=session)


async def get_member_directory(
    session: AsyncSession = Depends(get_db_session),
) -> "MemberRepository":
    """Read-only member lookups backing the applicant and client summaries."""
    from src.infrastructure.persistence.repositories import MemberRepository

    return MemberRepository(session=session)
