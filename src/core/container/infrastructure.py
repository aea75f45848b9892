"""Process-wide infrastructure: database, token verifier and logger.

Each factory is cached, so the whole app shares one engine pool, one
JWTService and one logger. `get_db_session` is the only per-request
dependency here; routes receive it through `Depends`.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import get_settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.infrastructure.security import JWTService


@lru_cache()
def get_database() -> Database:
    settings = get_settings()
    return Database(settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_token_service() -> "JWTService":
    """Verifier for bearer tokens minted by the identity service."""
    from src.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(secret_key=settings.secret_key, algorithm=settings.algorithm)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Structured logger; JSON lines under testing and ci, coloured otherwise."""
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=settings.is_testing or settings.is_ci,
        level=settings.log_level,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One transaction per request: commit on return, roll back on error."""
    async with get_database().get_session() as session:
        yield session
