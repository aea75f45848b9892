"""Async engine and session factory.

PostgreSQL through asyncpg in deployments, SQLite through aiosqlite for
local runs and the test suite. Repositories never open sessions
themselves; they get one from `Database.get_session()` via the container.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy import event, text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.infrastructure.persistence import models  # noqa: F401
from src.infrastructure.persistence.base import BaseModel

_POSTGRES_OPTIONS: dict[str, Any] = {
    "connect_args": {
        "server_settings": {"jit": "off"},
        "command_timeout": 60,
        "timeout": 30,
    },
}

_SQLITE_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA foreign_keys=ON",
    # writers queue here; the project version check picks the winner
    "PRAGMA busy_timeout=5000",
)


class Database:
    """Owns the engine; hands out transactional sessions.

        db = Database("sqlite+aiosqlite:///gigboard.db")
        async with db.get_session() as session:
            ...
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 20,
        max_overflow: int = 0,
    ) -> None:
        options: dict[str, Any] = {}
        if database_url.startswith("postgresql"):
            options = {
                **_POSTGRES_OPTIONS,
                "pool_size": pool_size,
                "max_overflow": max_overflow,
            }

        self.engine: AsyncEngine = create_async_engine(
            database_url, echo=echo, pool_pre_ping=True, **options
        )
        if self.engine.dialect.name == "sqlite":
            event.listen(self.engine.sync_engine, "connect", _apply_sqlite_pragmas)

        self.async_session = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self.async_session() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise
            else:
                await session.commit()

    async def create_all(self) -> None:
        """Create every table directly; local runs and tests only."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def drop_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    async def check_connection(self) -> bool:
        """Round-trip `SELECT 1`; used by /health."""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception:
            return False
        return True


def _apply_sqlite_pragmas(dbapi_conn: Any, connection_record: Any) -> None:
    cursor = dbapi_conn.cursor()
    for pragma in _SQLITE_PRAGMAS:
        cursor.execute(pragma)
    cursor.close()
