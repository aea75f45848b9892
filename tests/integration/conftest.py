"""Fixtures for integration tests.

Each test gets its own SQLite database file (WAL mode needs a file) with
the schema created from the models.
"""

import pytest_asyncio

from src.infrastructure.persistence.database import Database


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'gigboard.db'}")
    await database.create_all()
    yield database
    await database.close()


@pytest_asyncio.fixture
async def session(database):
    async with database.async_session() as session:
        yield session
