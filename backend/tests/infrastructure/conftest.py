"""Infrastructure test fixtures — in-memory SQLite behind a DatabaseSessionManager.

Invariants:
    - Every test gets a fresh in-memory SQLite database with all tables
    - manager bypasses __init__ so no pool arguments reach SQLite
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from notifier.db.base import Base
from notifier.infrastructure.database import DatabaseSessionManager
import notifier.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def manager(test_engine):
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )
    return fake_manager
