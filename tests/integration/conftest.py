"""Integration test fixtures.

Real DAOs and the FastAPI app against an in-memory SQLite database.
"""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from sample_dao.infrastructure.persistence.database import (
    Base,
    create_schema,
    create_session_factory,
)
from sample_dao.main import app
from sample_dao.presentation.dependencies import get_session_factory

# Test database URL (SQLite in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine]:
    """Create a test database engine with the schema in place."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False)

    await create_schema(engine)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a test session factory."""
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession]:
    """Create a test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def client(test_session_factory) -> Generator[TestClient]:
    """
    FastAPI test client with the session factory pointed at the test database.
    """

    def override_get_session_factory():
        return test_session_factory

    app.dependency_overrides[get_session_factory] = override_get_session_factory

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
