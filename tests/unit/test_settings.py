"""Unit tests for Settings and engine construction.

No database connection is required.
"""

import pytest
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from sample_dao.infrastructure.config.settings import Settings, get_settings
from sample_dao.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)

pytestmark = pytest.mark.unit


def test_default_url_uses_asyncpg():
    settings = Settings()

    assert settings.database_url.startswith("postgresql+asyncpg://")
    assert not settings.is_sqlite


def test_url_built_from_env(monkeypatch):
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_NAME", "people")

    assert Settings().database_url.endswith("@db.internal:5432/people")


def test_url_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

    settings = Settings()

    assert settings.database_url == "sqlite+aiosqlite:///:memory:"
    assert settings.is_sqlite


def test_log_level_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(log_level="chatty")


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()


@pytest.mark.asyncio
async def test_sqlite_engine_and_session_factory():
    engine = create_database_engine(
        Settings(database_url_override="sqlite+aiosqlite:///:memory:")
    )

    try:
        factory = create_session_factory(engine)

        assert isinstance(engine, AsyncEngine)
        assert isinstance(factory, async_sessionmaker)
        assert factory.class_ is AsyncSession
    finally:
        await engine.dispose()
