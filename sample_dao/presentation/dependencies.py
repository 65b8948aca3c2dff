"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT: the only place that picks concrete
implementations (SQLAlchemy UnitOfWork, settings from environment) and
hands them to the application layer as abstractions.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from sample_dao.application.services.person_service import PersonService
from sample_dao.domain.repositories.unit_of_work import IUnitOfWork
from sample_dao.infrastructure.config.settings import Settings, get_settings
from sample_dao.infrastructure.dao.unit_of_work_impl import UnitOfWork
from sample_dao.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton."""
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


async def dispose_engine() -> None:
    """Release pooled connections and forget the singletons."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def get_person_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> PersonService:
    """
    Dependency that provides PersonService.

    Dependency chain:
        get_settings() → get_database_engine() → get_session_factory() → get_person_service()

    In tests, override get_session_factory to point at a test database:

        app.dependency_overrides[get_session_factory] = lambda: test_session_factory
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return PersonService(uow_factory=uow_factory)
