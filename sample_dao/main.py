"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from sqlalchemy.exc import SQLAlchemyError

from sample_dao.application.exceptions import ApplicationError
from sample_dao.domain.exceptions import DomainException
from sample_dao.infrastructure.config.logging_config import configure_logging
from sample_dao.infrastructure.config.settings import get_settings
from sample_dao.infrastructure.persistence.database import create_schema
from sample_dao.presentation.api.v1 import people
from sample_dao.presentation.dependencies import dispose_engine, get_database_engine
from sample_dao.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)

logger = logging.getLogger(__name__)

_settings = get_settings()
configure_logging(_settings)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    if _settings.db_create_schema:
        logger.info("Creating database schema")
        await create_schema(get_database_engine(_settings))

    yield

    await dispose_engine()


app = FastAPI(
    title=_settings.app_name,
    description="Generic DAO sample: CRUD over Person via an assemble/disassemble DAO base",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(people.router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }
