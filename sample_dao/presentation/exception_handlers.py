"""Exception handlers for converting exceptions to HTTP responses.

Application and domain exceptions carry an error_code; the HTTP status
comes from ERROR_CODE_TO_HTTP_STATUS, so new exceptions need no new
handler.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from sample_dao.application.exceptions import ApplicationError
from sample_dao.domain.exceptions import DomainException
from sample_dao.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _error_response(message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=get_http_status_for_error_code(error_code),
        content={"detail": message, "error_code": error_code},
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Handle ALL application layer exceptions."""
    return _error_response(exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle ALL domain layer exceptions."""
    return _error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors from request data.

    Returns every failing field as {"field": "body.first_name", "message": ...}.
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors without exposing internal details."""
    logger.error("Database error: %s", exc, exc_info=True)

    return _error_response("An internal database error occurred", "DATABASE_ERROR")


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for unexpected errors."""
    logger.error("Unhandled error: %s", exc, exc_info=True)

    return _error_response("An internal server error occurred", "INTERNAL_SERVER_ERROR")
