"""Application layer exceptions."""

from sample_dao.application.exceptions.exceptions import (
    ApplicationError,
    PersonNotFoundError,
)

__all__ = ["ApplicationError", "PersonNotFoundError"]
