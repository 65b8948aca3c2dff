"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sample_dao.domain.repositories.person_dao import IPersonDAO


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    Every DAO exposed here shares one transaction. Leaving the context
    with an exception rolls back; writes become durable only on commit().
    """

    people: "IPersonDAO"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """Enter async context manager and start the session."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        If exc_type is not None, rollback. The session is released either way.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """Commit the current transaction."""
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the current transaction."""
        pass
