"""Session handling and entity-class discovery shared by both DAO bases."""

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, TypeVar

from sqlalchemy import func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from sample_dao.domain.exceptions import InvalidEntityStateException
from sample_dao.infrastructure.dao.generics import (
    DAOConfigurationError,
    resolve_type_argument,
)

logger = logging.getLogger(__name__)

# Mapped SQLAlchemy entity class
E = TypeVar("E")


class DAOSupport(ABC, Generic[E]):
    """
    Common plumbing for SQLAlchemy-backed DAOs.

    The mapped entity class is read from the subclass declaration when
    the class is created, so concrete DAOs never pass it explicitly.
    All statements run on the AsyncSession given at construction; the
    session owner (UnitOfWork) decides when to commit.
    """

    _entity_class: ClassVar[Optional[type]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls._entity_class = resolve_type_argument(cls, DAOSupport, 0)

    def __init__(self, session: AsyncSession):
        """
        Initialize DAO with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)

        Raises:
            DAOConfigurationError: If the class never bound a concrete entity type
        """
        if self._entity_class is None:
            raise DAOConfigurationError(
                f"{type(self).__name__} does not declare a concrete entity type; "
                "subclass it with the entity class as the first type argument"
            )
        self._session = session

    @classmethod
    def get_entity_class(cls) -> Optional[type]:
        """The mapped class this DAO persists, or None for generic intermediates."""
        return cls._entity_class

    @property
    def entity_class(self) -> type:
        """The mapped class this DAO persists."""
        return self._entity_class  # type: ignore[return-value]

    @property
    def session(self) -> AsyncSession:
        return self._session

    def set_session(self, session: AsyncSession) -> None:
        """Rebind the DAO to another session (e.g. a new unit of work)."""
        self._session = session

    @abstractmethod
    def extract_primary_key(self, entity: E) -> Any:
        """
        Read the primary key from a mapped entity.

        Args:
            entity: The persistent entity

        Returns:
            The identifier, typically an int
        """
        pass

    # Statement helpers used by the public CRUD operations

    async def _get(self, id: Any) -> Optional[E]:
        return await self._session.get(self.entity_class, id)

    async def _persist(self, entity: Optional[E]) -> Any:
        if entity is None:
            raise InvalidEntityStateException(
                f"Cannot save an empty {self.entity_class.__name__}"
            )

        self._session.add(entity)
        await self._session.flush()  # Get generated ID without committing

        primary_key = self.extract_primary_key(entity)
        logger.debug("Saved %s with key %r", self.entity_class.__name__, primary_key)
        return primary_key

    async def _merge(self, entity: Optional[E]) -> E:
        if entity is None or self.extract_primary_key(entity) is None:
            raise InvalidEntityStateException(
                f"Cannot update {self.entity_class.__name__} without an identifier"
            )

        merged = await self._session.merge(entity)
        await self._session.flush()

        logger.debug(
            "Merged %s with key %r",
            self.entity_class.__name__,
            self.extract_primary_key(merged),
        )
        return merged

    async def _remove(self, id: Any) -> bool:
        entity = await self._get(id)
        if entity is None:
            return False

        await self._session.delete(entity)
        await self._session.flush()

        logger.debug("Deleted %s with key %r", self.entity_class.__name__, id)
        return True

    async def _select_all(self, number: int = -1) -> list[E]:
        stmt = select(self.entity_class).order_by(
            *inspect(self.entity_class).primary_key
        )
        if number > 0:
            stmt = stmt.limit(number)

        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def _count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(self.entity_class)
        )
        return result.scalar_one()
