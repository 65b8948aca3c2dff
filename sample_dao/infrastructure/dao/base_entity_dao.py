"""Generic DAO base that hands out ORM entities directly.

This is the shortcut variant: it saves writing assemble/disassemble,
but callers become coupled to the SQLAlchemy mapping. Prefer BaseDAO
for anything exposed outside the infrastructure layer.
"""

from typing import Generic, List, Optional, TypeVar

from sample_dao.infrastructure.dao.dao_support import DAOSupport, E

PK = TypeVar("PK")


class BaseEntityDAO(DAOSupport[E], Generic[E, PK]):
    """
    Base class providing CRUD operations on mapped entities.

    Type Parameters:
        E: The SQLAlchemy mapped entity class
        PK: The primary key type
    """

    async def find_by_id(self, id: PK) -> Optional[E]:
        return await self._get(id)

    async def save(self, entity: E) -> PK:
        return await self._persist(entity)

    async def update(self, entity: E) -> bool:
        """Merge the entity; True when the session produced a persistent instance."""
        # merge() returns the session-bound copy
        return await self._merge(entity) is not None

    async def delete(self, id: PK) -> bool:
        return await self._remove(id)

    async def find_all(self, number: int = -1) -> List[E]:
        return await self._select_all(number)

    async def count(self) -> int:
        return await self._count()
