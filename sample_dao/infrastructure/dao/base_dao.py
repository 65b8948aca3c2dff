"""Generic DAO base that exposes transfer objects instead of ORM entities."""

from abc import abstractmethod
from typing import Generic, List, Optional, TypeVar

from sample_dao.infrastructure.dao.dao_support import DAOSupport, E

# Primary key used to look the entity up
PK = TypeVar("PK")
# Transfer object exposed to callers; mirrors E without ORM mapping
TO = TypeVar("TO")


class BaseDAO(DAOSupport[E], Generic[E, PK, TO]):
    """
    Base class providing CRUD operations in terms of transfer objects.

    Subclasses bind the three type parameters and implement the
    conversions; every public method goes through them, so ORM entities
    never leave the DAO:

        class PersonDAO(BaseDAO[PersonEntity, int, Person]):
            def extract_primary_key(self, entity): ...
            def disassemble(self, transfer_object): ...
            def assemble(self, entity): ...

    Type Parameters:
        E: The SQLAlchemy mapped entity class
        PK: The primary key type
        TO: The transfer object type exposed through the DAO interface
    """

    @abstractmethod
    def disassemble(self, transfer_object: Optional[TO]) -> Optional[E]:
        """Convert a transfer object to a new (detached) entity. None maps to None."""
        pass

    @abstractmethod
    def assemble(self, entity: Optional[E]) -> Optional[TO]:
        """Convert an entity to a transfer object. None maps to None."""
        pass

    async def find_by_id(self, id: PK) -> Optional[TO]:
        """Get a transfer object by primary key, None if there is no such row."""
        return self.assemble(await self._get(id))

    async def save(self, transfer_object: TO) -> PK:
        """
        Persist a new record built from the transfer object.

        Returns:
            The primary key the database generated

        Raises:
            InvalidEntityStateException: If the transfer object is None
        """
        return await self._persist(self.disassemble(transfer_object))

    async def update(self, transfer_object: TO) -> TO:
        """
        Merge the transfer object's state into the stored record.

        An identifier that is not stored yet is inserted, as ORM merge does.

        Returns:
            The stored state after the merge

        Raises:
            InvalidEntityStateException: If the transfer object has no identifier
        """
        merged = await self._merge(self.disassemble(transfer_object))
        return self.assemble(merged)  # type: ignore[return-value]

    async def delete(self, id: PK) -> bool:
        """Delete by primary key. Unknown keys are ignored and return False."""
        return await self._remove(id)

    async def find_all(self, number: int = -1) -> List[TO]:
        """
        Get all records as transfer objects, ordered by primary key.

        Args:
            number: Maximum number of records; zero or negative means no limit
        """
        return [self.assemble(entity) for entity in await self._select_all(number)]  # type: ignore[misc]

    async def count(self) -> int:
        """Count stored records."""
        return await self._count()

    async def exists(self, id: PK) -> bool:
        """Check if a record with this primary key is stored."""
        return await self._get(id) is not None
