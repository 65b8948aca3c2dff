"""Base DAO interface shared by every data access object."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, List, TypeVar

# Transfer object handed to and returned from the DAO
TO = TypeVar("TO")
# Primary key type used to look the record up
PK = TypeVar("PK")


class IDAO(ABC, Generic[TO, PK]):
    """
    Base DAO interface defining standard CRUD operations.

    This interface belongs to the DOMAIN layer. Implementations decide
    how transfer objects are persisted; callers only ever see TO.

    Type Parameters:
        TO: The transfer object type exposed to callers
        PK: The primary key type
    """

    @abstractmethod
    async def find_by_id(self, id: PK) -> Optional[TO]:
        """
        Retrieve a record by its primary key.

        Args:
            id: The primary key

        Returns:
            The transfer object if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, transfer_object: TO) -> PK:
        """
        Persist a new record.

        Args:
            transfer_object: The data to store

        Returns:
            The primary key generated for the new record
        """
        pass

    @abstractmethod
    async def update(self, transfer_object: TO) -> TO:
        """
        Write the state of an existing record.

        Args:
            transfer_object: The data to store; must carry its primary key

        Returns:
            The stored state after the update
        """
        pass

    @abstractmethod
    async def delete(self, id: PK) -> bool:
        """
        Delete a record by primary key.

        Args:
            id: The primary key

        Returns:
            True if deleted, False if not found
        """
        pass

    @abstractmethod
    async def find_all(self, number: int = -1) -> List[TO]:
        """
        Retrieve all records.

        Args:
            number: Maximum number of records; zero or negative means no limit

        Returns:
            List of transfer objects
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored records."""
        pass

    @abstractmethod
    async def exists(self, id: PK) -> bool:
        """
        Check if a record exists.

        Args:
            id: The primary key

        Returns:
            True if exists, False otherwise
        """
        pass
