"""Person DAO interface."""

from abc import abstractmethod

from sample_dao.domain.entities.person import Person
from sample_dao.domain.repositories.base import IDAO


class IPersonDAO(IDAO[Person, int]):
    """
    Person-specific DAO interface.

    Extends the base DAO with person lookups the application needs.
    """

    @abstractmethod
    async def find_by_last_name(self, last_name: str) -> list[Person]:
        """
        Find every person sharing a last name.

        Args:
            last_name: Exact last name to match

        Returns:
            Matching persons ordered by first name (empty if none)
        """
        pass
