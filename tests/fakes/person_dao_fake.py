"""Fake Person DAO for testing without a database.

Stores copies of Person objects in a dict keyed by identifier, so
callers cannot mutate stored state by accident (like a real session
round-trip).
"""

from dataclasses import replace

from sample_dao.domain.entities.person import Person
from sample_dao.domain.exceptions import InvalidEntityStateException
from sample_dao.domain.repositories.person_dao import IPersonDAO


class FakePersonDAO(IPersonDAO):
    """
    In-memory fake implementation of IPersonDAO.

    Usage:
        dao = FakePersonDAO()
        person_id = await dao.save(Person(first_name="Test", last_name="TheTester"))
    """

    def __init__(self, initial_data: list[Person] | None = None):
        """
        Initialize with empty in-memory storage.

        Args:
            initial_data: Optional list of persons to pre-populate the DAO
        """
        self._people: dict[int, Person] = {}
        self._next_id = 1

        for person in initial_data or []:
            if person.identifier is None:
                self._people[self._next_id] = replace(person, identifier=self._next_id)
                self._next_id += 1
            else:
                self._people[person.identifier] = replace(person)
                self._next_id = max(self._next_id, person.identifier + 1)

    async def find_by_id(self, id: int) -> Person | None:
        person = self._people.get(id)
        return replace(person) if person is not None else None

    async def save(self, transfer_object: Person) -> int:
        identifier = self._next_id
        self._next_id += 1
        self._people[identifier] = replace(transfer_object, identifier=identifier)
        return identifier

    async def update(self, transfer_object: Person) -> Person:
        if transfer_object.identifier is None:
            raise InvalidEntityStateException("Cannot update person without an identifier")

        self._people[transfer_object.identifier] = replace(transfer_object)
        self._next_id = max(self._next_id, transfer_object.identifier + 1)
        return replace(transfer_object)

    async def delete(self, id: int) -> bool:
        return self._people.pop(id, None) is not None

    async def find_all(self, number: int = -1) -> list[Person]:
        people = [replace(self._people[key]) for key in sorted(self._people)]
        return people[:number] if number > 0 else people

    async def count(self) -> int:
        return len(self._people)

    async def exists(self, id: int) -> bool:
        return id in self._people

    async def find_by_last_name(self, last_name: str) -> list[Person]:
        matches = [p for p in self._people.values() if p.last_name == last_name]
        return [replace(p) for p in sorted(matches, key=lambda p: (p.first_name, p.identifier))]

