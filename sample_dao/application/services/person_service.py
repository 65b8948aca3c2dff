"""Person service - application layer use cases over the Person DAO."""

import logging
from collections.abc import Callable
from typing import Optional

from sample_dao.application.dtos.person_dto import (
    CreatePersonDTO,
    PersonDTO,
    UpdatePersonDTO,
)
from sample_dao.application.exceptions import PersonNotFoundError
from sample_dao.domain.repositories.unit_of_work import IUnitOfWork

logger = logging.getLogger(__name__)


class PersonService:
    """
    Person service encapsulating person-related use cases.

    Each public method runs inside its own unit of work: reads simply
    close it, writes commit before returning. The service talks to
    IPersonDAO through the unit of work and hands PersonDTOs back.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances

        Example:
            # Production
            service = PersonService(uow_factory=lambda: UnitOfWork(session_factory))

            # Testing
            service = PersonService(uow_factory=lambda: FakeUnitOfWork())
        """
        self._uow_factory = uow_factory

    async def create_person(self, dto: CreatePersonDTO) -> PersonDTO:
        """
        Create a new person.

        Args:
            dto: Person creation data

        Returns:
            Created person DTO carrying the generated identifier
        """
        async with self._uow_factory() as uow:
            person = dto.to_person()

            identifier = await uow.people.save(person)
            await uow.commit()

            logger.info("Created person %s", identifier)

            person.identifier = identifier
            return PersonDTO.from_person(person)

    async def get_person(self, person_id: int) -> PersonDTO:
        """
        Retrieve person by identifier.

        Raises:
            PersonNotFoundError: If the person doesn't exist
        """
        async with self._uow_factory() as uow:
            person = await uow.people.find_by_id(person_id)

            if person is None:
                raise PersonNotFoundError(f"Person with ID {person_id} not found")

            return PersonDTO.from_person(person)

    async def list_people(self, limit: Optional[int] = None) -> list[PersonDTO]:
        """
        List persons ordered by identifier.

        Args:
            limit: Maximum number to return; None returns everyone

        Returns:
            List of person DTOs
        """
        async with self._uow_factory() as uow:
            people = await uow.people.find_all(limit if limit is not None else -1)
            return [PersonDTO.from_person(person) for person in people]

    async def find_by_last_name(self, last_name: str) -> list[PersonDTO]:
        """List persons with exactly this last name."""
        async with self._uow_factory() as uow:
            people = await uow.people.find_by_last_name(last_name)
            return [PersonDTO.from_person(person) for person in people]

    async def update_person(self, person_id: int, dto: UpdatePersonDTO) -> PersonDTO:
        """
        Update person information.

        Only fields present in the request are changed.

        Raises:
            PersonNotFoundError: If the person doesn't exist
            BusinessRuleViolationException: If a change breaks a person invariant
        """
        async with self._uow_factory() as uow:
            person = await uow.people.find_by_id(person_id)
            if person is None:
                raise PersonNotFoundError(f"Person with ID {person_id} not found")

            changed = dto.model_fields_set

            if "first_name" in changed or "last_name" in changed:
                person.rename(first_name=dto.first_name, last_name=dto.last_name)

            if "middle_initial" in changed:
                person.change_middle_initial(dto.middle_initial)

            if "date_of_birth" in changed:
                person.change_date_of_birth(dto.date_of_birth)

            updated = await uow.people.update(person)
            await uow.commit()

            logger.info("Updated person %s", person_id)

            return PersonDTO.from_person(updated)

    async def delete_person(self, person_id: int) -> None:
        """
        Delete a person.

        Raises:
            PersonNotFoundError: If the person doesn't exist
        """
        async with self._uow_factory() as uow:
            deleted = await uow.people.delete(person_id)

            if not deleted:
                raise PersonNotFoundError(f"Person with ID {person_id} not found")

            await uow.commit()

            logger.info("Deleted person %s", person_id)

    async def count_people(self) -> int:
        """Return the number of stored persons."""
        async with self._uow_factory() as uow:
            return await uow.people.count()
