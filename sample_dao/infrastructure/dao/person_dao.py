"""Person DAO implementations using SQLAlchemy."""

from typing import Optional

from sqlalchemy import select

from sample_dao.domain.entities.person import Person
from sample_dao.domain.repositories.person_dao import IPersonDAO
from sample_dao.infrastructure.dao.base_dao import BaseDAO
from sample_dao.infrastructure.dao.base_entity_dao import BaseEntityDAO
from sample_dao.infrastructure.persistence.models.person_model import PersonEntity


class PersonDAO(BaseDAO[PersonEntity, int, Person], IPersonDAO):
    """
    SQLAlchemy implementation of IPersonDAO.

    CRUD comes from BaseDAO; this class only supplies the conversions
    between PersonEntity (ORM mapping) and Person (transfer object) plus
    the person-specific queries.
    """

    def extract_primary_key(self, entity: PersonEntity) -> int:
        return entity.identifier

    def disassemble(self, transfer_object: Optional[Person]) -> Optional[PersonEntity]:
        if transfer_object is None:
            return None

        return PersonEntity(
            identifier=transfer_object.identifier,
            first_name=transfer_object.first_name,
            last_name=transfer_object.last_name,
            middle_initial=transfer_object.middle_initial,
            date_of_birth=transfer_object.date_of_birth,
        )

    def assemble(self, entity: Optional[PersonEntity]) -> Optional[Person]:
        if entity is None:
            return None

        return Person(
            identifier=entity.identifier,
            first_name=entity.first_name,
            last_name=entity.last_name,
            # Rows older than the check constraint may hold "" here
            middle_initial=entity.middle_initial or None,
            date_of_birth=entity.date_of_birth,
        )

    async def find_by_last_name(self, last_name: str) -> list[Person]:
        """Get persons by exact last name, ordered by first name."""
        result = await self._session.execute(
            select(PersonEntity)
            .where(PersonEntity.last_name == last_name)
            .order_by(PersonEntity.first_name, PersonEntity.identifier)
        )
        return [self.assemble(entity) for entity in result.scalars().all()]  # type: ignore[misc]


class PersonEntityDAO(BaseEntityDAO[PersonEntity, int]):
    """Person DAO returning PersonEntity rows directly (no transfer objects)."""

    def extract_primary_key(self, entity: PersonEntity) -> int:
        return entity.identifier
