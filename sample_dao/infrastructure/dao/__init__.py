"""DAO implementations using SQLAlchemy."""

from sample_dao.infrastructure.dao.base_dao import BaseDAO
from sample_dao.infrastructure.dao.base_entity_dao import BaseEntityDAO
from sample_dao.infrastructure.dao.generics import DAOConfigurationError
from sample_dao.infrastructure.dao.person_dao import PersonDAO, PersonEntityDAO
from sample_dao.infrastructure.dao.unit_of_work_impl import UnitOfWork

__all__ = [
    "BaseDAO",
    "BaseEntityDAO",
    "DAOConfigurationError",
    "PersonDAO",
    "PersonEntityDAO",
    "UnitOfWork",
]
