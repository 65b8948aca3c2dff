"""DAO interfaces - define contracts for data access."""

from sample_dao.domain.repositories.base import IDAO
from sample_dao.domain.repositories.person_dao import IPersonDAO
from sample_dao.domain.repositories.unit_of_work import IUnitOfWork

__all__ = ["IDAO", "IPersonDAO", "IUnitOfWork"]
