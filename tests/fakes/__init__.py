"""Fake implementations for testing."""

from tests.fakes.person_dao_fake import FakePersonDAO
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

__all__ = ["FakePersonDAO", "FakeUnitOfWork"]
