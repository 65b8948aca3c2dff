"""Pytest configuration and fixtures.

Shared fixtures for unit tests. Services get a FakeUnitOfWork so they
run without a database and each test starts from fresh state.
"""

from datetime import date

import pytest

from sample_dao.application.services.person_service import PersonService
from sample_dao.domain.entities.person import Person
from tests.fakes.unit_of_work_fake import FakeUnitOfWork


@pytest.fixture
def sample_person() -> Person:
    """A persisted person."""
    return Person(
        identifier=1,
        first_name="Test",
        last_name="TheTester",
        middle_initial="T",
        date_of_birth=date(1985, 4, 12),
    )


@pytest.fixture
def another_person() -> Person:
    """Another persisted person."""
    return Person(
        identifier=2,
        first_name="Ada",
        last_name="Lovelace",
        date_of_birth=date(1815, 12, 10),
    )


@pytest.fixture
def fake_uow():
    """Provide a fresh, empty FakeUnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_people(sample_person, another_person):
    """Provide a FakeUnitOfWork pre-populated with two persons."""
    return FakeUnitOfWork(initial_people=[sample_person, another_person])


@pytest.fixture
def person_service(fake_uow):
    """PersonService backed by an empty fake unit of work."""

    def uow_factory():
        return fake_uow

    return PersonService(uow_factory=uow_factory)


@pytest.fixture
def person_service_with_data(fake_uow_with_people):
    """PersonService backed by a pre-populated fake unit of work."""

    def uow_factory():
        return fake_uow_with_people

    return PersonService(uow_factory=uow_factory)
