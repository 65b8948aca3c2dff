"""Data Transfer Objects for application layer."""

from sample_dao.application.dtos.person_dto import (
    CreatePersonDTO,
    PersonCountDTO,
    PersonDTO,
    UpdatePersonDTO,
)

__all__ = ["CreatePersonDTO", "UpdatePersonDTO", "PersonDTO", "PersonCountDTO"]
