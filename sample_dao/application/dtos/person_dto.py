"""Person DTOs for the HTTP boundary using Pydantic."""

from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from sample_dao.domain.entities.person import Person


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


Name = Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1, max_length=100)]
MiddleInitial = Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1, max_length=1)]


class CreatePersonDTO(BaseModel):
    """
    DTO for creating a person.

    Validation:
    - first_name / last_name: whitespace trimmed, 1-100 characters
    - middle_initial: exactly one character if provided
    """

    first_name: Name
    last_name: Name
    middle_initial: Optional[MiddleInitial] = None
    date_of_birth: Optional[date] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Test",
                "last_name": "TheTester",
                "middle_initial": "T",
                "date_of_birth": "1985-04-12",
            }
        }
    )

    def to_person(self) -> Person:
        """Build a not-yet-persisted Person."""
        return Person(
            first_name=self.first_name,
            last_name=self.last_name,
            middle_initial=self.middle_initial,
            date_of_birth=self.date_of_birth,
        )


class UpdatePersonDTO(BaseModel):
    """
    DTO for updating a person.

    Fields left out of the request are not changed. An explicit null
    middle_initial or date_of_birth clears it; names cannot be null.
    """

    first_name: Optional[Name] = None
    last_name: Optional[Name] = None
    middle_initial: Optional[MiddleInitial] = None
    date_of_birth: Optional[date] = None

    @model_validator(mode="after")
    def reject_null_names(self) -> "UpdatePersonDTO":
        """A person always has both names, so null is not a valid update."""
        for field in ("first_name", "last_name"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class PersonDTO(BaseModel):
    """DTO for returning person data to the presentation layer."""

    identifier: int
    first_name: str
    last_name: str
    middle_initial: Optional[str] = None
    date_of_birth: Optional[date] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_person(cls, person: Person) -> "PersonDTO":
        """
        Convert a PERSISTED person to DTO.

        Raises:
            ValueError: If the person has no identifier yet
        """
        if person.identifier is None:
            raise ValueError(
                "Cannot create PersonDTO from non-persisted person: missing identifier. "
                "Ensure the person has been saved via the DAO before converting to DTO."
            )

        return cls(
            identifier=person.identifier,
            first_name=person.first_name,
            last_name=person.last_name,
            middle_initial=person.middle_initial,
            date_of_birth=person.date_of_birth,
        )


class PersonCountDTO(BaseModel):
    """DTO for the number of stored persons."""

    count: int
