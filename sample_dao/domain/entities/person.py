"""Person transfer object - what DAO callers see, no ORM mapping."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from sample_dao.domain.exceptions import (
    BusinessRuleViolationException,
    InvalidEntityStateException,
)


@dataclass
class Person:
    """
    Person as exposed by the DAO layer.

    This is a plain Python class with NO dependency on SQLAlchemy. The
    persistence representation is PersonEntity; PersonDAO converts
    between the two.
    """

    first_name: str
    last_name: str
    middle_initial: Optional[str] = None
    date_of_birth: Optional[date] = None
    identifier: Optional[int] = None

    def __post_init__(self):
        """
        Validate invariants at construction time.

        A person must have both names; the middle initial is a single
        character and nobody is born in the future.
        """
        if not self.first_name or len(self.first_name.strip()) == 0:
            raise InvalidEntityStateException(
                "First name cannot be empty. Person must have a first name."
            )

        if not self.last_name or len(self.last_name.strip()) == 0:
            raise InvalidEntityStateException(
                "Last name cannot be empty. Person must have a last name."
            )

        if self.middle_initial is not None and len(self.middle_initial) != 1:
            raise InvalidEntityStateException(
                f"Invalid middle initial: '{self.middle_initial}'. "
                "Middle initial must be exactly one character."
            )

        if self.date_of_birth is not None and self.date_of_birth > date.today():
            raise InvalidEntityStateException(
                f"Invalid date of birth: {self.date_of_birth.isoformat()} is in the future."
            )

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned an identifier."""
        return self.identifier is not None

    def rename(
        self, first_name: Optional[str] = None, last_name: Optional[str] = None
    ) -> None:
        """
        Change first and/or last name.

        Args:
            first_name: New first name, or None to keep the current one
            last_name: New last name, or None to keep the current one

        Raises:
            BusinessRuleViolationException: If a given name is blank
        """
        for label, value in (("first name", first_name), ("last name", last_name)):
            if value is not None and len(value.strip()) == 0:
                raise BusinessRuleViolationException(
                    f"Cannot change {label} to empty value."
                )

        if first_name is not None:
            self.first_name = first_name
        if last_name is not None:
            self.last_name = last_name

    def change_middle_initial(self, middle_initial: Optional[str]) -> None:
        """
        Set or clear the middle initial.

        Raises:
            BusinessRuleViolationException: If the value is not a single character
        """
        if middle_initial is not None and len(middle_initial) != 1:
            raise BusinessRuleViolationException(
                f"Cannot change middle initial to '{middle_initial}'. "
                "Middle initial must be exactly one character."
            )

        self.middle_initial = middle_initial

    def change_date_of_birth(self, date_of_birth: Optional[date]) -> None:
        """
        Set or clear the date of birth.

        Raises:
            BusinessRuleViolationException: If the date is in the future
        """
        if date_of_birth is not None and date_of_birth > date.today():
            raise BusinessRuleViolationException(
                f"Cannot change date of birth to {date_of_birth.isoformat()}: date is in the future."
            )

        self.date_of_birth = date_of_birth
