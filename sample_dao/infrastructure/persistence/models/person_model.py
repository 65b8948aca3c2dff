"""Person ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import date
from typing import Optional

from sqlalchemy import CheckConstraint, Date, String
from sqlalchemy.orm import Mapped, mapped_column

from sample_dao.infrastructure.persistence.database import Base


class PersonEntity(Base):
    """
    SQLAlchemy ORM model for the person table.

    This is an INFRASTRUCTURE detail. Callers of PersonDAO receive
    Person transfer objects and never see this class.

    The check constraints mirror Person's invariants so rows written
    through PersonEntityDAO (or any other client) stay readable as Person.
    """

    __tablename__ = "person"
    __table_args__ = (
        CheckConstraint("length(trim(first_name)) > 0", name="ck_person_first_name"),
        CheckConstraint("length(trim(last_name)) > 0", name="ck_person_last_name"),
        CheckConstraint(
            "middle_initial IS NULL OR length(middle_initial) = 1",
            name="ck_person_middle_initial",
        ),
    )

    identifier: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), index=True, nullable=False)
    middle_initial: Mapped[Optional[str]] = mapped_column(String(1), nullable=True)
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        """String representation of PersonEntity."""
        return (
            f"PersonEntity(identifier={self.identifier!r}, "
            f"first_name={self.first_name!r}, last_name={self.last_name!r})"
        )
