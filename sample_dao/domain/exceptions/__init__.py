"""Domain exceptions - business rule violations."""

from sample_dao.domain.exceptions.domain_exceptions import (
    BusinessRuleViolationException,
    DomainException,
    InvalidEntityStateException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "BusinessRuleViolationException",
]
