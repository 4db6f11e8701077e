"""Building blocks shared by every bounded context."""

from carelink.domain.shared.base import AggregateRoot, DomainEvent, Entity, ValueObject, today_in, utc_now
from carelink.domain.shared.exceptions import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    ErrorType,
    ForbiddenError,
    NotFoundError,
    RepositoryError,
    ValidationError,
)
from carelink.domain.shared.result import Result, ResultAccessError

__all__ = [
    "AggregateRoot",
    "DomainEvent",
    "Entity",
    "ValueObject",
    "today_in",
    "utc_now",
    "BusinessRuleError",
    "ConflictError",
    "DomainError",
    "ErrorType",
    "ForbiddenError",
    "NotFoundError",
    "RepositoryError",
    "ValidationError",
    "Result",
    "ResultAccessError",
]
