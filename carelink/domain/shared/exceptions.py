"""
Domain errors with type discrimination.

Every expected failure in the core is a ``DomainError`` carried inside a
``Result``. The transport adapter chooses a response status from
``error_type``.
"""

from enum import Enum
from typing import Any


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    FORBIDDEN = "forbidden"
    REPOSITORY = "repository"


class DomainError(Exception):
    """Base class for all domain errors."""

    default_code = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.BUSINESS_RULE,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(DomainError):
    """Raised (or returned) when input fails a value object or field rule."""

    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field_name: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.field_name = field_name
        details = dict(details or {})
        if field_name:
            details["field"] = field_name
        super().__init__(message, ErrorType.VALIDATION, code, details)


class BusinessRuleError(DomainError):
    """A lifecycle or invariant rule of an aggregate was violated."""

    default_code = "BUSINESS_RULE_VIOLATION"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorType.BUSINESS_RULE, code, details)


class NotFoundError(DomainError):
    """A referenced aggregate does not exist."""

    default_code = "NOT_FOUND"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorType.NOT_FOUND, code, details)


class ConflictError(DomainError):
    """A uniqueness rule was violated (duplicate review, email, session)."""

    default_code = "CONFLICT"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorType.CONFLICT, code, details)


class ForbiddenError(DomainError):
    """The acting user does not own the aggregate or lacks the role."""

    default_code = "FORBIDDEN"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorType.FORBIDDEN, code, details)


class RepositoryError(DomainError):
    """Unexpected persistence failure. Raised, never returned."""

    default_code = "REPOSITORY_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, ErrorType.REPOSITORY, code, details)
