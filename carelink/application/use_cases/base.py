"""
Base use case providing outcome logging and metrics.

Every use case returns a ``Result``. Expected failures (validation,
not-found, conflict, forbidden, business rule) are returned; only
unexpected repository failures are raised.
"""

from abc import ABC
from typing import Any, TypeVar

from carelink.core.observability import get_logger, record_use_case_outcome
from carelink.domain.shared import DomainError, Result, ValidationError

T = TypeVar("T")


class UseCase(ABC):
    """
    Base class for use cases.

    Subclasses implement ``execute`` and finish every path through
    ``succeed`` or ``reject`` so each outcome is logged and counted once.
    """

    #: Label used in logs and the outcome counter; defaults to the class name.
    name: str = ""

    def __init__(self) -> None:
        self._name = self.name or self.__class__.__name__
        self._logger = get_logger(f"carelink.use_cases.{self._name}")

    def succeed(self, payload: T = None, **context: Any) -> Result[T, DomainError]:
        """
        Record an accepted operation.

        Args:
            payload: Response to return
            **context: Extra fields for the log entry (IDs, counts)
        """
        self._logger.info("Use case succeeded", use_case=self._name, **context)
        record_use_case_outcome(self._name, "success")
        return Result.ok(payload)

    def reject(self, error: DomainError, **context: Any) -> Result[Any, DomainError]:
        """
        Record a refused operation.

        Args:
            error: Reason returned to the caller
            **context: Extra fields for the log entry
        """
        self._logger.warning(
            "Use case rejected",
            use_case=self._name,
            error_type=error.error_type.value,
            code=error.code,
            reason=error.message,
            **context,
        )
        record_use_case_outcome(self._name, error.error_type.value)
        return Result.fail(error)


MAX_PAGE_SIZE = 100


def check_paging(page: int, limit: int) -> Result[None, DomainError]:
    """Reject page numbers below 1 and page sizes outside 1..MAX_PAGE_SIZE."""
    if page < 1:
        return Result.fail(ValidationError("페이지는 1 이상이어야 합니다", "page"))
    if not 1 <= limit <= MAX_PAGE_SIZE:
        return Result.fail(
            ValidationError(f"페이지 크기는 1-{MAX_PAGE_SIZE} 사이여야 합니다", "limit")
        )
    return Result.ok()
