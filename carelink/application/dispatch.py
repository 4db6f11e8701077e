"""
Best-effort dispatch of side effects.

Notifications and similar follow-ups must never fail the operation that
triggered them. The dispatcher runs each one as a background task and
reports failures on its own channel instead of to the caller.
"""

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import datetime

from carelink.core.observability import get_logger, record_best_effort_failure
from carelink.domain.shared.base import utc_now

logger = get_logger(__name__)


@dataclass(frozen=True)
class DispatchFailure:
    """A background task that raised."""

    name: str
    error: BaseException
    occurred_at: datetime = field(default_factory=utc_now)


class BestEffortDispatcher:
    """
    Runs side effects in the background and collects their failures.

    ``dispatch`` returns as soon as the task is scheduled. A task that raises
    is logged, counted, appended to ``failures`` and handed to the optional
    ``on_failure`` callback; nothing is re-raised.
    """

    def __init__(
        self,
        on_failure: Callable[[DispatchFailure], None] | None = None,
        max_recorded_failures: int = 100,
    ):
        """
        Initialize the dispatcher.

        Args:
            on_failure: Called with every failure, after it is recorded
            max_recorded_failures: Oldest failures are dropped past this size
        """
        self._on_failure = on_failure
        self._max_recorded_failures = max_recorded_failures
        self._failures: list[DispatchFailure] = []
        self._tasks: set[asyncio.Task] = set()

    @property
    def failures(self) -> list[DispatchFailure]:
        return list(self._failures)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def dispatch(
        self, name: str, coroutine_factory: Callable[[], Awaitable[None]]
    ) -> asyncio.Task:
        """
        Schedule ``coroutine_factory()`` on the running event loop.

        Args:
            name: Label used in logs, metrics and failure records
            coroutine_factory: Zero-argument callable returning the awaitable

        Returns:
            The scheduled task
        """
        task = asyncio.create_task(self._run(name, coroutine_factory), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def drain(self) -> None:
        """Wait for every outstanding task to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(
        self, name: str, coroutine_factory: Callable[[], Awaitable[None]]
    ) -> None:
        try:
            await coroutine_factory()
        except asyncio.CancelledError:
            raise
        except Exception as e:
            self._record(DispatchFailure(name=name, error=e))
        else:
            logger.debug("Best-effort task completed", task=name)

    def _record(self, failure: DispatchFailure) -> None:
        logger.error(
            "Best-effort task failed",
            task=failure.name,
            error=str(failure.error),
            exc_info=failure.error,
        )
        record_best_effort_failure(failure.name)

        self._failures.append(failure)
        if len(self._failures) > self._max_recorded_failures:
            del self._failures[: -self._max_recorded_failures]

        if self._on_failure is not None:
            try:
                self._on_failure(failure)
            except Exception as callback_error:
                logger.error(
                    "Dispatch failure callback raised",
                    task=failure.name,
                    error=str(callback_error),
                )
