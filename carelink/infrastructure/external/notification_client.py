"""
HTTP client for the notification service.

Transient failures (network errors and 5xx responses) are retried with
exponential backoff. The final failure is raised to the caller, which in
this service is always the best-effort dispatcher.
"""

from typing import Any
from uuid import UUID

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from carelink.application.ports import NotificationGateway
from carelink.core.config import settings
from carelink.core.observability import get_correlation_id, get_logger

logger = get_logger(__name__)


def is_transient(exc: BaseException) -> bool:
    """Network failures and server-side errors are worth retrying."""
    if isinstance(exc, httpx.TransportError):
        return True
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return False


class HttpNotificationGateway(NotificationGateway):
    """
    Notification gateway backed by the notification service's REST API.

    Args:
        base_url: Service root, e.g. ``https://notify.internal``
        timeout: Per-request timeout in seconds
        max_attempts: Attempts per notification, including the first
        backoff: Multiplier of the exponential wait between attempts
        client: Optional preconfigured client (tests pass a mock transport)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 5.0,
        max_attempts: int = 3,
        backoff: float = 0.5,
        client: httpx.AsyncClient | None = None,
    ):
        self._max_attempts = max_attempts
        self._backoff = backoff
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout
        )

    @classmethod
    def from_settings(cls) -> "HttpNotificationGateway":
        if settings.NOTIFICATION_BASE_URL is None:
            raise ValueError("NOTIFICATION_BASE_URL is not configured")
        return cls(
            base_url=str(settings.NOTIFICATION_BASE_URL),
            timeout=settings.NOTIFICATION_TIMEOUT_SECONDS,
            max_attempts=settings.NOTIFICATION_MAX_ATTEMPTS,
        )

    async def send_welcome(self, user_id: UUID, email: str, real_name: str) -> None:
        await self._post(
            "/notifications/welcome",
            {"user_id": str(user_id), "email": email, "real_name": real_name},
        )

    async def send_report_approved(
        self,
        report_id: UUID,
        counselor_id: UUID,
        institution_id: UUID,
        session_number: int,
    ) -> None:
        await self._post(
            "/notifications/report-approved",
            {
                "report_id": str(report_id),
                "counselor_id": str(counselor_id),
                "institution_id": str(institution_id),
                "session_number": session_number,
            },
        )

    async def _post(self, path: str, payload: dict[str, Any]) -> None:
        headers = {}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers["X-Correlation-ID"] = correlation_id

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential(multiplier=self._backoff, max=10),
            retry=retry_if_exception(is_transient),
            reraise=True,
        ):
            with attempt:
                attempt_number = attempt.retry_state.attempt_number
                if attempt_number > 1:
                    logger.warning(
                        "Retrying notification", path=path, attempt=attempt_number
                    )
                response = await self._client.post(path, json=payload, headers=headers)
                response.raise_for_status()

        logger.info("Notification sent", path=path)

    async def close(self) -> None:
        await self._client.aclose()


class LogOnlyNotificationGateway(NotificationGateway):
    """Used when no notification service is configured; notifications are only logged."""

    async def send_welcome(self, user_id: UUID, email: str, real_name: str) -> None:
        logger.info("Notification skipped", kind="welcome", user_id=str(user_id))

    async def send_report_approved(
        self,
        report_id: UUID,
        counselor_id: UUID,
        institution_id: UUID,
        session_number: int,
    ) -> None:
        logger.info(
            "Notification skipped",
            kind="report_approved",
            report_id=str(report_id),
            session_number=session_number,
        )
