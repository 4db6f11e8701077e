"""Interfaces for external services used by use cases."""

from abc import ABC, abstractmethod
from uuid import UUID


class NotificationGateway(ABC):
    """
    Outbound notifications (e-mail, push) sent on behalf of use cases.

    Implementations may raise on delivery failure; callers dispatch these
    calls through ``BestEffortDispatcher`` so failures never reach the
    operation that triggered them.
    """

    @abstractmethod
    async def send_welcome(self, user_id: UUID, email: str, real_name: str) -> None:
        """
        Send the welcome message to a newly registered user.

        Args:
            user_id: ID of the new account
            email: Destination address
            real_name: Name used in the greeting
        """

    @abstractmethod
    async def send_report_approved(
        self,
        report_id: UUID,
        counselor_id: UUID,
        institution_id: UUID,
        session_number: int,
    ) -> None:
        """
        Tell the counselor and institution that a guardian approved a report.

        Args:
            report_id: Approved report
            counselor_id: Author of the report
            institution_id: Institution the counselor works for
            session_number: Session the report covers
        """
