"""Counsel report repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from carelink.domain.counsel_report.entities import CounselReport
from carelink.domain.counsel_report.value_objects import ReportStatus


class CounselReportRepository(ABC):
    """
    Abstract repository interface for CounselReport aggregates.

    Implementations must keep (counsel_request_id, session_number) unique at
    the storage level and raise ``ConflictError`` on violation.
    """

    @abstractmethod
    async def save(self, report: CounselReport) -> CounselReport:
        """
        Insert or update a report.

        Raises:
            ConflictError: If another report already holds the session number
            RepositoryError: If persistence fails
        """

    @abstractmethod
    async def find_by_id(self, report_id: UUID) -> CounselReport | None:
        """Find a report by its ID."""

    @abstractmethod
    async def find_by_request_and_session(
        self, counsel_request_id: UUID, session_number: int
    ) -> CounselReport | None:
        """Find the report of one session of a counsel request."""

    @abstractmethod
    async def find_by_counsel_request_id(
        self, counsel_request_id: UUID
    ) -> list[CounselReport]:
        """All reports of a counsel request, ordered by session number."""

    @abstractmethod
    async def find_by_child_id(self, child_id: UUID) -> list[CounselReport]:
        """All reports about a child, newest session first."""

    @abstractmethod
    async def find_by_counselor_id(
        self, counselor_id: UUID, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselReport], int]:
        """Page through a counselor's reports, newest first."""

    @abstractmethod
    async def find_by_status(
        self, status: ReportStatus, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselReport], int]:
        """Page through reports in a given status."""

    @abstractmethod
    async def count_by_child_id(self, child_id: UUID) -> int:
        """Number of reports about a child."""

    @abstractmethod
    async def next_session_number(self, counsel_request_id: UUID) -> int:
        """Highest session number of the request plus one (1 when none exist)."""

    @abstractmethod
    async def delete(self, report_id: UUID) -> bool:
        """Delete a report. Returns False when it did not exist."""
