"""SQL implementation of the counsel report repository."""

from uuid import UUID

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import col, select

from carelink.domain.counsel_report import (
    CounselReport,
    CounselReportRepository,
    ReportStatus,
)
from carelink.domain.shared import RepositoryError
from carelink.infrastructure.database.models import CounselReportRecord
from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.mappers import CounselReportMapper


class SQLCounselReportRepository(
    SQLRepository[CounselReportRecord, CounselReport], CounselReportRepository
):
    record_class = CounselReportRecord
    mapper = CounselReportMapper

    async def save(self, report: CounselReport) -> CounselReport:
        return self._save(report)

    async def find_by_id(self, report_id: UUID) -> CounselReport | None:
        return self._get(report_id)

    async def find_by_request_and_session(
        self, counsel_request_id: UUID, session_number: int
    ) -> CounselReport | None:
        return self._first(
            col(CounselReportRecord.counsel_request_id) == counsel_request_id,
            col(CounselReportRecord.session_number) == session_number,
        )

    async def find_by_counsel_request_id(
        self, counsel_request_id: UUID
    ) -> list[CounselReport]:
        return self._list(
            col(CounselReportRecord.counsel_request_id) == counsel_request_id,
            order_by=col(CounselReportRecord.session_number).asc(),
        )

    async def find_by_child_id(self, child_id: UUID) -> list[CounselReport]:
        return self._list(
            col(CounselReportRecord.child_id) == child_id,
            order_by=col(CounselReportRecord.session_number).desc(),
        )

    async def find_by_counselor_id(
        self, counselor_id: UUID, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselReport], int]:
        return self._page(
            col(CounselReportRecord.counselor_id) == counselor_id,
            order_by=col(CounselReportRecord.created_at).desc(),
            page=page,
            limit=limit,
        )

    async def find_by_status(
        self, status: ReportStatus, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselReport], int]:
        return self._page(
            col(CounselReportRecord.status) == status.value,
            order_by=col(CounselReportRecord.created_at).desc(),
            page=page,
            limit=limit,
        )

    async def count_by_child_id(self, child_id: UUID) -> int:
        return self._count(col(CounselReportRecord.child_id) == child_id)

    async def next_session_number(self, counsel_request_id: UUID) -> int:
        statement = select(func.max(CounselReportRecord.session_number)).where(
            col(CounselReportRecord.counsel_request_id) == counsel_request_id
        )
        try:
            highest = self.session.exec(statement).one()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Database error during next_session_number: {str(e)}"
            ) from e
        return (highest or 0) + 1

    async def delete(self, report_id: UUID) -> bool:
        return self._delete(report_id)
