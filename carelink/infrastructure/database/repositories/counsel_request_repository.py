"""SQL implementation of the counsel request repository."""

from uuid import UUID

from sqlmodel import col

from carelink.domain.counsel_request import (
    CounselRequest,
    CounselRequestRepository,
    CounselRequestStatus,
)
from carelink.infrastructure.database.models import CounselRequestRecord
from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.mappers import CounselRequestMapper


class SQLCounselRequestRepository(
    SQLRepository[CounselRequestRecord, CounselRequest], CounselRequestRepository
):
    record_class = CounselRequestRecord
    mapper = CounselRequestMapper

    async def save(self, request: CounselRequest) -> CounselRequest:
        return self._save(request)

    async def find_by_id(self, request_id: UUID) -> CounselRequest | None:
        return self._get(request_id)

    async def find_by_child_id(self, child_id: UUID) -> list[CounselRequest]:
        return self._list(
            col(CounselRequestRecord.child_id) == child_id,
            order_by=col(CounselRequestRecord.created_at).desc(),
        )

    async def find_by_institution_id(self, institution_id: UUID) -> list[CounselRequest]:
        return self._list(
            col(CounselRequestRecord.matched_institution_id) == institution_id,
            order_by=col(CounselRequestRecord.created_at).desc(),
        )

    async def find_by_status(
        self, status: CounselRequestStatus, page: int = 1, limit: int = 10
    ) -> tuple[list[CounselRequest], int]:
        return self._page(
            col(CounselRequestRecord.status) == status.value,
            order_by=col(CounselRequestRecord.created_at).asc(),
            page=page,
            limit=limit,
        )
