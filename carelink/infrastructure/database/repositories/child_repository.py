"""SQL implementation of the child repository."""

from uuid import UUID

from sqlmodel import col

from carelink.domain.child import Child, ChildRepository
from carelink.infrastructure.database.models import ChildRecord
from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.mappers import ChildMapper


class SQLChildRepository(SQLRepository[ChildRecord, Child], ChildRepository):
    record_class = ChildRecord
    mapper = ChildMapper

    async def save(self, child: Child) -> Child:
        return self._save(child)

    async def find_by_id(self, child_id: UUID) -> Child | None:
        return self._get(child_id)

    async def find_by_guardian_id(self, guardian_id: UUID) -> list[Child]:
        return self._list(
            col(ChildRecord.guardian_id) == guardian_id,
            order_by=col(ChildRecord.created_at).asc(),
        )

    async def find_by_institution_id(self, institution_id: UUID) -> list[Child]:
        return self._list(
            col(ChildRecord.institution_id) == institution_id,
            order_by=col(ChildRecord.created_at).asc(),
        )

    async def exists(self, child_id: UUID) -> bool:
        return self._exists(col(ChildRecord.id) == child_id)

    async def delete(self, child_id: UUID) -> bool:
        return self._delete(child_id)
