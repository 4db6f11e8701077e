"""SQL implementation of the care facility repository."""

from uuid import UUID

from sqlmodel import col

from carelink.domain.institution import CareFacility, CareFacilityRepository
from carelink.infrastructure.database.models import CareFacilityRecord
from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.mappers import CareFacilityMapper


class SQLCareFacilityRepository(
    SQLRepository[CareFacilityRecord, CareFacility], CareFacilityRepository
):
    record_class = CareFacilityRecord
    mapper = CareFacilityMapper

    async def save(self, facility: CareFacility) -> CareFacility:
        return self._save(facility)

    async def find_by_id(self, facility_id: UUID) -> CareFacility | None:
        return self._get(facility_id)

    async def exists(self, facility_id: UUID) -> bool:
        return self._exists(col(CareFacilityRecord.id) == facility_id)

    async def find_all(
        self, page: int = 1, limit: int = 10
    ) -> tuple[list[CareFacility], int]:
        return self._page(
            order_by=col(CareFacilityRecord.name).asc(), page=page, limit=limit
        )

    async def find_by_name(self, name: str) -> CareFacility | None:
        return self._first(col(CareFacilityRecord.name) == name)
