"""Care facility repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from carelink.domain.institution.entities import CareFacility


class CareFacilityRepository(ABC):
    """Abstract repository interface for CareFacility aggregates."""

    @abstractmethod
    async def save(self, facility: CareFacility) -> CareFacility:
        """Insert or update a facility."""

    @abstractmethod
    async def find_by_id(self, facility_id: UUID) -> CareFacility | None:
        """Find a facility by its ID."""

    @abstractmethod
    async def exists(self, facility_id: UUID) -> bool:
        """Check whether a facility exists."""

    @abstractmethod
    async def find_all(
        self, page: int = 1, limit: int = 10
    ) -> tuple[list[CareFacility], int]:
        """Page through facilities ordered by name."""

    @abstractmethod
    async def find_by_name(self, name: str) -> CareFacility | None:
        """Find a facility by its exact (trimmed) name."""
