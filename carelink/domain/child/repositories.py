"""Child repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from carelink.domain.child.entities import Child


class ChildRepository(ABC):
    """Abstract repository interface for Child aggregates."""

    @abstractmethod
    async def save(self, child: Child) -> Child:
        """
        Insert or update a child.

        Raises:
            RepositoryError: If persistence fails
        """

    @abstractmethod
    async def find_by_id(self, child_id: UUID) -> Child | None:
        """Find a child by its ID."""

    @abstractmethod
    async def find_by_guardian_id(self, guardian_id: UUID) -> list[Child]:
        """All children of a guardian, oldest registration first."""

    @abstractmethod
    async def find_by_institution_id(self, institution_id: UUID) -> list[Child]:
        """All children living in a care facility."""

    @abstractmethod
    async def exists(self, child_id: UUID) -> bool:
        """Check whether a child exists."""

    @abstractmethod
    async def delete(self, child_id: UUID) -> bool:
        """Delete a child. Returns False when it did not exist."""
