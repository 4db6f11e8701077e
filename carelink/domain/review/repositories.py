"""Review repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from carelink.domain.review.entities import Review


class ReviewRepository(ABC):
    """
    Abstract repository interface for Review aggregates.

    Implementations must enforce one review per (user, institution) at the
    storage level and raise ``ConflictError`` when a write violates it.
    """

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """
        Insert or update a review.

        Args:
            review: Review to persist

        Returns:
            The persisted review

        Raises:
            ConflictError: If the user already reviewed the institution
            RepositoryError: If persistence fails
        """

    @abstractmethod
    async def find_by_id(self, review_id: UUID) -> Review | None:
        """Find a review by its ID."""

    @abstractmethod
    async def find_by_institution_id(
        self, institution_id: UUID, page: int = 1, limit: int = 10
    ) -> tuple[list[Review], int]:
        """
        Page through the reviews of an institution, newest first.

        Returns:
            The requested page and the total number of reviews
        """

    @abstractmethod
    async def find_by_user_id(self, user_id: UUID) -> list[Review]:
        """Find every review written by a user."""

    @abstractmethod
    async def exists_by_user_and_institution(
        self, user_id: UUID, institution_id: UUID
    ) -> bool:
        """Check whether the user already reviewed the institution."""

    @abstractmethod
    async def find_all(self, page: int = 1, limit: int = 10) -> tuple[list[Review], int]:
        """Page through all reviews, newest first."""

    @abstractmethod
    async def delete(self, review_id: UUID) -> bool:
        """Delete a review. Returns False when it did not exist."""
