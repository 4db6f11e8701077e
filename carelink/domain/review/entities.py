"""Review aggregate root."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from carelink.domain.shared.base import AggregateRoot, DomainEvent
from carelink.domain.shared.exceptions import ValidationError
from carelink.domain.shared.result import Result
from carelink.domain.review.value_objects import Rating, ReviewContent


class ReviewCreated(DomainEvent):
    """Event raised when a guardian publishes a review."""

    institution_id: UUID
    user_id: UUID
    rating: int


class Review(AggregateRoot):
    """
    A guardian's review of an institution.

    Only the author may modify or delete it. Rating and content are replaced
    wholesale through ``update_rating`` / ``update_content``.
    """

    institution_id: UUID
    user_id: UUID
    rating: Rating
    content: ReviewContent
    helpful_count: int = Field(default=0, ge=0)

    @staticmethod
    def create(
        institution_id: UUID | None,
        user_id: UUID | None,
        rating: Rating,
        content: ReviewContent,
    ) -> Result["Review", ValidationError]:
        """
        Create a new review.

        Args:
            institution_id: Reviewed institution
            user_id: Author of the review
            rating: Validated rating
            content: Validated content

        Returns:
            Result holding the new review, or the first missing-identifier failure
        """
        if not institution_id:
            return Result.fail(ValidationError("기관 ID는 필수입니다", "institution_id"))
        if not user_id:
            return Result.fail(ValidationError("사용자 ID는 필수입니다", "user_id"))

        review = Review(
            institution_id=institution_id,
            user_id=user_id,
            rating=rating,
            content=content,
        )
        review.add_domain_event(
            ReviewCreated(
                aggregate_id=review.id,
                institution_id=institution_id,
                user_id=user_id,
                rating=rating.value,
            )
        )
        return Result.ok(review)

    @staticmethod
    def restore(
        id: UUID,
        institution_id: UUID,
        user_id: UUID,
        rating: Rating,
        content: ReviewContent,
        helpful_count: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Review":
        """Rehydrate a stored review without re-running creation rules."""
        return Review(
            id=id,
            institution_id=institution_id,
            user_id=user_id,
            rating=rating,
            content=content,
            helpful_count=helpful_count,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_rating(self, rating: Rating) -> None:
        self.rating = rating
        self.mark_updated()

    def update_content(self, content: ReviewContent) -> None:
        self.content = content
        self.mark_updated()

    def increment_helpful(self) -> None:
        self.helpful_count += 1
        self.mark_updated()

    def can_modify(self, user_id: UUID) -> bool:
        return self.user_id == user_id

    def can_delete(self, user_id: UUID) -> bool:
        return self.user_id == user_id
