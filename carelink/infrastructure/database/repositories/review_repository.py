"""SQL implementation of the review repository."""

from uuid import UUID

from sqlmodel import col

from carelink.domain.review import Review, ReviewRepository
from carelink.infrastructure.database.models import ReviewRecord
from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.mappers import ReviewMapper


class SQLReviewRepository(SQLRepository[ReviewRecord, Review], ReviewRepository):
    """
    Reviews stored in the ``reviews`` table.

    One review per (user, institution) is enforced by the
    ``uq_reviews_user_institution`` constraint.
    """

    record_class = ReviewRecord
    mapper = ReviewMapper

    async def save(self, review: Review) -> Review:
        return self._save(review)

    async def find_by_id(self, review_id: UUID) -> Review | None:
        return self._get(review_id)

    async def find_by_institution_id(
        self, institution_id: UUID, page: int = 1, limit: int = 10
    ) -> tuple[list[Review], int]:
        return self._page(
            col(ReviewRecord.institution_id) == institution_id,
            order_by=col(ReviewRecord.created_at).desc(),
            page=page,
            limit=limit,
        )

    async def find_by_user_id(self, user_id: UUID) -> list[Review]:
        return self._list(
            col(ReviewRecord.user_id) == user_id,
            order_by=col(ReviewRecord.created_at).desc(),
        )

    async def exists_by_user_and_institution(
        self, user_id: UUID, institution_id: UUID
    ) -> bool:
        return self._exists(
            col(ReviewRecord.user_id) == user_id,
            col(ReviewRecord.institution_id) == institution_id,
        )

    async def find_all(self, page: int = 1, limit: int = 10) -> tuple[list[Review], int]:
        return self._page(
            order_by=col(ReviewRecord.created_at).desc(), page=page, limit=limit
        )

    async def delete(self, review_id: UUID) -> bool:
        return self._delete(review_id)
