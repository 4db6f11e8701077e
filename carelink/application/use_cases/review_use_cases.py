"""
Review use cases.

Business rules:
1. A user may review an institution only once (enforced by storage,
   checked up front as a fast path)
2. Rating is 1 to 5, content 10 to 1000 characters
3. Only the author may edit or delete a review
"""

from uuid import UUID

from carelink.domain.institution import CareFacilityRepository
from carelink.domain.review import Rating, Review, ReviewContent, ReviewRepository
from carelink.domain.shared import (
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    Result,
)
from carelink.application.dtos.review_dtos import (
    CreateReviewCommand,
    ReviewListResponse,
    ReviewResponse,
    UpdateReviewCommand,
)
from carelink.application.use_cases.base import UseCase, check_paging

DUPLICATE_REVIEW_MESSAGE = "이미 해당 기관에 리뷰를 작성하셨습니다"
REVIEW_NOT_FOUND_MESSAGE = "리뷰를 찾을 수 없습니다"
INSTITUTION_NOT_FOUND_MESSAGE = "기관을 찾을 수 없습니다"


def to_review_response(review: Review, institution_name: str = "") -> ReviewResponse:
    return ReviewResponse(
        id=review.id,
        institution_id=review.institution_id,
        institution_name=institution_name,
        user_id=review.user_id,
        rating=review.rating.value,
        content=review.content.value,
        helpful_count=review.helpful_count,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )


async def _institution_name(
    facilities: CareFacilityRepository, institution_id: UUID
) -> str:
    facility = await facilities.find_by_id(institution_id)
    return facility.name.value if facility else ""


def _duplicate_review(user_id: UUID, institution_id: UUID) -> ConflictError:
    return ConflictError(
        DUPLICATE_REVIEW_MESSAGE,
        code="DUPLICATE_REVIEW",
        details={"user_id": str(user_id), "institution_id": str(institution_id)},
    )


class CreateReviewUseCase(UseCase):
    """Publish a guardian's review of an institution."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        facility_repository: CareFacilityRepository,
    ):
        super().__init__()
        self._reviews = review_repository
        self._facilities = facility_repository

    async def execute(
        self, command: CreateReviewCommand
    ) -> Result[ReviewResponse, DomainError]:
        facility = await self._facilities.find_by_id(command.institution_id)
        if facility is None:
            return self.reject(
                NotFoundError(INSTITUTION_NOT_FOUND_MESSAGE, code="INSTITUTION_NOT_FOUND"),
                institution_id=str(command.institution_id),
            )

        # Fast path only; the unique constraint on save is authoritative.
        if await self._reviews.exists_by_user_and_institution(
            command.user_id, command.institution_id
        ):
            return self.reject(_duplicate_review(command.user_id, command.institution_id))

        rating = Rating.create(command.rating)
        content = ReviewContent.create(command.content)
        checked = Result.combine([rating, content])
        if checked.is_failure:
            return self.reject(checked.error)

        created = Review.create(
            command.institution_id, command.user_id, rating.value, content.value
        )
        if created.is_failure:
            return self.reject(created.error)

        try:
            review = await self._reviews.save(created.value)
        except ConflictError:
            return self.reject(_duplicate_review(command.user_id, command.institution_id))

        return self.succeed(
            to_review_response(review, facility.name.value),
            review_id=str(review.id),
        )


class UpdateReviewUseCase(UseCase):
    """Edit the rating and/or content of one's own review."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        facility_repository: CareFacilityRepository,
    ):
        super().__init__()
        self._reviews = review_repository
        self._facilities = facility_repository

    async def execute(
        self, review_id: UUID, user_id: UUID, command: UpdateReviewCommand
    ) -> Result[ReviewResponse, DomainError]:
        review = await self._reviews.find_by_id(review_id)
        if review is None:
            return self.reject(
                NotFoundError(REVIEW_NOT_FOUND_MESSAGE, code="REVIEW_NOT_FOUND"),
                review_id=str(review_id),
            )

        if not review.can_modify(user_id):
            return self.reject(
                ForbiddenError("본인이 작성한 리뷰만 수정할 수 있습니다"),
                review_id=str(review_id),
                user_id=str(user_id),
            )

        rating = Rating.create(command.rating) if command.rating is not None else None
        content = (
            ReviewContent.create(command.content) if command.content is not None else None
        )
        checked = Result.combine([r for r in (rating, content) if r is not None])
        if checked.is_failure:
            return self.reject(checked.error)

        if rating is not None:
            review.update_rating(rating.value)
        if content is not None:
            review.update_content(content.value)

        saved = await self._reviews.save(review)
        name = await _institution_name(self._facilities, saved.institution_id)
        return self.succeed(to_review_response(saved, name), review_id=str(saved.id))


class DeleteReviewUseCase(UseCase):
    """Delete one's own review."""

    def __init__(self, review_repository: ReviewRepository):
        super().__init__()
        self._reviews = review_repository

    async def execute(self, review_id: UUID, user_id: UUID) -> Result[None, DomainError]:
        review = await self._reviews.find_by_id(review_id)
        if review is None:
            return self.reject(
                NotFoundError(REVIEW_NOT_FOUND_MESSAGE, code="REVIEW_NOT_FOUND"),
                review_id=str(review_id),
            )

        if not review.can_delete(user_id):
            return self.reject(
                ForbiddenError("본인이 작성한 리뷰만 삭제할 수 있습니다"),
                review_id=str(review_id),
                user_id=str(user_id),
            )

        await self._reviews.delete(review_id)
        return self.succeed(review_id=str(review_id))


class GetReviewUseCase(UseCase):
    def __init__(
        self,
        review_repository: ReviewRepository,
        facility_repository: CareFacilityRepository,
    ):
        super().__init__()
        self._reviews = review_repository
        self._facilities = facility_repository

    async def execute(self, review_id: UUID) -> Result[ReviewResponse, DomainError]:
        review = await self._reviews.find_by_id(review_id)
        if review is None:
            return self.reject(
                NotFoundError(REVIEW_NOT_FOUND_MESSAGE, code="REVIEW_NOT_FOUND"),
                review_id=str(review_id),
            )

        name = await _institution_name(self._facilities, review.institution_id)
        return self.succeed(to_review_response(review, name), review_id=str(review_id))


class ListInstitutionReviewsUseCase(UseCase):
    """Page through the reviews of one institution, newest first."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        facility_repository: CareFacilityRepository,
    ):
        super().__init__()
        self._reviews = review_repository
        self._facilities = facility_repository

    async def execute(
        self, institution_id: UUID, page: int = 1, limit: int = 10
    ) -> Result[ReviewListResponse, DomainError]:
        paging = check_paging(page, limit)
        if paging.is_failure:
            return self.reject(paging.error)

        reviews, total = await self._reviews.find_by_institution_id(
            institution_id, page=page, limit=limit
        )
        name = await _institution_name(self._facilities, institution_id)
        return self.succeed(
            ReviewListResponse.build(
                [to_review_response(review, name) for review in reviews],
                total=total,
                page=page,
                limit=limit,
            ),
            institution_id=str(institution_id),
            total=total,
        )


class MarkReviewHelpfulUseCase(UseCase):
    def __init__(
        self,
        review_repository: ReviewRepository,
        facility_repository: CareFacilityRepository,
    ):
        super().__init__()
        self._reviews = review_repository
        self._facilities = facility_repository

    async def execute(self, review_id: UUID) -> Result[ReviewResponse, DomainError]:
        review = await self._reviews.find_by_id(review_id)
        if review is None:
            return self.reject(
                NotFoundError(REVIEW_NOT_FOUND_MESSAGE, code="REVIEW_NOT_FOUND"),
                review_id=str(review_id),
            )

        review.increment_helpful()
        saved = await self._reviews.save(review)
        name = await _institution_name(self._facilities, saved.institution_id)
        return self.succeed(
            to_review_response(saved, name),
            review_id=str(review_id),
            helpful_count=saved.helpful_count,
        )
