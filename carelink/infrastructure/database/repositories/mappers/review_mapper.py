"""
Mapper for converting between Review domain entities and SQL records.
"""

from carelink.domain.review import Rating, Review, ReviewContent
from carelink.infrastructure.database.models import ReviewRecord
from carelink.infrastructure.database.repositories.mappers.common import as_utc


class ReviewMapper:
    """Translate Review aggregates to and from ``reviews`` rows."""

    @staticmethod
    def domain_to_sql(review: Review) -> ReviewRecord:
        return ReviewRecord(
            id=review.id,
            institution_id=review.institution_id,
            user_id=review.user_id,
            rating=review.rating.value,
            content=review.content.value,
            helpful_count=review.helpful_count,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )

    @staticmethod
    def sql_to_domain(record: ReviewRecord) -> Review:
        return Review.restore(
            id=record.id,
            institution_id=record.institution_id,
            user_id=record.user_id,
            rating=Rating.restore(record.rating),
            content=ReviewContent.restore(record.content),
            helpful_count=record.helpful_count,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
