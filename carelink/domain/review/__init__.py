"""Institution reviews written by guardians."""

from carelink.domain.review.entities import Review, ReviewCreated
from carelink.domain.review.repositories import ReviewRepository
from carelink.domain.review.value_objects import Rating, ReviewContent

__all__ = ["Review", "ReviewCreated", "ReviewRepository", "Rating", "ReviewContent"]
