"""Value objects for institution reviews."""

from typing import Any, ClassVar

from carelink.domain.shared.base import ValueObject
from carelink.domain.shared.exceptions import ValidationError
from carelink.domain.shared.result import Result


class Rating(ValueObject):
    """Star rating, an integer from 1 to 5 inclusive."""

    MIN_VALUE: ClassVar[int] = 1
    MAX_VALUE: ClassVar[int] = 5

    value: int

    @classmethod
    def create(cls, value: Any) -> Result["Rating", ValidationError]:
        if value is None:
            return Result.fail(ValidationError("별점은 필수입니다", "rating"))

        # bool is an int subclass; True must not pass as a rating of 1
        if isinstance(value, bool):
            return Result.fail(ValidationError("별점은 정수여야 합니다", "rating"))
        if isinstance(value, float):
            if not value.is_integer():
                return Result.fail(ValidationError("별점은 정수여야 합니다", "rating"))
            value = int(value)
        if not isinstance(value, int):
            return Result.fail(ValidationError("별점은 정수여야 합니다", "rating"))

        if not cls.MIN_VALUE <= value <= cls.MAX_VALUE:
            return Result.fail(ValidationError("별점은 1-5 사이여야 합니다", "rating"))

        return Result.ok(cls(value=value))

    @classmethod
    def restore(cls, value: int) -> "Rating":
        return cls.model_construct(value=value)


class ReviewContent(ValueObject):
    """Free-text body of a review, trimmed, 10 to 1000 characters."""

    MIN_LENGTH: ClassVar[int] = 10
    MAX_LENGTH: ClassVar[int] = 1000

    value: str

    @classmethod
    def create(cls, content: str | None) -> Result["ReviewContent", ValidationError]:
        if content is None or not content.strip():
            return Result.fail(ValidationError("리뷰 내용은 필수입니다", "content"))

        trimmed = content.strip()

        if len(trimmed) < cls.MIN_LENGTH:
            return Result.fail(
                ValidationError("리뷰 내용은 최소 10자 이상이어야 합니다", "content")
            )
        if len(trimmed) > cls.MAX_LENGTH:
            return Result.fail(
                ValidationError("리뷰 내용은 최대 1000자까지 가능합니다", "content")
            )

        return Result.ok(cls(value=trimmed))

    @classmethod
    def restore(cls, value: str) -> "ReviewContent":
        return cls.model_construct(value=value)
