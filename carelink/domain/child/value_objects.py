"""Value objects for children registered with the service."""

from datetime import date, datetime, timezone, tzinfo
from enum import Enum
from typing import Any, ClassVar

from carelink.domain.shared.base import ValueObject, today_in
from carelink.domain.shared.exceptions import ValidationError
from carelink.domain.shared.result import Result


class ChildName(ValueObject):
    """Child's name, trimmed, 2 to 30 characters."""

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 30

    value: str

    @classmethod
    def create(cls, name: str | None) -> Result["ChildName", ValidationError]:
        if not name:
            return Result.fail(ValidationError("아동 이름은 필수입니다", "name"))

        trimmed = name.strip()
        if not trimmed:
            return Result.fail(ValidationError("아동 이름은 공백일 수 없습니다", "name"))
        if len(trimmed) < cls.MIN_LENGTH:
            return Result.fail(ValidationError("아동 이름은 2자 이상이어야 합니다", "name"))
        if len(trimmed) > cls.MAX_LENGTH:
            return Result.fail(ValidationError("아동 이름은 30자 이하여야 합니다", "name"))

        return Result.ok(cls(value=trimmed))

    @classmethod
    def restore(cls, value: str) -> "ChildName":
        return cls.model_construct(value=value)


class BirthDate(ValueObject):
    """
    Date of birth.

    Creation and age both take an explicit timezone: "today" is the calendar
    date in that zone, never the host's local date.
    """

    MAX_AGE_YEARS: ClassVar[int] = 150

    value: date

    @classmethod
    def create(
        cls,
        value: date | datetime | None,
        tz: tzinfo = timezone.utc,
        now: datetime | None = None,
    ) -> Result["BirthDate", ValidationError]:
        """
        Validate a birth date against the calendar date in ``tz``.

        Args:
            value: Date (or aware datetime, converted into ``tz``)
            tz: Reference timezone for "today"
            now: Reference instant, defaults to the current time
        """
        if value is None:
            return Result.fail(ValidationError("생년월일은 필수입니다", "birth_date"))

        if isinstance(value, datetime):
            value = value.astimezone(tz).date() if value.tzinfo else value.date()
        elif not isinstance(value, date):
            return Result.fail(ValidationError("유효하지 않은 날짜입니다", "birth_date"))

        today = today_in(tz, now)
        if value > today:
            return Result.fail(
                ValidationError("생년월일은 미래 날짜일 수 없습니다", "birth_date")
            )
        if value < _years_before(today, cls.MAX_AGE_YEARS):
            return Result.fail(
                ValidationError("생년월일은 150년 이전일 수 없습니다", "birth_date")
            )

        return Result.ok(cls(value=value))

    @classmethod
    def restore(cls, value: date) -> "BirthDate":
        return cls.model_construct(value=value)

    def age(self, today: date) -> int:
        """Age in completed years on ``today``."""
        had_birthday = (today.month, today.day) >= (self.value.month, self.value.day)
        return today.year - self.value.year - (0 if had_birthday else 1)

    def age_in(self, tz: tzinfo, now: datetime | None = None) -> int:
        """Age in completed years, using the calendar date in ``tz``."""
        return self.age(today_in(tz, now))


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return day.replace(year=day.year - years, day=28)


class Gender(str, Enum):
    """Gender enumeration."""

    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: Any) -> Result["Gender", ValidationError]:
        if not raw:
            return Result.fail(ValidationError("성별은 필수입니다", "gender"))
        try:
            return Result.ok(cls(str(raw).upper()))
        except ValueError:
            return Result.fail(ValidationError("유효하지 않은 성별입니다", "gender"))


class ChildType(str, Enum):
    """
    How a child is parented.

    CARE_FACILITY children live in a residential facility and have no
    guardian; REGULAR children are looked after by a guardian directly.
    """

    CARE_FACILITY = "CARE_FACILITY"
    REGULAR = "REGULAR"

    @property
    def is_orphan(self) -> bool:
        return self == ChildType.CARE_FACILITY

    @property
    def requires_institution(self) -> bool:
        return self == ChildType.CARE_FACILITY

    @property
    def requires_guardian(self) -> bool:
        return self == ChildType.REGULAR


class PsychologicalStatus(str, Enum):
    """Risk level detected for a child, ordered by priority."""

    NORMAL = "NORMAL"
    AT_RISK = "AT_RISK"
    HIGH_RISK = "HIGH_RISK"

    @property
    def priority(self) -> int:
        return _PSYCHOLOGICAL_PRIORITY[self]

    @property
    def is_at_risk_or_higher(self) -> bool:
        return self.priority >= _PSYCHOLOGICAL_PRIORITY[PsychologicalStatus.AT_RISK]

    @property
    def is_high_risk(self) -> bool:
        return self == PsychologicalStatus.HIGH_RISK

    def is_escalation_to(self, other: "PsychologicalStatus") -> bool:
        return other.priority > self.priority

    def is_deescalation_to(self, other: "PsychologicalStatus") -> bool:
        return other.priority < self.priority


_PSYCHOLOGICAL_PRIORITY = {
    PsychologicalStatus.NORMAL: 0,
    PsychologicalStatus.AT_RISK: 1,
    PsychologicalStatus.HIGH_RISK: 2,
}
