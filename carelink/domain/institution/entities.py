"""CareFacility aggregate root (residential care institution)."""

import re
from datetime import date, datetime
from uuid import UUID

from pydantic import Field

from carelink.domain.shared.base import AggregateRoot, utc_now
from carelink.domain.shared.exceptions import ValidationError
from carelink.domain.shared.result import Result
from carelink.domain.institution.value_objects import Address, InstitutionName

MAX_REPRESENTATIVE_LENGTH = 50
MIN_CAPACITY = 1
MAX_CAPACITY = 500
MAX_INTRODUCTION_LENGTH = 500

CONTACT_NUMBER_PATTERN = re.compile(r"^0\d{1,2}-\d{3,4}-\d{4}$")


def _check_representative(name: str | None) -> Result[str, ValidationError]:
    trimmed = (name or "").strip()
    if not trimmed:
        return Result.fail(ValidationError("대표자명은 필수입니다", "representative_name"))
    if len(trimmed) > MAX_REPRESENTATIVE_LENGTH:
        return Result.fail(
            ValidationError("대표자명은 최대 50자까지 가능합니다", "representative_name")
        )
    return Result.ok(trimmed)


def _check_contact_number(phone_number: str | None) -> Result[str, ValidationError]:
    trimmed = (phone_number or "").strip()
    if not trimmed:
        return Result.fail(ValidationError("연락처는 필수입니다", "phone_number"))
    if not CONTACT_NUMBER_PATTERN.match(trimmed):
        return Result.fail(
            ValidationError(
                "연락처 형식이 올바르지 않습니다 (예: 02-1234-5678)", "phone_number"
            )
        )
    return Result.ok(trimmed)


def _check_capacity(capacity: int) -> Result[int, ValidationError]:
    if capacity < MIN_CAPACITY:
        return Result.fail(ValidationError("정원은 1명 이상이어야 합니다", "capacity"))
    if capacity > MAX_CAPACITY:
        return Result.fail(ValidationError("정원은 최대 500명까지 가능합니다", "capacity"))
    return Result.ok(capacity)


def _check_introduction(introduction: str | None) -> Result[str | None, ValidationError]:
    if introduction is None:
        return Result.ok(None)
    trimmed = introduction.strip() or None
    if trimmed and len(trimmed) > MAX_INTRODUCTION_LENGTH:
        return Result.fail(
            ValidationError("소개글은 최대 500자까지 가능합니다", "introduction")
        )
    return Result.ok(trimmed)


class CareFacility(AggregateRoot):
    """
    Residential care facility that can parent children and receive reviews.

    Contact number, capacity and introduction are re-validated by every
    setter, so a facility can never hold a value ``create`` would refuse.
    """

    name: InstitutionName
    address: Address
    representative_name: str
    phone_number: str
    capacity: int
    established_date: date
    introduction: str | None = None
    is_active: bool = Field(default=True)

    @staticmethod
    def create(
        name: InstitutionName,
        address: Address,
        representative_name: str,
        phone_number: str,
        capacity: int,
        established_date: date,
        introduction: str | None = None,
        today: date | None = None,
    ) -> Result["CareFacility", ValidationError]:
        representative = _check_representative(representative_name)
        contact = _check_contact_number(phone_number)
        capacity_check = _check_capacity(capacity)
        intro = _check_introduction(introduction)

        checked = Result.combine([representative, contact, capacity_check, intro])
        if checked.is_failure:
            return Result.fail(checked.error)

        reference_day = today or utc_now().date()
        if established_date > reference_day:
            return Result.fail(
                ValidationError("설립일은 미래 날짜일 수 없습니다", "established_date")
            )

        return Result.ok(
            CareFacility(
                name=name,
                address=address,
                representative_name=representative.value,
                phone_number=contact.value,
                capacity=capacity_check.value,
                established_date=established_date,
                introduction=intro.value,
            )
        )

    @staticmethod
    def restore(
        id: UUID,
        name: InstitutionName,
        address: Address,
        representative_name: str,
        phone_number: str,
        capacity: int,
        established_date: date,
        introduction: str | None,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
    ) -> "CareFacility":
        return CareFacility(
            id=id,
            name=name,
            address=address,
            representative_name=representative_name,
            phone_number=phone_number,
            capacity=capacity,
            established_date=established_date,
            introduction=introduction,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
        )

    def update_name(self, name: InstitutionName) -> None:
        self.name = name
        self.mark_updated()

    def update_address(self, address: Address) -> None:
        self.address = address
        self.mark_updated()

    def update_representative(
        self, representative_name: str, phone_number: str
    ) -> Result[None, ValidationError]:
        representative = _check_representative(representative_name)
        if representative.is_failure:
            return Result.fail(representative.error)
        contact = _check_contact_number(phone_number)
        if contact.is_failure:
            return Result.fail(contact.error)

        self.representative_name = representative.value
        self.phone_number = contact.value
        self.mark_updated()
        return Result.ok()

    def update_capacity(self, capacity: int) -> Result[None, ValidationError]:
        return _check_capacity(capacity).map(self._apply_capacity)

    def _apply_capacity(self, capacity: int) -> None:
        self.capacity = capacity
        self.mark_updated()

    def update_introduction(self, introduction: str | None) -> Result[None, ValidationError]:
        checked = _check_introduction(introduction)
        if checked.is_failure:
            return Result.fail(checked.error)
        self.introduction = checked.value
        self.mark_updated()
        return Result.ok()

    def activate(self) -> None:
        self.is_active = True
        self.mark_updated()

    def deactivate(self) -> None:
        self.is_active = False
        self.mark_updated()
