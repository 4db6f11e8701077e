"""Value objects shared by institutions (care facilities)."""

import re
from typing import ClassVar

from carelink.domain.shared.base import ValueObject
from carelink.domain.shared.exceptions import ValidationError
from carelink.domain.shared.result import Result


class InstitutionName(ValueObject):
    """Display name of an institution, 2 to 100 characters."""

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 100

    value: str

    @classmethod
    def create(cls, name: str | None) -> Result["InstitutionName", ValidationError]:
        if name is None or not name.strip():
            return Result.fail(ValidationError("기관명은 필수입니다", "name"))

        trimmed = name.strip()
        if len(trimmed) < cls.MIN_LENGTH:
            return Result.fail(
                ValidationError("기관명은 최소 2자 이상이어야 합니다", "name")
            )
        if len(trimmed) > cls.MAX_LENGTH:
            return Result.fail(
                ValidationError("기관명은 최대 100자까지 가능합니다", "name")
            )

        return Result.ok(cls(value=trimmed))

    @classmethod
    def restore(cls, value: str) -> "InstitutionName":
        return cls.model_construct(value=value)


class Address(ValueObject):
    """Postal address with optional detail line and 5-digit postal code."""

    MAX_ADDRESS_LENGTH: ClassVar[int] = 200
    MAX_DETAIL_LENGTH: ClassVar[int] = 100
    POSTAL_CODE_PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9]{5}$")

    address: str
    address_detail: str | None = None
    postal_code: str | None = None

    @classmethod
    def create(
        cls,
        address: str | None,
        address_detail: str | None = None,
        postal_code: str | None = None,
    ) -> Result["Address", ValidationError]:
        trimmed_address = (address or "").strip()
        if not trimmed_address:
            return Result.fail(ValidationError("주소는 필수입니다", "address"))
        if len(trimmed_address) > cls.MAX_ADDRESS_LENGTH:
            return Result.fail(
                ValidationError("주소는 최대 200자까지 가능합니다", "address")
            )

        trimmed_detail = (address_detail or "").strip() or None
        if trimmed_detail and len(trimmed_detail) > cls.MAX_DETAIL_LENGTH:
            return Result.fail(
                ValidationError("상세 주소는 최대 100자까지 가능합니다", "address_detail")
            )

        trimmed_postal = (postal_code or "").strip() or None
        if trimmed_postal and not cls.POSTAL_CODE_PATTERN.match(trimmed_postal):
            return Result.fail(
                ValidationError("우편번호는 5자리 숫자여야 합니다", "postal_code")
            )

        return Result.ok(
            cls(
                address=trimmed_address,
                address_detail=trimmed_detail,
                postal_code=trimmed_postal,
            )
        )

    @classmethod
    def restore(
        cls, address: str, address_detail: str | None, postal_code: str | None
    ) -> "Address":
        return cls.model_construct(
            address=address, address_detail=address_detail, postal_code=postal_code
        )

    @property
    def full_address(self) -> str:
        """Address followed by the detail line, when there is one."""
        if self.address_detail:
            return f"{self.address} {self.address_detail}"
        return self.address

    def __str__(self) -> str:
        return self.full_address
