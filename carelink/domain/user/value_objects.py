"""Value objects for user accounts."""

import re
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar

from carelink.domain.shared.base import ValueObject
from carelink.domain.shared.exceptions import ValidationError
from carelink.domain.shared.result import Result


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, plain: str) -> str:
        """Hash a plain-text password."""

    @abstractmethod
    def verify(self, plain: str, hashed: str) -> bool:
        """Check a plain-text password against a stored hash."""

    @abstractmethod
    def is_hash(self, value: str) -> bool:
        """Whether ``value`` looks like a hash this hasher produced."""

    @abstractmethod
    def needs_rehash(self, hashed: str) -> bool:
        """Whether ``hashed`` verifies but uses a retired scheme or settings."""


class Password(ValueObject):
    """
    Account password, either plain (freshly entered) or hashed.

    Plain passwords must pass the strength rules in ``create``. Hashes
    loaded from storage come in through ``from_hash`` and are never
    re-validated.
    """

    MIN_LENGTH: ClassVar[int] = 8
    MAX_LENGTH: ClassVar[int] = 100
    STRENGTH_PATTERN: ClassVar[re.Pattern] = re.compile(
        r"^(?=.*[A-Za-z])(?=.*\d)(?=.*[@$!%*#?&])[A-Za-z\d@$!%*#?&]"
    )
    WEAK_PATTERNS: ClassVar[tuple[re.Pattern, ...]] = (
        re.compile(r"password", re.IGNORECASE),
        re.compile(r"123456"),
        re.compile(r"qwerty", re.IGNORECASE),
        re.compile(r"admin", re.IGNORECASE),
        re.compile(r"letmein", re.IGNORECASE),
        re.compile(r"(.)\1{2,}"),
    )

    value: str
    is_hashed: bool = False

    @classmethod
    def create(
        cls, plain: str | None, check_strength: bool = False
    ) -> Result["Password", ValidationError]:
        """
        Validate a freshly entered password.

        Args:
            plain: Password as entered (surrounding whitespace is dropped)
            check_strength: Also reject common or repetitive passwords
        """
        if not plain or not plain.strip():
            return Result.fail(ValidationError("비밀번호는 필수입니다", "password"))

        trimmed = plain.strip()
        if len(trimmed) < cls.MIN_LENGTH:
            return Result.fail(ValidationError("비밀번호는 8자 이상이어야 합니다", "password"))
        if len(trimmed) > cls.MAX_LENGTH:
            return Result.fail(
                ValidationError("비밀번호는 100자를 초과할 수 없습니다", "password")
            )
        if not cls.STRENGTH_PATTERN.match(trimmed):
            return Result.fail(
                ValidationError(
                    "비밀번호는 영문, 숫자, 특수문자를 포함해야 합니다", "password"
                )
            )
        if check_strength and cls.is_weak(trimmed):
            return Result.fail(
                ValidationError(
                    "약한 비밀번호입니다. 더 강력한 비밀번호를 사용하세요", "password"
                )
            )

        return Result.ok(cls(value=trimmed, is_hashed=False))

    @classmethod
    def is_weak(cls, plain: str) -> bool:
        return any(pattern.search(plain) for pattern in cls.WEAK_PATTERNS)

    @classmethod
    def from_hash(cls, hashed: str) -> "Password":
        return cls.model_construct(value=hashed, is_hashed=True)

    def hash(self, hasher: PasswordHasher) -> "Password":
        """Hashed copy of this password (itself when already hashed)."""
        if self.is_hashed:
            return self
        return Password.from_hash(hasher.hash(self.value))

    def verify(self, plain: str, hasher: PasswordHasher) -> bool:
        if not self.is_hashed:
            raise ValueError("해시된 비밀번호만 비교할 수 있습니다")
        return hasher.verify(plain, self.value)

    def __repr__(self) -> str:
        return f"Password(is_hashed={self.is_hashed})"

    __str__ = __repr__


class PhoneNumber(ValueObject):
    """Korean mobile number, stored as 010-XXXX-XXXX."""

    PATTERN: ClassVar[re.Pattern] = re.compile(r"^010\d{8}$")

    value: str

    @classmethod
    def create(cls, raw: str | None) -> Result["PhoneNumber", ValidationError]:
        if not raw or not raw.strip():
            return Result.fail(ValidationError("전화번호는 필수입니다", "phone_number"))

        digits = re.sub(r"\D", "", raw)
        if not cls.PATTERN.match(digits):
            return Result.fail(
                ValidationError(
                    "올바른 전화번호 형식이 아닙니다 (010-xxxx-xxxx)", "phone_number"
                )
            )

        return Result.ok(cls(value=f"{digits[:3]}-{digits[3:7]}-{digits[7:]}"))

    @classmethod
    def restore(cls, value: str) -> "PhoneNumber":
        return cls.model_construct(value=value)

    @property
    def digits(self) -> str:
        return self.value.replace("-", "")

    def mask(self) -> str:
        """010-****-5678"""
        return f"{self.value[:3]}-****-{self.value[-4:]}"


class Email(ValueObject):
    """Lower-cased e-mail address."""

    MAX_LENGTH: ClassVar[int] = 100
    PATTERN: ClassVar[re.Pattern] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

    value: str

    @classmethod
    def create(
        cls, raw: str | None, allowed_domains: list[str] | None = None
    ) -> Result["Email", ValidationError]:
        """
        Validate and normalize an address.

        Args:
            raw: Address as entered
            allowed_domains: When given, only these domains are accepted
        """
        if not raw or not raw.strip():
            return Result.fail(ValidationError("이메일은 필수입니다", "email"))

        normalized = raw.strip().lower()
        if len(normalized) > cls.MAX_LENGTH:
            return Result.fail(ValidationError("이메일은 100자를 초과할 수 없습니다", "email"))
        if not cls.PATTERN.match(normalized):
            return Result.fail(ValidationError("올바른 이메일 형식이 아닙니다", "email"))

        domain = normalized.split("@", 1)[1]
        if allowed_domains is not None and domain not in {
            d.lower() for d in allowed_domains
        }:
            return Result.fail(ValidationError(f"허용되지 않은 도메인입니다: {domain}", "email"))

        return Result.ok(cls(value=normalized))

    @classmethod
    def restore(cls, value: str) -> "Email":
        return cls.model_construct(value=value)

    @property
    def domain(self) -> str:
        return self.value.split("@", 1)[1]

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]


class RealName(ValueObject):
    """Person's legal name: Hangul or Latin letters and spaces."""

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 50
    PATTERN: ClassVar[re.Pattern] = re.compile(r"^[가-힣a-zA-Z\s]+$")

    value: str

    @classmethod
    def create(cls, raw: str | None) -> Result["RealName", ValidationError]:
        if not raw or not raw.strip():
            return Result.fail(ValidationError("이름은 필수입니다", "real_name"))

        trimmed = raw.strip()
        if len(trimmed) < cls.MIN_LENGTH:
            return Result.fail(ValidationError("이름은 2자 이상이어야 합니다", "real_name"))
        if len(trimmed) > cls.MAX_LENGTH:
            return Result.fail(ValidationError("이름은 50자를 초과할 수 없습니다", "real_name"))
        if not cls.PATTERN.match(trimmed):
            return Result.fail(
                ValidationError(
                    "이름은 한글 또는 영문만 입력 가능합니다 (특수문자 불가)", "real_name"
                )
            )

        return Result.ok(cls(value=trimmed))

    @classmethod
    def restore(cls, value: str) -> "RealName":
        return cls.model_construct(value=value)

    def mask(self) -> str:
        """Keep the first and last characters (홍길동 -> 홍*동, 홍길 -> 홍*)."""
        if len(self.value) <= 2:
            return self.value[0] + "*"
        return self.value[0] + "*" * (len(self.value) - 2) + self.value[-1]


class UserRole(str, Enum):
    """Account role and the permissions it grants."""

    GUARDIAN = "GUARDIAN"
    INSTITUTION_ADMIN = "INSTITUTION_ADMIN"
    COUNSELOR = "COUNSELOR"
    ADMIN = "ADMIN"

    @classmethod
    def parse(cls, raw: Any) -> Result["UserRole", ValidationError]:
        try:
            return Result.ok(cls(str(raw).upper()))
        except ValueError:
            return Result.fail(ValidationError(f"유효하지 않은 역할입니다: {raw}", "role"))

    @property
    def display_name(self) -> str:
        return _ROLE_DISPLAY_NAMES[self]

    @property
    def permissions(self) -> frozenset[str]:
        return _ROLE_PERMISSIONS[self]

    def has_permission(self, permission: str) -> bool:
        granted = self.permissions
        return "*" in granted or permission in granted

    def has_any_permission(self, permissions: list[str]) -> bool:
        return any(self.has_permission(p) for p in permissions)

    def has_all_permissions(self, permissions: list[str]) -> bool:
        return all(self.has_permission(p) for p in permissions)


_ROLE_DISPLAY_NAMES = {
    UserRole.GUARDIAN: "보호자",
    UserRole.INSTITUTION_ADMIN: "기관 대표",
    UserRole.COUNSELOR: "상담사",
    UserRole.ADMIN: "시스템 관리자",
}

_ROLE_PERMISSIONS = {
    UserRole.GUARDIAN: frozenset(
        {
            "view:own-children",
            "request:counseling",
            "view:counseling-reports",
            "update:own-profile",
        }
    ),
    UserRole.INSTITUTION_ADMIN: frozenset(
        {
            "manage:institution",
            "manage:counselors",
            "view:institution-reports",
            "approve:counselors",
            "update:own-profile",
        }
    ),
    UserRole.COUNSELOR: frozenset(
        {
            "view:assigned-cases",
            "write:reports",
            "update:case-notes",
            "request:supervision",
            "update:own-profile",
        }
    ),
    UserRole.ADMIN: frozenset({"*"}),
}
