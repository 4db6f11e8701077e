"""
Password hashing with passlib.

Argon2 hashes new passwords. bcrypt hashes from older accounts still verify,
and ``needs_rehash`` reports them so they can be upgraded on next login.
"""

from passlib.context import CryptContext

from carelink.core.config import settings
from carelink.domain.user import PasswordHasher


class PasslibPasswordHasher(PasswordHasher):
    def __init__(self, schemes: list[str] | None = None):
        self._context = CryptContext(
            schemes=schemes or settings.PASSWORD_HASH_SCHEMES,
            deprecated="auto",
        )

    def hash(self, plain: str) -> str:
        return self._context.hash(plain)

    def verify(self, plain: str, hashed: str) -> bool:
        # Unknown or malformed hashes never match
        try:
            return self._context.verify(plain, hashed)
        except ValueError:
            return False

    def is_hash(self, value: str) -> bool:
        return self._context.identify(value) is not None

    def needs_rehash(self, hashed: str) -> bool:
        return self._context.needs_update(hashed)
