"""User accounts, credentials and roles."""

from carelink.domain.user.entities import EmailVerified, User, UserRegistered
from carelink.domain.user.repositories import UserRepository
from carelink.domain.user.value_objects import Email, Password, PasswordHasher, PhoneNumber, RealName, UserRole

__all__ = [
    "User",
    "UserRegistered",
    "EmailVerified",
    "UserRepository",
    "Email",
    "Password",
    "PasswordHasher",
    "PhoneNumber",
    "RealName",
    "UserRole",
]
