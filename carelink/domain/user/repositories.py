"""User repository interface."""

from abc import ABC, abstractmethod
from uuid import UUID

from carelink.domain.user.entities import User
from carelink.domain.user.value_objects import Email


class UserRepository(ABC):
    """
    Abstract repository interface for User aggregates.

    Implementations must keep e-mail addresses unique at the storage level
    and raise ``ConflictError`` on violation.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Insert or update a user.

        Raises:
            ConflictError: If the e-mail address is already taken
            RepositoryError: If persistence fails
        """

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find a user by ID."""

    @abstractmethod
    async def find_by_email(self, email: Email) -> User | None:
        """Find a user by e-mail address."""

    @abstractmethod
    async def exists_by_email(self, email: Email) -> bool:
        """Check whether an address is already registered."""

    @abstractmethod
    async def exists(self, user_id: UUID) -> bool:
        """Check whether a user exists."""
