"""SQL implementation of the user repository."""

from uuid import UUID

from sqlmodel import col

from carelink.domain.user import Email, User, UserRepository
from carelink.infrastructure.database.models import UserRecord
from carelink.infrastructure.database.repositories.base import SQLRepository
from carelink.infrastructure.database.repositories.mappers import UserMapper


class SQLUserRepository(SQLRepository[UserRecord, User], UserRepository):
    """Users stored in the ``users`` table; ``uq_users_email`` keeps addresses unique."""

    record_class = UserRecord
    mapper = UserMapper

    async def save(self, user: User) -> User:
        return self._save(user)

    async def find_by_id(self, user_id: UUID) -> User | None:
        return self._get(user_id)

    async def find_by_email(self, email: Email) -> User | None:
        return self._first(col(UserRecord.email) == email.value)

    async def exists_by_email(self, email: Email) -> bool:
        return self._exists(col(UserRecord.email) == email.value)

    async def exists(self, user_id: UUID) -> bool:
        return self._exists(col(UserRecord.id) == user_id)
