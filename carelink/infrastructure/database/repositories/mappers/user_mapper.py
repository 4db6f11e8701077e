from carelink.domain.user import Email, Password, PhoneNumber, RealName, User, UserRole
from carelink.infrastructure.database.models import UserRecord
from carelink.infrastructure.database.repositories.mappers.common import as_utc


class UserMapper:
    """Translate User aggregates to and from ``users`` rows."""

    @staticmethod
    def domain_to_sql(user: User) -> UserRecord:
        return UserRecord(
            id=user.id,
            email=user.email.value,
            password_hash=user.password.value,
            real_name=user.real_name.value,
            phone_number=user.phone_number.value,
            role=user.role.value,
            is_email_verified=user.is_email_verified,
            is_active=user.is_active,
            last_login_at=user.last_login_at,
            refresh_token=user.refresh_token,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    @staticmethod
    def sql_to_domain(record: UserRecord) -> User:
        return User.restore(
            id=record.id,
            email=Email.restore(record.email),
            password=Password.from_hash(record.password_hash),
            real_name=RealName.restore(record.real_name),
            phone_number=PhoneNumber.restore(record.phone_number),
            role=UserRole(record.role),
            is_email_verified=record.is_email_verified,
            is_active=record.is_active,
            last_login_at=as_utc(record.last_login_at),
            refresh_token=record.refresh_token,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
