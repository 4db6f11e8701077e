"""User aggregate root."""

from datetime import datetime
from uuid import UUID

from carelink.domain.shared.base import AggregateRoot, DomainEvent, utc_now
from carelink.domain.shared.exceptions import BusinessRuleError, DomainError, ValidationError
from carelink.domain.shared.result import Result
from carelink.domain.user.value_objects import Email, Password, PhoneNumber, RealName, UserRole


class UserRegistered(DomainEvent):
    """Event raised when a new account is created."""

    email: str
    role: UserRole


class EmailVerified(DomainEvent):
    """Event raised when a user confirms their e-mail address."""

    email: str


class User(AggregateRoot):
    """
    Account of a guardian, institution admin, counselor or administrator.

    The password held here is always hashed.
    """

    email: Email
    password: Password
    real_name: RealName
    phone_number: PhoneNumber
    role: UserRole
    is_email_verified: bool = False
    is_active: bool = True
    last_login_at: datetime | None = None
    refresh_token: str | None = None

    @staticmethod
    def create(
        email: Email,
        password: Password,
        real_name: RealName,
        phone_number: PhoneNumber,
        role: UserRole,
    ) -> Result["User", ValidationError]:
        """
        Create a new, unverified account.

        Args:
            email: Validated address
            password: Hashed password
            real_name: Validated name
            phone_number: Validated mobile number
            role: Account role

        Returns:
            Result holding the user, or a failure for an unhashed password
        """
        if not password.is_hashed:
            return Result.fail(
                ValidationError("비밀번호는 해시된 상태여야 합니다", "password")
            )

        user = User(
            email=email,
            password=password,
            real_name=real_name,
            phone_number=phone_number,
            role=role,
        )
        user.add_domain_event(
            UserRegistered(aggregate_id=user.id, email=email.value, role=role)
        )
        return Result.ok(user)

    @staticmethod
    def restore(
        id: UUID,
        email: Email,
        password: Password,
        real_name: RealName,
        phone_number: PhoneNumber,
        role: UserRole,
        is_email_verified: bool,
        is_active: bool,
        last_login_at: datetime | None,
        refresh_token: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return User(
            id=id,
            email=email,
            password=password,
            real_name=real_name,
            phone_number=phone_number,
            role=role,
            is_email_verified=is_email_verified,
            is_active=is_active,
            last_login_at=last_login_at,
            refresh_token=refresh_token,
            created_at=created_at,
            updated_at=updated_at,
        )

    def verify_email(self) -> Result[None, BusinessRuleError]:
        if self.is_email_verified:
            return Result.fail(BusinessRuleError("이미 인증된 이메일입니다"))

        self.is_email_verified = True
        self.mark_updated()
        self.add_domain_event(EmailVerified(aggregate_id=self.id, email=self.email.value))
        return Result.ok()

    def change_password(self, new_password: Password) -> Result[None, DomainError]:
        if not new_password.is_hashed:
            return Result.fail(
                ValidationError("새 비밀번호는 해시된 상태여야 합니다", "password")
            )
        if new_password.value == self.password.value:
            return Result.fail(BusinessRuleError("동일한 비밀번호로 변경할 수 없습니다"))

        self.password = new_password
        self.refresh_token = None
        self.mark_updated()
        return Result.ok()

    def upgrade_password_hash(self, rehashed: Password) -> Result[None, ValidationError]:
        """Swap in a fresh hash of the same password. Sessions stay valid."""
        if not rehashed.is_hashed:
            return Result.fail(
                ValidationError("새 비밀번호는 해시된 상태여야 합니다", "password")
            )

        self.password = rehashed
        self.mark_updated()
        return Result.ok()

    def activate(self) -> None:
        self.is_active = True
        self.mark_updated()

    def deactivate(self) -> None:
        self.is_active = False
        self.refresh_token = None
        self.mark_updated()

    def record_login(self) -> Result[None, BusinessRuleError]:
        if not self.is_active:
            return Result.fail(BusinessRuleError("비활성화된 계정입니다"))

        self.last_login_at = utc_now()
        self.mark_updated()
        return Result.ok()

    def update_refresh_token(self, token: str | None) -> None:
        self.refresh_token = token
        self.mark_updated()

    def has_permission(self, permission: str) -> bool:
        return self.is_active and self.role.has_permission(permission)
