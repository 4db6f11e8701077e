"""User registration and credential use cases."""

from carelink.domain.shared import (
    BusinessRuleError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    Result,
)
from carelink.domain.user import (
    Email,
    Password,
    PasswordHasher,
    PhoneNumber,
    RealName,
    User,
    UserRepository,
    UserRole,
)
from carelink.application.dispatch import BestEffortDispatcher
from carelink.application.dtos.user_dtos import (
    AuthenticateUserCommand,
    ChangePasswordCommand,
    RegisterUserCommand,
    UserResponse,
)
from carelink.application.ports import NotificationGateway
from carelink.application.use_cases.base import UseCase

DUPLICATE_EMAIL_MESSAGE = "이미 사용 중인 이메일입니다"
INVALID_CREDENTIALS_MESSAGE = "이메일 또는 비밀번호가 올바르지 않습니다"


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email.value,
        real_name=user.real_name.value,
        phone_number=user.phone_number.value,
        role=user.role.value,
        role_display_name=user.role.display_name,
        is_email_verified=user.is_email_verified,
        is_active=user.is_active,
        last_login_at=user.last_login_at,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


def _duplicate_email(email: Email) -> ConflictError:
    return ConflictError(
        DUPLICATE_EMAIL_MESSAGE, code="DUPLICATE_EMAIL", details={"email": email.value}
    )


class RegisterUserUseCase(UseCase):
    """
    Create an account and send the welcome message in the background.

    E-mail uniqueness is enforced by storage; the lookup before hashing only
    avoids the hashing cost for obvious duplicates.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        notifications: NotificationGateway,
        dispatcher: BestEffortDispatcher,
    ):
        super().__init__()
        self._users = user_repository
        self._hasher = password_hasher
        self._notifications = notifications
        self._dispatcher = dispatcher

    async def execute(self, command: RegisterUserCommand) -> Result[UserResponse, DomainError]:
        email = Email.create(command.email)
        password = Password.create(command.password, check_strength=True)
        real_name = RealName.create(command.real_name)
        phone_number = PhoneNumber.create(command.phone_number)
        role = UserRole.parse(command.role)
        checked = Result.combine([email, password, real_name, phone_number, role])
        if checked.is_failure:
            return self.reject(checked.error)

        if await self._users.exists_by_email(email.value):
            return self.reject(_duplicate_email(email.value))

        created = User.create(
            email=email.value,
            password=password.value.hash(self._hasher),
            real_name=real_name.value,
            phone_number=phone_number.value,
            role=role.value,
        )
        if created.is_failure:
            return self.reject(created.error)

        try:
            user = await self._users.save(created.value)
        except ConflictError:
            return self.reject(_duplicate_email(email.value))

        self._dispatcher.dispatch(
            "welcome_notification",
            lambda: self._notifications.send_welcome(
                user_id=user.id, email=user.email.value, real_name=user.real_name.value
            ),
        )

        return self.succeed(
            to_user_response(user), user_id=str(user.id), role=user.role.value
        )


class ChangePasswordUseCase(UseCase):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        super().__init__()
        self._users = user_repository
        self._hasher = password_hasher

    async def execute(self, command: ChangePasswordCommand) -> Result[None, DomainError]:
        user = await self._users.find_by_id(command.user_id)
        if user is None:
            return self.reject(
                NotFoundError("사용자를 찾을 수 없습니다", code="USER_NOT_FOUND"),
                user_id=str(command.user_id),
            )

        if not user.password.verify(command.current_password, self._hasher):
            return self.reject(
                ForbiddenError(
                    "현재 비밀번호가 올바르지 않습니다", code="INVALID_CURRENT_PASSWORD"
                ),
                user_id=str(command.user_id),
            )

        new_password = Password.create(command.new_password, check_strength=True)
        if new_password.is_failure:
            return self.reject(new_password.error, user_id=str(command.user_id))

        # Salted hashes never compare equal, so sameness is checked on the plain text.
        if user.password.verify(new_password.value.value, self._hasher):
            return self.reject(
                BusinessRuleError("동일한 비밀번호로 변경할 수 없습니다", code="SAME_PASSWORD"),
                user_id=str(command.user_id),
            )

        changed = user.change_password(new_password.value.hash(self._hasher))
        if changed.is_failure:
            return self.reject(changed.error, user_id=str(command.user_id))

        await self._users.save(user)
        return self.succeed(user_id=str(command.user_id))


def _invalid_credentials() -> ForbiddenError:
    return ForbiddenError(INVALID_CREDENTIALS_MESSAGE, code="INVALID_CREDENTIALS")


class AuthenticateUserUseCase(UseCase):
    """
    Check a login attempt and record it.

    Unknown addresses and wrong passwords fail the same way. A stored value
    the hasher does not recognise is treated as unusable rather than
    compared. Hashes from a retired scheme are replaced with a fresh hash
    of the password that was just verified.
    """

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        super().__init__()
        self._users = user_repository
        self._hasher = password_hasher

    async def execute(
        self, command: AuthenticateUserCommand
    ) -> Result[UserResponse, DomainError]:
        email = Email.create(command.email)
        if email.is_failure:
            return self.reject(_invalid_credentials(), reason="malformed_email")

        user = await self._users.find_by_email(email.value)
        if user is None:
            return self.reject(_invalid_credentials(), reason="unknown_email")

        stored = user.password.value
        if not self._hasher.is_hash(stored):
            return self.reject(
                _invalid_credentials(), user_id=str(user.id), reason="unrecognized_hash"
            )
        if not user.password.verify(command.password, self._hasher):
            return self.reject(
                _invalid_credentials(), user_id=str(user.id), reason="wrong_password"
            )

        logged_in = user.record_login()
        if logged_in.is_failure:
            return self.reject(logged_in.error, user_id=str(user.id))

        rehashed = self._hasher.needs_rehash(stored)
        if rehashed:
            upgraded = user.upgrade_password_hash(
                Password.from_hash(self._hasher.hash(command.password))
            )
            if upgraded.is_failure:
                return self.reject(upgraded.error, user_id=str(user.id))

        saved = await self._users.save(user)
        return self.succeed(
            to_user_response(saved), user_id=str(saved.id), rehashed=rehashed
        )
