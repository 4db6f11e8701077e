from typing import Annotated, Any, Literal
from zoneinfo import ZoneInfo

from pydantic import BeforeValidator, HttpUrl, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


def parse_schemes(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "carelink"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"

    # Observability Configuration
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"
    LOG_SQL: bool = False

    DATABASE_URL: str = "sqlite:///./carelink.db"

    # Reference zone for calendar dates (ages, "today")
    SERVICE_TIMEZONE: str = "Asia/Seoul"

    @property
    def service_timezone(self) -> ZoneInfo:
        return ZoneInfo(self.SERVICE_TIMEZONE)

    # Notification service (welcome mails, report approval notices)
    NOTIFICATION_BASE_URL: HttpUrl | None = None
    NOTIFICATION_TIMEOUT_SECONDS: float = 5.0
    NOTIFICATION_MAX_ATTEMPTS: int = 3

    @computed_field  # type: ignore[prop-decorator]
    @property
    def notifications_enabled(self) -> bool:
        return self.NOTIFICATION_BASE_URL is not None

    # First scheme hashes new passwords; the rest are still verified
    PASSWORD_HASH_SCHEMES: Annotated[list[str] | str, BeforeValidator(parse_schemes)] = [
        "argon2",
        "bcrypt",
    ]


settings = Settings()  # type: ignore
