import os
from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENV: str = os.getenv("ENV", "development")  # development, dev-server, production
    DEBUG: bool = ENV in ["development", "dev-server"]

    # Database settings
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "myymotto")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "myymotto")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "myymotto_db")
    POSTGRES_PORT: int = int(os.getenv("POSTGRES_PORT", "5432"))
    DATABASE_URL: str = os.getenv("DATABASE_URL", f"postgresql://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}")

    # Database connection pool settings
    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))
    DB_POOL_TIMEOUT: int = int(os.getenv("DB_POOL_TIMEOUT", "30"))
    DB_POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "3600"))

    # Calendar used to decide what "today" is for expiry checks
    APP_TIMEZONE: str = os.getenv("APP_TIMEZONE", "Asia/Kolkata")

    # Comma separated day offsets (e.g. "30,23,16,9,2"). Empty means every
    # upcoming expiry gets a reminder.
    EXPIRY_REMINDER_DAYS: str = os.getenv("EXPIRY_REMINDER_DAYS", "")

    # Dashboard "expiring soon" window
    EXPIRY_SOON_WINDOW_DAYS: int = int(os.getenv("EXPIRY_SOON_WINDOW_DAYS", "30"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG")

    # API specific settings
    API_PREFIX: str = "/api/v1"
    APP_NAME: str = "Myymotto"
    APP_VERSION: str = "1.0.0"

    @field_validator("EXPIRY_REMINDER_DAYS")
    @classmethod
    def check_reminder_days(cls, value: str) -> str:
        for part in value.split(","):
            if part.strip() and not part.strip().isdigit():
                raise ValueError(f"EXPIRY_REMINDER_DAYS must be comma separated day counts, got {value!r}")
        return value

    @property
    def expiry_reminder_days(self) -> List[int]:
        """Parsed EXPIRY_REMINDER_DAYS, ignoring blanks."""
        return [int(part) for part in self.EXPIRY_REMINDER_DAYS.split(",") if part.strip()]

    class Config:
        case_sensitive = True
        env_file = None
        validate_default = True

settings = Settings()
