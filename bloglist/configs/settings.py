"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend application.
"""

from pathlib import Path
from typing import Literal, NamedTuple

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Validation constants ---
USERNAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 3

# Column sizes; validators enforce the same limits
SHORT_TEXT_MAX_LENGTH = 255
URL_MAX_LENGTH = 2048
LIKES_MAX = 2**31 - 1

# Response constants
DEFAULT_ERROR_MESSAGE = "An unexpected server error occurred."
FORBIDDEN_DELETE_MESSAGE = "forbidden - you can only delete your own blog"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"
    PRODUCTION_FRONTEND_URL: str | None = None

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # JWT Configuration
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist-backend"
    JWT_AUDIENCE: str = "bloglist-clients"

    # Password hashing
    PASSWORD_SECURITY_LEVEL: Literal["low", "medium", "high"] = "medium"


settings = Settings()


class Argon2Config(NamedTuple):
    """Argon2id cost parameters for one security level."""

    memory_cost: int
    time_cost: int
    parallelism: int


CONFIG_MAP: dict[str, Argon2Config] = {
    "low": Argon2Config(memory_cost=8192, time_cost=1, parallelism=1),
    "medium": Argon2Config(memory_cost=65536, time_cost=2, parallelism=2),
    "high": Argon2Config(memory_cost=262144, time_cost=3, parallelism=4),
}
