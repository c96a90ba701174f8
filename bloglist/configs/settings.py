"""Application settings and configuration constants.

This module contains application settings, constants, and configuration
values for the Bloglist backend application.
"""

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings.main import BaseSettings, SettingsConfigDict

ENV_FILE = Path(__file__).parent.parent.parent / ".env"

# --- Constants ---
MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_TITLE_LENGTH = 200
MAX_URL_LENGTH = 2048
# Largest value a signed 64-bit integer column can bind
MAX_LIKES = 2**63 - 1

# Response constants
TOKEN_INVALID_MESSAGE = "token invalid"
USER_NOT_AUTHORIZED_MESSAGE = "user not authorized"
MALFORMATTED_ID_MESSAGE = "malformatted id"


class Settings(BaseSettings):
    """Application settings with validation and default values."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Bloglist Backend"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Environment
    ENVIRONMENT: Literal["development", "test", "production"] = "development"
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False
    LOG_FILE: str = "logs/bloglist.log"

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 3003
    ALLOWED_ORIGINS: list[str] = ["*"]

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./bloglist.db"
    DATABASE_ECHO: bool = False

    # JWT
    SECRET_KEY: SecretStr = SecretStr("change-me-in-production")
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    JWT_ISSUER: str = "bloglist"
    JWT_AUDIENCE: str = "bloglist-api"

    # Argon2id parameters
    ARGON2_MEMORY_COST: int = 65536  # KiB
    ARGON2_TIME_COST: int = 3
    ARGON2_PARALLELISM: int = 4


settings = Settings()
