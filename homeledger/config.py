"""
Application configuration.

All settings are read from environment variables (or a project-root .env
file) with local development defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings -- single source of truth for env-driven config."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # -- App --
    APP_NAME: str = "homeledger"

    # -- Logging --
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Path = Field(
        default=_PROJECT_ROOT / "logs",
        description="Directory for the application and error log files.",
    )
    LOG_MAX_BYTES: int = 10 * 1024 * 1024
    LOG_BACKUP_COUNT: int = 5
    SQL_LOG_LEVEL: str = Field(
        default="WARNING",
        description="Level for SQLAlchemy engine logging (INFO echoes statements).",
    )

    # -- Server --
    HOST: str = "0.0.0.0"
    PORT: int = 4000

    # -- Database --
    DATABASE_URL: str = Field(
        default="sqlite:///./homeledger.db",
        description="SQLAlchemy connection string for the record store.",
    )

    # -- Auth --
    JWT_SECRET: str = Field(
        default="homeledger-development-signing-secret-change-me",
        description="Static secret used to sign issued tokens.",
    )
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_SECONDS: int = Field(
        default=3600,
        description="Token lifetime in seconds (default one hour).",
    )
    BCRYPT_ROUNDS: int = Field(
        default=10,
        description="bcrypt cost factor used when hashing passwords.",
    )


settings = Settings()
