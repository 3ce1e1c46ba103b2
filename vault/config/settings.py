"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from loguru import logger
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vault.config.constants import DEFAULT_ADMIN_USERNAME


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite+aiosqlite:///./database/accounts.db"
    database_echo: bool = False

    # Admin
    admin_username: str = DEFAULT_ADMIN_USERNAME

    # Security
    bcrypt_rounds: int = Field(
        default=10,
        ge=4,
        le=15,
        description="bcrypt cost factor for every stored secret",
    )

    # Storage
    storage_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for a single credential store operation",
    )

    # Sessions
    session_cleanup_interval_minutes: int = Field(
        default=60,
        ge=1,
        description="Interval of the expired session sweep",
    )

    # Accounts
    max_images_per_account: int = Field(
        default=40,
        ge=0,
        description="Maximum image references stored per account",
    )

    # Application
    log_level: str = "INFO"
    log_file: str | None = "logs/vault.log"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL uses an async driver."""
        if not v.startswith(("sqlite+aiosqlite://", "postgresql+asyncpg://")):
            raise ValueError(
                "DATABASE_URL must start with sqlite+aiosqlite:// "
                "or postgresql+asyncpg://"
            )
        return v

    @field_validator("admin_username")
    @classmethod
    def validate_admin_username(cls, v: str) -> str:
        """Fall back to the default admin username when blank."""
        v = (v or "").strip()
        if not v:
            logger.warning(
                f"ADMIN_USERNAME is empty, using '{DEFAULT_ADMIN_USERNAME}'"
            )
            return DEFAULT_ADMIN_USERNAME
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        return v.strip().upper()
