"""
Database configuration settings.

Manages PostgreSQL connection parameters for SQLAlchemy.
Supports connection pooling and async operations.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """PostgreSQL database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    host: str = Field(default="localhost", description="PostgreSQL host")
    port: int = Field(default=5432, description="PostgreSQL port")
    user: str = Field(default="postgres", description="PostgreSQL user")
    # DB_PASS is the variable name deployments already export
    password: str | None = Field(
        default=None,
        validation_alias="DB_PASS",
        description="PostgreSQL password",
    )
    name: str = Field(default="admin_panel", description="PostgreSQL database name")

    url: str | None = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the individual parameters when set",
    )

    pool_size: int = Field(default=10, description="Connection pool size")
    max_overflow: int = Field(default=20, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @field_validator("password", mode="before")
    @classmethod
    def strip_password(cls, value: object) -> object:
        """Drop stray CR/LF or whitespace that .env editors leave behind."""
        if value is None:
            return None
        return str(value).strip()

    @property
    def async_database_url(self) -> str:
        """
        Construct async PostgreSQL connection URL.

        Returns:
            str: SQLAlchemy async-compatible database URL, or the explicit
            `url` override when configured
        """
        if self.url:
            return self.url
        credentials = self.user if self.password is None else f"{self.user}:{self.password}"
        return (
            f"postgresql+asyncpg://{credentials}"
            f"@{self.host}:{self.port}/{self.name}"
        )

    @property
    def is_sqlite(self) -> bool:
        """True when the configured store is SQLite (tests, local demos)."""
        return self.async_database_url.startswith("sqlite")
