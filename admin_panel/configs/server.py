"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Listener, CORS and route prefix configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Uvicorn listener and HTTP surface configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=5000, description="Listen port (env PORT)")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )
    api_prefix: str = Field(
        default="/api",
        description="Additional prefix the admin UI uses for resource routes",
    )
