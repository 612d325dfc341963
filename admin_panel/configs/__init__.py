"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from admin_panel.configs.database import DatabaseSettings
from admin_panel.configs.server import ServerSettings
from admin_panel.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "ServerSettings", "Settings", "get_settings"]
