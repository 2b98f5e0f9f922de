"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the nugget
i18n application using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Localization settings class
    RetrySettings: Retry settings class
    SettingsProvider: Key-value settings source

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    tokens = (settings.i18n.nugget_begin_token, settings.i18n.nugget_end_token)
    if settings.is_development:
        # Development-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure import I18nSettings, RetrySettings
from infrastructure.configuration.provider import SettingsProvider

__all__ = [
    "Settings",
    "settings",
    "I18nSettings",
    "RetrySettings",
    "SettingsProvider",
]
