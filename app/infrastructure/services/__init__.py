"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    LocalizationManagerDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_language_tag_cache,
    get_localization_manager,
)

__all__ = [
    "SettingsDep",
    "LocalizationManagerDep",
    "get_settings",
    "get_language_tag_cache",
    "get_localization_manager",
]
