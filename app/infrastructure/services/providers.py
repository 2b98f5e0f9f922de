"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import (
    LanguageTagCache,
    LocalizationManager,
    create_localization_manager,
)
from infrastructure.services.plugins import create_plural_plugin_manager


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @app.get("/languages")
        def languages(settings: SettingsDep):
            return settings.i18n.languages

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_language_tag_cache() -> LanguageTagCache:
    """
    Get the process-scoped language tag cache.

    Returns:
        LanguageTagCache: Shared cache of parsed language tags.
    """
    return LanguageTagCache()


@lru_cache
def get_localization_manager() -> LocalizationManager:
    """
    Get application-scoped localization manager singleton.

    The manager owns the culture dictionary cache, so one instance per
    process keeps a single dictionary build per culture.

    Returns:
        LocalizationManager: Manager reading the configured locale directory,
            with Babel plural rules.

    Usage:
        @app.get("/welcome")
        def welcome(manager: LocalizationManagerDep):
            return {"message": manager.translate("fr", "[[[Welcome]]]")}
    """
    return create_localization_manager(
        get_settings(),
        plugin_manager=create_plural_plugin_manager(),
        tag_cache=get_language_tag_cache(),
    )
