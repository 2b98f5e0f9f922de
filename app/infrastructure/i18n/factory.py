"""Factory functions for creating i18n components.

Provides convenience functions wiring the i18n components from the
application settings.
"""

from typing import Optional

import pluggy

from infrastructure.configuration import Settings
from infrastructure.i18n.cache import DictionaryCache
from infrastructure.i18n.finder import NuggetFinder
from infrastructure.i18n.language_tag import LanguageTagCache
from infrastructure.i18n.manager import LocalizationManager
from infrastructure.i18n.merger import TranslationMerger
from infrastructure.i18n.nuggets import NuggetTokens
from infrastructure.i18n.providers import (
    LocaleDirectoryPoFileLocationProvider,
    PoFilesTranslationProvider,
)
from infrastructure.i18n.replacer import NuggetReplacer
from infrastructure.i18n.repository import PoTranslationRepository
from infrastructure.logging import get_module_logger
from infrastructure.resilience.retry import RetryConfig

logger = get_module_logger()


def create_repository(settings: Settings) -> PoTranslationRepository:
    return PoTranslationRepository(
        settings.i18n, retry_config=RetryConfig.from_settings(settings.retry)
    )


def create_nugget_finder(settings: Settings) -> NuggetFinder:
    return NuggetFinder(settings.i18n)


def create_merger(settings: Settings) -> TranslationMerger:
    return TranslationMerger(create_repository(settings))


def create_localization_manager(
    settings: Settings,
    plugin_manager: Optional[pluggy.PluginManager] = None,
    tag_cache: Optional[LanguageTagCache] = None,
    cache: Optional[DictionaryCache] = None,
) -> LocalizationManager:
    """Create a LocalizationManager reading PO files from the locale directory.

    Args:
        settings: Application settings.
        plugin_manager: Plural rule plugin manager. Without one every
            culture uses the binary default rule.
        tag_cache: Shared language tag cache (default: a new cache).
        cache: Shared dictionary cache (default: a new cache).

    Returns:
        LocalizationManager: Configured manager.

    Usage:
        manager = create_localization_manager(
            get_settings(), plugin_manager=create_plural_plugin_manager()
        )
        body = manager.translate("fr", body)
    """
    i18n = settings.i18n
    location_provider = LocaleDirectoryPoFileLocationProvider(i18n, tag_cache=tag_cache)
    translation_provider = PoFilesTranslationProvider(
        location_provider, retry_config=RetryConfig.from_settings(settings.retry)
    )
    replacer = NuggetReplacer(
        NuggetTokens.from_settings(i18n),
        message_context_from_comment=i18n.message_context_enabled_from_comment,
    )
    manager = LocalizationManager(
        translation_provider,
        plugin_manager=plugin_manager,
        cache=cache,
        replacer=replacer,
        cache_enabled=i18n.cache_enabled,
        is_development=settings.is_development,
    )

    logger.info(
        "localization_manager_created",
        locale_directory=i18n.locale_root,
        cache_enabled=not manager.disable_cache,
    )
    return manager
