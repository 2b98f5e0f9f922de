"""Culture dictionary management for request-time localization."""

from typing import Optional

import pluggy

from infrastructure.i18n.cache import DictionaryCache
from infrastructure.i18n.dictionary import CultureDictionary, default_plural_rule
from infrastructure.i18n.providers import TranslationProvider
from infrastructure.i18n.replacer import NuggetReplacer
from infrastructure.logging import get_module_logger

logger = get_module_logger()

CACHE_KEY_PREFIX = "CultureDictionary-"


class LocalizationManager:
    """Builds and caches one culture dictionary per culture.

    A dictionary is built at most once per culture until it is
    invalidated; concurrent first requests wait for that single build.

    Args:
        translation_provider: Loads translations into a new dictionary.
        plugin_manager: pluggy manager answering ``i18n_plural_rule``.
            Without one every culture uses the binary default rule.
        cache: Dictionary cache. A private cache is created if omitted.
        replacer: Nugget replacer used by ``translate``.
        cache_enabled: Keep built dictionaries between calls.
        is_development: Development environment; disables the cache.

    Example:
        ```python
        manager = create_localization_manager(settings)
        html = manager.translate("fr", "<h1>[[[Welcome]]]</h1>")
        ```
    """

    def __init__(
        self,
        translation_provider: TranslationProvider,
        plugin_manager: Optional[pluggy.PluginManager] = None,
        cache: Optional[DictionaryCache[CultureDictionary]] = None,
        replacer: Optional[NuggetReplacer] = None,
        cache_enabled: bool = True,
        is_development: bool = False,
    ):
        if translation_provider is None:
            raise ValueError("translation_provider is required")
        self.translation_provider = translation_provider
        self.plugin_manager = plugin_manager
        self.cache: DictionaryCache[CultureDictionary] = (
            cache if cache is not None else DictionaryCache()
        )
        self.replacer = replacer or NuggetReplacer()
        self.is_development = is_development
        self.disable_cache = is_development or not cache_enabled

    def get_dictionary(self, culture: str, disable_cache: bool = False) -> CultureDictionary:
        """Return the culture's dictionary, building it on a cache miss.

        Args:
            culture: Culture name (e.g. "fr-CA").
            disable_cache: Drop any cached dictionary and build a new one.

        Returns:
            Sealed CultureDictionary.
        """
        if culture is None:
            raise ValueError("culture is required")

        key = CACHE_KEY_PREFIX + culture
        if disable_cache or self.disable_cache:
            self.cache.remove(key)
            if self.is_development:
                logger.warning(
                    "dictionary_cache_disabled",
                    culture=culture,
                    detail="Translations are built per request. This is only normal during development.",
                )

        return self.cache.get_or_create(key, lambda: self._build_dictionary(culture))

    def translate(self, culture: str, text: str) -> str:
        """Replace the nuggets in ``text`` with the culture's translations."""
        return self.replacer.replace(self.get_dictionary(culture), text)

    def invalidate(self, culture: str) -> bool:
        """Drop a culture's cached dictionary.

        Returns:
            True if a dictionary was cached.
        """
        removed = self.cache.remove(CACHE_KEY_PREFIX + culture)
        if removed:
            logger.info("dictionary_invalidated", culture=culture)
        return removed

    def clear(self) -> None:
        self.cache.clear()
        logger.info("dictionary_cache_cleared")

    def _build_dictionary(self, culture: str) -> CultureDictionary:
        rule = None
        if self.plugin_manager is not None:
            rule = self.plugin_manager.hook.i18n_plural_rule(culture=culture)

        dictionary = CultureDictionary(culture, rule or default_plural_rule)
        self.translation_provider.load_translations(culture, dictionary)
        dictionary.seal()

        logger.info("dictionary_built", culture=culture, record_count=len(dictionary))
        return dictionary
