"""Translation and translation file location providers."""

import os
from typing import Iterator, Optional, Protocol

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.i18n.dictionary import CultureDictionary
from infrastructure.i18n.language_tag import LanguageTagCache
from infrastructure.i18n.po import PoParser
from infrastructure.i18n.repository import TRANSLATION_EXTENSION
from infrastructure.logging import get_module_logger
from infrastructure.resilience.retry import RetryConfig, retry_call

logger = get_module_logger()


class FileLocationProvider(Protocol):
    """Yields candidate translation file paths for a culture."""

    def get_locations(self, culture: str) -> Iterator[str]: ...


class TranslationProvider(Protocol):
    """Fills a culture dictionary with the culture's translations."""

    def load_translations(self, culture: str, dictionary: CultureDictionary) -> None: ...


class LocaleDirectoryPoFileLocationProvider:
    """PO files below the locale directory, least specific tag first.

    For ``fr-CA`` with other files ``errors`` this yields::

        <locale>/fr/messages.po
        <locale>/fr/errors.po
        <locale>/fr-CA/messages.po
        <locale>/fr-CA/errors.po

    Args:
        settings: Localization settings.
        tag_cache: Shared language tag cache.
    """

    def __init__(self, settings: I18nSettings, tag_cache: Optional[LanguageTagCache] = None):
        if settings is None:
            raise ValueError("settings is required")
        self.settings = settings
        self.tag_cache = tag_cache if tag_cache is not None else LanguageTagCache()

    def get_locations(self, culture: str) -> Iterator[str]:
        tag = self.tag_cache.get(culture)
        if tag is None:
            logger.warning("culture_invalid", culture=culture)
            return

        file_names = [self.settings.locale_filename, *self.settings.other_locale_files]
        for language_tag in reversed(tag.parents()):
            for file_name in file_names:
                yield os.path.join(
                    self.settings.locale_root,
                    language_tag.tag,
                    file_name + TRANSLATION_EXTENSION,
                )


class PoFilesTranslationProvider:
    """Loads every existing PO file a location provider yields.

    Later files override earlier ones, so a region file wins over its
    language file.

    Args:
        location_provider: Source of candidate paths.
        retry_config: Retry policy for file opens.
    """

    def __init__(
        self,
        location_provider: FileLocationProvider,
        retry_config: Optional[RetryConfig] = None,
    ):
        if location_provider is None:
            raise ValueError("location_provider is required")
        self.location_provider = location_provider
        self.retry_config = retry_config or RetryConfig()
        self.parser = PoParser()

    def load_translations(self, culture: str, dictionary: CultureDictionary) -> None:
        if dictionary is None:
            raise ValueError("dictionary is required")
        for path in self.location_provider.get_locations(culture):
            if not os.path.isfile(path):
                continue
            with retry_call(lambda: open(path, "r", encoding="utf-8-sig"), self.retry_config) as f:
                dictionary.merge_translations(self.parser.parse(f))
            logger.debug("translation_file_loaded", culture=culture, path=path)
