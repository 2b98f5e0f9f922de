"""PO/POT file persistence of templates and translations.

Layout below the locale directory:

    <locale>/<filename>.pot           template
    <locale>/<FileName>.pot           per source file name templates
    <locale>/<lang>/<filename>.po     translations
"""

import os
import shutil
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.i18n.language_tag import LanguageTag
from infrastructure.i18n.models import Language, TemplateItem, Translation, TranslationItem
from infrastructure.i18n.po import PoParser, PoWriter
from infrastructure.logging import get_module_logger
from infrastructure.resilience.retry import RetryConfig, retry_call

logger = get_module_logger()

TEMPLATE_EXTENSION = ".pot"
TRANSLATION_EXTENSION = ".po"
BACKUP_EXTENSION = ".bak"


class PoTranslationRepository:
    """Reads and writes templates and per-language translations.

    Args:
        settings: Localization settings.
        retry_config: Retry policy for file opens.
    """

    def __init__(self, settings: I18nSettings, retry_config: Optional[RetryConfig] = None):
        if settings is None:
            raise ValueError("settings is required")
        self.settings = settings
        self.retry_config = retry_config or RetryConfig()
        self.parser = PoParser()
        self.writer = PoWriter(
            message_context_from_comment=settings.message_context_enabled_from_comment,
            show_source_context=settings.show_source_context,
        )

    @property
    def locale_directory(self) -> str:
        return self.settings.locale_root

    def template_path(self, file_name: Optional[str] = None) -> str:
        name = file_name if file_name and file_name.strip() else self.settings.locale_filename
        return os.path.join(self.locale_directory, name + TEMPLATE_EXTENSION)

    def translation_path(self, language_tag: str, file_name: Optional[str] = None) -> str:
        name = file_name if file_name and file_name.strip() else self.settings.locale_filename
        return os.path.join(self.locale_directory, language_tag, name + TRANSLATION_EXTENSION)

    def get_translation(
        self,
        language_tag: str,
        file_names: Optional[Iterable[str]] = None,
        loading_cache: bool = True,
    ) -> Translation:
        """Load every existing PO file of a language into one translation.

        The main file and the configured extra files are always read. When
        per-file templates are enabled and the call is not a cache load,
        the files named after ``file_names`` are read as well. Duplicate
        keys keep the first message; references and comments accumulate.

        Args:
            language_tag: Language directory name (e.g. "fr").
            file_names: Source file name groups (per-file templates).
            loading_cache: Whether the load feeds runtime lookups.

        Returns:
            Translation keyed by MsgKey. Missing files contribute nothing.
        """
        paths = [self.translation_path(language_tag)]
        paths.extend(
            self.translation_path(language_tag, name) for name in self.settings.other_locale_files
        )
        if self.settings.generate_template_per_file and not loading_cache:
            paths.extend(
                self.translation_path(language_tag, name) for name in (file_names or []) if name
            )

        items: Dict[str, TranslationItem] = {}
        for path in _distinct(paths):
            if not os.path.isfile(path):
                continue
            logger.debug("translation_file_reading", path=path)
            with self._open(path, "r") as f:
                for item in self.parser.parse_items(f):
                    existing = items.get(item.msgkey)
                    if existing is None:
                        items[item.msgkey] = item
                    else:
                        _merge_item(existing, item)

        return Translation(language=Language(language_tag), items=items)

    def get_available_languages(self) -> List[Language]:
        """Languages from configuration, or the valid tag directories of the locale root."""
        configured = self.settings.languages
        if configured:
            return [Language(tag) for tag in configured]

        if not os.path.isdir(self.locale_directory):
            return []

        languages = []
        for name in sorted(os.listdir(self.locale_directory)):
            if not os.path.isdir(os.path.join(self.locale_directory, name)):
                continue
            if not LanguageTag.is_valid(name):
                logger.debug("locale_directory_skipped", directory=name)
                continue
            languages.append(Language(name))
        return languages

    def translation_exists(self, language_tag: str) -> bool:
        configured = self.settings.languages
        if configured:
            return language_tag in configured
        return os.path.isfile(self.translation_path(language_tag))

    def save_translation(self, translation: Translation) -> str:
        """Write a language's translation file.

        Returns:
            Path of the written file.
        """
        template_path = self.template_path()
        pot_date = None
        if os.path.isfile(template_path):
            pot_date = datetime.fromtimestamp(os.path.getmtime(template_path)).astimezone()

        path = self.translation_path(translation.language.language_short_tag)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        if self.settings.backup_translations and os.path.isfile(path):
            shutil.copyfile(path, path + BACKUP_EXTENSION)

        with self._open(path, "w") as f:
            self.writer.write_translation(f, translation.items, pot_date=pot_date)

        logger.info(
            "translation_saved",
            language=translation.language.language_short_tag,
            path=path,
            item_count=len(translation.items),
        )
        return path

    def save_template(self, items: Dict[str, TemplateItem]) -> bool:
        """Write the template, or one template per source file name.

        Existing templates are deleted first so stale entries never survive.

        Returns:
            True if at least one template was written.
        """
        if not self.settings.generate_template_per_file:
            return self._save_template(items, None)

        groups: Dict[str, Dict[str, TemplateItem]] = {}
        for key, item in items.items():
            groups.setdefault(item.file_name, {})[key] = item

        written = False
        for file_name, group in groups.items():
            written = self._save_template(group, file_name) or written
        return written

    def _save_template(self, items: Dict[str, TemplateItem], file_name: Optional[str]) -> bool:
        path = self.template_path(file_name)
        if os.path.isfile(path):
            os.remove(path)
        os.makedirs(os.path.dirname(path), exist_ok=True)

        with self._open(path, "w") as f:
            self.writer.write_template(f, items)

        logger.info("template_saved", path=path, item_count=len(items))
        return True

    def _open(self, path: str, mode: str):
        return retry_call(
            lambda: open(path, mode, encoding="utf-8", newline="\n"),
            self.retry_config,
        )


def _merge_item(existing: TranslationItem, duplicate: TranslationItem) -> None:
    existing.references.extend(duplicate.references)
    for target, values in (
        (existing.translator_comments, duplicate.translator_comments),
        (existing.extracted_comments, duplicate.extracted_comments),
        (existing.flags, duplicate.flags),
    ):
        for value in values:
            if value not in target:
                target.append(value)


def _distinct(paths: List[str]) -> List[str]:
    return list(dict.fromkeys(paths))
