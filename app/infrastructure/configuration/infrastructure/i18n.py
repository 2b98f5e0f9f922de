"""Localization (i18n) infrastructure settings."""

import glob
import os
from typing import Any, Dict, List

from pydantic import Field

from infrastructure.configuration.base import (
    InfrastructureSettings,
    split_setting_list,
)

SETTINGS_PREFIX = "i18n."

# i18n.<key> -> field name
SETTING_KEYS: Dict[str, str] = {
    "ProjectDirectory": "project_directory",
    "LocaleDirectory": "locale_directory",
    "LocaleFilename": "locale_filename",
    "LocaleOtherFiles": "locale_other_files",
    "WhiteList": "white_list",
    "BlackList": "black_list",
    "DirectoriesToScan": "directories_to_scan",
    "AvailableLanguages": "available_languages",
    "DefaultCulture": "default_culture",
    "NuggetBeginToken": "nugget_begin_token",
    "NuggetEndToken": "nugget_end_token",
    "NuggetDelimiterToken": "nugget_delimiter_token",
    "NuggetCommentToken": "nugget_comment_token",
    "MessageContextEnabledFromComment": "message_context_enabled_from_comment",
    "DisableReferences": "disable_references",
    "GenerateTemplatePerFile": "generate_template_per_file",
    "ShowSourceContext": "show_source_context",
    "BackupTranslations": "backup_translations",
    "CacheEnabled": "cache_enabled",
    "ScanWorkers": "scan_workers",
}

_WILDCARDS = ("*", "?")


class I18nSettings(InfrastructureSettings):
    """Nugget extraction, PO file layout and runtime lookup configuration.

    List-valued settings are stored the way they are written in the
    settings source: one semicolon-delimited string. Use the matching
    properties (``scan_directories``, ``whitelist``, ``blacklist``,
    ``languages``, ``other_locale_files``) to read them as lists with
    relative paths resolved against the project directory.

    Environment Variables:
        I18N_PROJECT_DIRECTORY: Root used to resolve relative paths (default: .)
        I18N_LOCALE_DIRECTORY: Directory holding .pot/.po files (default: locale)
        I18N_LOCALE_FILENAME: Base name of template/translation files (default: messages)
        I18N_LOCALE_OTHER_FILES: Extra per-language .po base names
        I18N_WHITE_LIST: File specs to scan, "name.ext" or "*.ext" (default: *.py;*.html)
        I18N_BLACK_LIST: Directories to skip while scanning (wildcards allowed)
        I18N_DIRECTORIES_TO_SCAN: Root directories to scan (default: .)
        I18N_AVAILABLE_LANGUAGES: Explicit language list; empty means "discover"
        I18N_DEFAULT_CULTURE: Culture used when a request names none (default: en)
        I18N_NUGGET_BEGIN_TOKEN / _END_TOKEN / _DELIMITER_TOKEN / _COMMENT_TOKEN
        I18N_MESSAGE_CONTEXT_ENABLED_FROM_COMMENT: Use nugget comment as msgctxt
        I18N_DISABLE_REFERENCES: Do not record source references
        I18N_GENERATE_TEMPLATE_PER_FILE: One .pot per source file name
        I18N_SHOW_SOURCE_CONTEXT: Append the source line to references
        I18N_BACKUP_TRANSLATIONS: Keep a .bak copy of rewritten .po files
        I18N_CACHE_ENABLED: Cache culture dictionaries (default: True)
        I18N_SCAN_WORKERS: Threads used to parse source files (default: 4)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        for directory in settings.i18n.scan_directories:
            ...
        ```
    """

    project_directory: str = Field(default=".", alias="I18N_PROJECT_DIRECTORY")
    locale_directory: str = Field(default="locale", alias="I18N_LOCALE_DIRECTORY")
    locale_filename: str = Field(default="messages", alias="I18N_LOCALE_FILENAME")
    locale_other_files: str = Field(default="", alias="I18N_LOCALE_OTHER_FILES")
    white_list: str = Field(default="*.py;*.html", alias="I18N_WHITE_LIST")
    black_list: str = Field(default="", alias="I18N_BLACK_LIST")
    directories_to_scan: str = Field(default=".", alias="I18N_DIRECTORIES_TO_SCAN")
    available_languages: str = Field(default="", alias="I18N_AVAILABLE_LANGUAGES")
    default_culture: str = Field(default="en", alias="I18N_DEFAULT_CULTURE")

    nugget_begin_token: str = Field(default="[[[", alias="I18N_NUGGET_BEGIN_TOKEN")
    nugget_end_token: str = Field(default="]]]", alias="I18N_NUGGET_END_TOKEN")
    nugget_delimiter_token: str = Field(
        default="|||", alias="I18N_NUGGET_DELIMITER_TOKEN"
    )
    nugget_comment_token: str = Field(default="///", alias="I18N_NUGGET_COMMENT_TOKEN")

    message_context_enabled_from_comment: bool = Field(
        default=False, alias="I18N_MESSAGE_CONTEXT_ENABLED_FROM_COMMENT"
    )
    disable_references: bool = Field(default=False, alias="I18N_DISABLE_REFERENCES")
    generate_template_per_file: bool = Field(
        default=False, alias="I18N_GENERATE_TEMPLATE_PER_FILE"
    )
    show_source_context: bool = Field(default=False, alias="I18N_SHOW_SOURCE_CONTEXT")
    backup_translations: bool = Field(default=False, alias="I18N_BACKUP_TRANSLATIONS")
    cache_enabled: bool = Field(default=True, alias="I18N_CACHE_ENABLED")
    scan_workers: int = Field(default=4, alias="I18N_SCAN_WORKERS")

    @classmethod
    def from_settings_provider(cls, provider: Any) -> "I18nSettings":
        """Build settings from an ``i18n.``-prefixed key-value source.

        Keys missing from the source keep their defaults. The provider's
        project directory is used unless ``i18n.ProjectDirectory`` is set.

        Args:
            provider: Object exposing ``get_setting(key)`` and
                ``project_directory``.

        Returns:
            I18nSettings instance.
        """
        if provider is None:
            raise ValueError("provider is required")

        values: Dict[str, Any] = {"project_directory": provider.project_directory}
        for key, field_name in SETTING_KEYS.items():
            value = provider.get_setting(SETTINGS_PREFIX + key)
            if value is not None:
                values[field_name] = value
        return cls(**values)

    def resolve_path(self, path: str) -> str:
        """Return ``path`` as an absolute path, relative ones anchored at the project."""
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.abspath(os.path.join(self.project_root, path))

    @property
    def project_root(self) -> str:
        return os.path.abspath(self.project_directory)

    @property
    def locale_root(self) -> str:
        return self.resolve_path(self.locale_directory)

    @property
    def scan_directories(self) -> List[str]:
        return [self.resolve_path(p) for p in split_setting_list(self.directories_to_scan)]

    @property
    def whitelist(self) -> List[str]:
        return split_setting_list(self.white_list)

    @property
    def blacklist(self) -> List[str]:
        """Absolute blacklisted paths, wildcard entries expanded to existing directories."""
        paths: List[str] = []
        for entry in split_setting_list(self.black_list):
            resolved = self.resolve_path(entry)
            if any(token in entry for token in _WILDCARDS):
                paths.extend(
                    match for match in sorted(glob.glob(resolved)) if os.path.isdir(match)
                )
            else:
                paths.append(resolved)
        return paths

    @property
    def languages(self) -> List[str]:
        return split_setting_list(self.available_languages)

    @property
    def other_locale_files(self) -> List[str]:
        return split_setting_list(self.locale_other_files)
