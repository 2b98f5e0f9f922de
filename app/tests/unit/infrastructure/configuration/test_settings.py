"""Unit tests for infrastructure.configuration.

Tests cover:
- I18nSettings defaults, environment aliases and list properties
- Path resolution against the project directory
- I18nSettings built from a SettingsProvider
- RetrySettings and the Settings aggregator
"""

import os

import pytest

from infrastructure.configuration import (
    I18nSettings,
    RetrySettings,
    Settings,
    SettingsProvider,
)
from infrastructure.configuration.base import split_setting_list
from infrastructure.services.providers import get_settings


@pytest.mark.unit
class TestSplitSettingList:
    def test_splits_and_strips(self):
        assert split_setting_list(" *.py ; *.html;;") == ["*.py", "*.html"]

    @pytest.mark.parametrize("value", [None, "", " ; "])
    def test_empty_values(self, value):
        assert split_setting_list(value) == []


@pytest.mark.unit
class TestI18nSettings:
    def test_defaults(self):
        i18n = I18nSettings()

        assert i18n.locale_directory == "locale"
        assert i18n.locale_filename == "messages"
        assert i18n.whitelist == ["*.py", "*.html"]
        assert i18n.default_culture == "en"
        assert (i18n.nugget_begin_token, i18n.nugget_end_token) == ("[[[", "]]]")
        assert (i18n.nugget_delimiter_token, i18n.nugget_comment_token) == ("|||", "///")
        assert i18n.cache_enabled is True
        assert i18n.message_context_enabled_from_comment is False

    def test_environment_aliases(self, monkeypatch):
        monkeypatch.setenv("I18N_LOCALE_DIRECTORY", "translations")
        monkeypatch.setenv("I18N_AVAILABLE_LANGUAGES", "fr;es-MX")
        monkeypatch.setenv("I18N_DISABLE_REFERENCES", "true")
        monkeypatch.setenv("I18N_SCAN_WORKERS", "8")

        i18n = I18nSettings()

        assert i18n.locale_directory == "translations"
        assert i18n.languages == ["fr", "es-MX"]
        assert i18n.disable_references is True
        assert i18n.scan_workers == 8

    def test_field_names_accepted(self):
        i18n = I18nSettings(locale_other_files="errors; emails")
        assert i18n.other_locale_files == ["errors", "emails"]

    def test_relative_paths_resolved_against_project(self, tmp_path):
        i18n = I18nSettings(project_directory=str(tmp_path), directories_to_scan=".;src")

        assert i18n.project_root == str(tmp_path)
        assert i18n.locale_root == os.path.join(str(tmp_path), "locale")
        assert i18n.scan_directories == [str(tmp_path), os.path.join(str(tmp_path), "src")]

    def test_absolute_paths_kept(self, tmp_path):
        elsewhere = str(tmp_path / "elsewhere")
        i18n = I18nSettings(project_directory=str(tmp_path), locale_directory=elsewhere)
        assert i18n.locale_root == elsewhere

    def test_blacklist_expands_wildcards(self, tmp_path):
        for name in ("build-1", "build-2", "src"):
            (tmp_path / name).mkdir()
        (tmp_path / "build-file").write_text("", encoding="utf-8")

        i18n = I18nSettings(project_directory=str(tmp_path), black_list="build-*;node_modules")

        assert i18n.blacklist == [
            str(tmp_path / "build-1"),
            str(tmp_path / "build-2"),
            str(tmp_path / "node_modules"),
        ]


@pytest.mark.unit
class TestFromSettingsProvider:
    def test_reads_prefixed_keys(self, tmp_path):
        provider = SettingsProvider(
            str(tmp_path),
            {
                "i18n.LocaleDirectory": "po",
                "i18n.WhiteList": "*.jinja",
                "i18n.MessageContextEnabledFromComment": "true",
                "i18n.ScanWorkers": "2",
                "unrelated.Key": "ignored",
            },
        )

        i18n = I18nSettings.from_settings_provider(provider)

        assert i18n.project_root == str(tmp_path)
        assert i18n.locale_root == os.path.join(str(tmp_path), "po")
        assert i18n.whitelist == ["*.jinja"]
        assert i18n.message_context_enabled_from_comment is True
        assert i18n.scan_workers == 2
        assert i18n.locale_filename == "messages"

    def test_project_directory_setting_wins(self, tmp_path):
        provider = SettingsProvider(str(tmp_path), {"i18n.ProjectDirectory": str(tmp_path / "web")})
        assert I18nSettings.from_settings_provider(provider).project_root == str(tmp_path / "web")

    def test_provider_required(self):
        with pytest.raises(ValueError):
            I18nSettings.from_settings_provider(None)


@pytest.mark.unit
class TestSettingsProvider:
    def test_get_and_set(self, tmp_path):
        provider = SettingsProvider(str(tmp_path))

        assert provider.get_setting("i18n.LocaleDirectory") is None
        provider.set_setting("i18n.LocaleDirectory", "po")
        assert provider.get_setting("i18n.LocaleDirectory") == "po"

    def test_project_directory_is_absolute(self):
        assert os.path.isabs(SettingsProvider(".").project_directory)


@pytest.mark.unit
class TestRetrySettings:
    def test_defaults(self):
        retry = RetrySettings()
        assert retry.file_attempts == 3
        assert retry.file_delay_seconds == 0.25

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("RETRY_FILE_ATTEMPTS", "5")
        monkeypatch.setenv("RETRY_FILE_DELAY_SECONDS", "0.5")

        retry = RetrySettings()

        assert retry.file_attempts == 5
        assert retry.file_delay_seconds == 0.5


@pytest.mark.unit
class TestSettings:
    def test_sections_instantiated(self):
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)
        assert isinstance(settings.retry, RetrySettings)

    def test_section_override(self):
        i18n = I18nSettings(locale_filename="site")
        assert Settings(i18n=i18n).i18n.locale_filename == "site"

    @pytest.mark.parametrize(
        "environment,development",
        [("development", True), ("Dev", True), ("local", True), ("production", False), ("staging", False)],
    )
    def test_environment_flags(self, environment, development):
        settings = Settings(ENVIRONMENT=environment)
        assert settings.is_development is development
        assert settings.is_production is not development

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
