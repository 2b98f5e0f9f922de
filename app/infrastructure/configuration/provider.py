"""Key-value settings source for hosts without environment configuration.

Embedding applications that keep their configuration in a settings file
or database feed it through a ``SettingsProvider`` and build
``I18nSettings`` with ``I18nSettings.from_settings_provider``.
"""

import os
import threading
from typing import Dict, Mapping, Optional


class SettingsProvider:
    """Thread-safe string key-value store.

    Keys follow the ``i18n.<Name>`` convention (for example
    ``i18n.LocaleDirectory``). Values are strings; list values are
    semicolon-delimited.

    Args:
        project_directory: Root used to resolve relative paths.
        values: Initial key-value pairs.
    """

    def __init__(
        self,
        project_directory: str = ".",
        values: Optional[Mapping[str, str]] = None,
    ):
        self._project_directory = os.path.abspath(project_directory)
        self._values: Dict[str, str] = dict(values or {})
        self._lock = threading.Lock()

    @property
    def project_directory(self) -> str:
        return self._project_directory

    def get_setting(self, key: str) -> Optional[str]:
        """Return the value stored for ``key`` or None when absent."""
        with self._lock:
            return self._values.get(key)

    def set_setting(self, key: str, value: str) -> None:
        with self._lock:
            self._values[key] = value
