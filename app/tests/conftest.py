import os

import pytest

from infrastructure.services import (
    get_language_tag_cache,
    get_localization_manager,
    get_settings,
)


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset the process-scoped providers around every test."""
    get_settings.cache_clear()
    get_language_tag_cache.cache_clear()
    get_localization_manager.cache_clear()
    yield
    get_settings.cache_clear()
    get_language_tag_cache.cache_clear()
    get_localization_manager.cache_clear()


@pytest.fixture(autouse=True)
def isolate_i18n_environment(monkeypatch):
    """Keep developer I18N_* variables out of the settings under test."""
    for name in list(os.environ):
        if name.startswith("I18N_") or name in ("ENVIRONMENT", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
