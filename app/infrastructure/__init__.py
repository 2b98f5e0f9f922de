"""Infrastructure modules for the nugget i18n service.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings, RetrySettings)
- logging: Structured logging (get_module_logger, configure_logging)
- hookspecs: pluggy hook specifications (plural rules)
- i18n: Nugget extraction, PO files and request-time localization
- resilience: Retry of transient file errors
- services: Dependency injection services (SettingsDep, LocalizationManagerDep)
"""

# Configuration
from infrastructure.configuration import settings

# Logging
from infrastructure.logging import get_module_logger

# Dependency Injection Services
from infrastructure.services import (
    SettingsDep,
    LocalizationManagerDep,
    get_settings,
    get_localization_manager,
)

__all__ = [
    # Configuration
    "settings",
    # Logging
    "get_module_logger",
    # Dependency Injection Services
    "SettingsDep",
    "LocalizationManagerDep",
    "get_settings",
    "get_localization_manager",
]
