"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.i18n import LocalizationManager
from infrastructure.services.providers import (
    get_settings,
    get_localization_manager,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Localization manager dependency
# Usage: manager.translate(culture, text), manager.get_dictionary(culture)
LocalizationManagerDep = Annotated[LocalizationManager, Depends(get_localization_manager)]

__all__ = [
    "SettingsDep",
    "LocalizationManagerDep",
]
