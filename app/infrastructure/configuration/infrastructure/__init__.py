"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import I18nSettings
from infrastructure.configuration.infrastructure.retry import RetrySettings

__all__ = [
    "I18nSettings",
    "RetrySettings",
]
