"""Nugget i18n configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Infrastructure settings
from infrastructure.configuration.infrastructure import (
    I18nSettings,
    RetrySettings,
)


class Settings(BaseSettings):
    """Application configuration settings - main aggregator.

    Aggregates the domain-specific settings sections into a single
    configuration object:

    - **i18n**: Nugget tokens, scan paths, PO file layout and caching
    - **retry**: File access retry policy

    Environment Variables:
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        ENVIRONMENT: Deployment environment (development, production)

    Example:
        ```python
        from infrastructure.configuration import settings

        locale_dir = settings.i18n.locale_root
        if settings.is_development:
            # Development-specific logic...
        ```
    """

    # Application-level settings
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "production"

    # Infrastructure settings
    i18n: I18nSettings
    retry: RetrySettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True unless ENVIRONMENT names a development environment.
        """
        return not self.is_development

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.strip().lower() in ("development", "dev", "local")

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
            "retry": RetrySettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
