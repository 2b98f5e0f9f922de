"""Shared base classes and utilities for settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class InfrastructureSettings(BaseSettings):
    """Base class for infrastructure-level settings.

    Infrastructure settings control core system behavior like file locations,
    nugget tokens, retry logic and caching. Fields may be populated either by
    their environment alias or by their field name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


def split_setting_list(value: str | None) -> list[str]:
    """Split a semicolon-delimited setting into its non-blank entries.

    Args:
        value: Raw setting value (e.g. "*.py;*.html").

    Returns:
        List of stripped entries, blank entries dropped.
    """
    if not value:
        return []
    return [item.strip() for item in value.split(";") if item.strip()]
