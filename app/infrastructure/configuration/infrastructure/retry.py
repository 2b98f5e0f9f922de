"""Retry infrastructure settings for file operations."""

from pydantic import Field

from infrastructure.configuration.base import InfrastructureSettings


class RetrySettings(InfrastructureSettings):
    """Retry configuration for operations on shared files.

    Translation and template files may be briefly locked by editors or
    other tools. Writers retry a fixed number of times with a fixed delay
    before giving up.

    Environment Variables:
        RETRY_FILE_ATTEMPTS: Extra attempts after the first failure (default: 3)
        RETRY_FILE_DELAY_SECONDS: Delay between attempts (default: 0.25s)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        retries = settings.retry.file_attempts
        ```
    """

    file_attempts: int = Field(
        default=3,
        alias="RETRY_FILE_ATTEMPTS",
        description="Retries after the first failed file open",
    )
    file_delay_seconds: float = Field(
        default=0.25,
        alias="RETRY_FILE_DELAY_SECONDS",
        description="Fixed delay between file open attempts (seconds)",
    )
