"""Retry configuration for file operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryConfig:
    """Fixed-delay retry policy.

    Attributes:
        retries: Attempts made after the first failure
        delay_seconds: Pause between attempts

    Example:
        # Default policy: 3 retries, 250ms apart
        config = RetryConfig()

        # Built from application settings
        config = RetryConfig.from_settings(settings.retry)
    """

    retries: int = 3
    delay_seconds: float = 0.25

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.retries < 0:
            raise ValueError("retries must be >= 0")
        if self.delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")

    @classmethod
    def from_settings(cls, retry_settings) -> "RetryConfig":
        return cls(
            retries=retry_settings.file_attempts,
            delay_seconds=retry_settings.file_delay_seconds,
        )
