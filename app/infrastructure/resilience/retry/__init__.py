"""Retry of transiently failing operations.

Usage:
    from infrastructure.resilience.retry import RetryConfig, retry_call

    handle = retry_call(lambda: open(path, "r", encoding="utf-8"), RetryConfig())
"""

from infrastructure.resilience.retry.config import RetryConfig
from infrastructure.resilience.retry.policy import retry_call

__all__ = [
    "RetryConfig",
    "retry_call",
]
