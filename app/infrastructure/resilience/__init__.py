"""Resilience patterns and implementations.

This module contains resilience-related infrastructure components such as
retry logic for file access.
"""

from infrastructure.resilience.retry import RetryConfig, retry_call

__all__ = [
    "RetryConfig",
    "retry_call",
]
