"""Fixed-delay retry of a callable.

Used around file opens: translation files may be held briefly by editors,
sync tools or a concurrent writer.
"""

import time
from typing import Callable, Optional, Tuple, Type, TypeVar

from infrastructure.logging import get_module_logger
from infrastructure.resilience.retry.config import RetryConfig

logger = get_module_logger()

T = TypeVar("T")


def retry_call(
    func: Callable[[], T],
    config: Optional[RetryConfig] = None,
    exceptions: Tuple[Type[BaseException], ...] = (OSError,),
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call ``func`` until it succeeds or the retry budget is spent.

    Args:
        func: Zero-argument callable to invoke.
        config: Retry policy. Defaults to ``RetryConfig()``.
        exceptions: Exception types that trigger a retry. Anything else
            propagates immediately.
        sleep: Sleep function (injectable for tests).

    Returns:
        The value returned by ``func``.

    Raises:
        The last exception raised by ``func`` once all retries failed.
    """
    config = config or RetryConfig()
    attempt = 0
    while True:
        try:
            return func()
        except exceptions as e:
            if attempt >= config.retries:
                raise
            attempt += 1
            logger.warning(
                "retrying_operation",
                attempt=attempt,
                max_retries=config.retries,
                error=str(e),
            )
            sleep(config.delay_seconds)
