"""Request context binding for structured logging.

Binds request-scoped metadata so that every log entry emitted while a
response is being localized carries the correlation id and culture.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(culture="fr", request_path="/"):
        logger.info("nuggets_replaced")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    culture: Optional[str] = None,
    request_path: Optional[str] = None,
    **extra_context: Any,
) -> Generator[None, None, None]:
    """Bind request-scoped context to all logs within the context manager.

    Args:
        correlation_id: Unique request identifier. Auto-generated if not provided.
        culture: Culture used to localize the response (e.g. "fr-CA").
        request_path: HTTP request path.
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        None - context is bound to structlog's context vars.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if culture is not None:
        context["culture"] = culture

    if request_path is not None:
        context["request_path"] = request_path

    context.update(extra_context)

    tokens = structlog.contextvars.bind_contextvars(**context)
    try:
        yield
    finally:
        # Restores the values bound by an enclosing context, if any.
        structlog.contextvars.reset_contextvars(**tokens)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")
