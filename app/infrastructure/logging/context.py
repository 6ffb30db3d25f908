"""Request-scoped context for diagnostic events.

Values bound here are merged into every structlog event emitted while a
request is being served, so the correlation ID and the session user can be
followed across the session, locale and error services.

Usage:
    from infrastructure.logging import bind_request_context

    with bind_request_context(user_id="user-42", request_path="/account"):
        logger.info("processing_request")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional

import structlog

CORRELATION_ID_KEY = "correlation_id"


@contextmanager
def bind_request_context(
    correlation_id: Optional[str] = None,
    user_id: Optional[str] = None,
    locale: Optional[str] = None,
    request_path: Optional[str] = None,
    request_method: Optional[str] = None,
    **extra_context: Any,
) -> Iterator[str]:
    """Bind request details for the duration of the block.

    None values are not bound. Everything bound here is removed again when
    the block exits, including when it raises.

    Args:
        correlation_id: Request identifier, generated when omitted.
        user_id: Session user identifier.
        locale: Resolved locale.
        request_path: HTTP request path.
        request_method: HTTP method.
        **extra_context: Further fields to bind.

    Yields:
        The correlation ID in effect for the block.
    """
    candidates: Dict[str, Any] = {
        "user_id": user_id,
        "locale": locale,
        "request_path": request_path,
        "request_method": request_method,
        **extra_context,
    }
    bound = {key: value for key, value in candidates.items() if value is not None}
    bound[CORRELATION_ID_KEY] = correlation_id or str(uuid.uuid4())

    structlog.contextvars.bind_contextvars(**bound)
    try:
        yield bound[CORRELATION_ID_KEY]
    finally:
        structlog.contextvars.unbind_contextvars(*bound)


def get_correlation_id() -> Optional[str]:
    return structlog.contextvars.get_contextvars().get(CORRELATION_ID_KEY)


def set_correlation_id(correlation_id: str) -> None:
    structlog.contextvars.bind_contextvars(**{CORRELATION_ID_KEY: correlation_id})


def clear_request_context() -> None:
    """Drop every bound value, e.g. between requests handled by one worker."""
    structlog.contextvars.clear_contextvars()
