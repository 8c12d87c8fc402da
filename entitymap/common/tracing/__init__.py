"""Correlation ID tracking for conversion calls.

Lets callers tag every log record emitted while converting one document or
entity with the same identifier, across nested conversions.
"""

import uuid
from contextvars import ContextVar

# Context variable for storing the current correlation ID
_correlation_id_var: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        str: A new UUID4 correlation ID as a string.
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current context.

    If no correlation ID is provided, generates a new one.

    Args:
        correlation_id: Optional correlation ID to set. If None, generates a new one.

    Returns:
        str: The correlation ID that was set.

    Example:
        >>> corr_id = set_correlation_id("import-42")
        >>> get_correlation_id()
        'import-42'
    """
    if correlation_id is None:
        correlation_id = generate_correlation_id()

    _correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str | None:
    """Get the correlation ID for the current context.

    Returns:
        str | None: The current correlation ID, or None if not set.
    """
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


__all__ = [
    "clear_correlation_id",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
