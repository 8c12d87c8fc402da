"""JSON structured logging for the entity mapping engine.

Conversion modules log through ``get_logger(__name__)`` and attach
``correlation_id``, ``entity_type`` and ``field_name`` as ``extra`` fields.
Applications opt in to JSON output with ``entitymap.setup_logging()``, which
configures the ``entitymap`` logger only and leaves the root logger alone.
"""

import logging
import sys
from typing import IO

from pythonjsonlogger.json import JsonFormatter

from entitymap.common.config import get_config

PACKAGE_LOGGER = "entitymap"

_HANDLER_NAME = "entitymap-json"

# Record attributes emitted under shorter keys.
_RENAMED_FIELDS = {"levelname": "level", "funcName": "function", "lineno": "line"}


class CorrelationIdFilter(logging.Filter):
    """Inject the current correlation ID into records that do not carry one."""

    def filter(self, record: logging.LogRecord) -> bool:
        # Import here to avoid circular dependency
        from entitymap.common.tracing import get_correlation_id

        if getattr(record, "correlation_id", None) is None:
            record.correlation_id = get_correlation_id()
        return True


def make_json_formatter() -> JsonFormatter:
    """Build the formatter used for conversion logs.

    Every record carries an ISO timestamp, level, logger name, function, line
    and message. ``extra`` fields passed by the converters are emitted as
    top-level keys.
    """
    return JsonFormatter(
        "%(levelname)s %(name)s %(funcName)s %(lineno)d %(message)s",
        rename_fields=_RENAMED_FIELDS,
        timestamp=True,
    )


def setup_logging(level: str | None = None, stream: IO[str] | None = None) -> logging.Handler:
    """Send ``entitymap`` logs to a stream as JSON lines.

    Safe to call repeatedly: a handler installed by an earlier call is
    replaced, and handlers added by the application are kept.

    Args:
        level: Optional log level override. Defaults to ENTITYMAP_LOG_LEVEL.
        stream: Destination stream. Defaults to stdout.

    Returns:
        logging.Handler: The installed handler.

    Example:
        >>> import entitymap
        >>> handler = entitymap.setup_logging("DEBUG")
    """
    log_level = (level or get_config().log_level).upper()

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)
    for existing in [h for h in package_logger.handlers if h.get_name() == _HANDLER_NAME]:
        package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(make_json_formatter())
    handler.addFilter(CorrelationIdFilter())
    package_logger.addHandler(handler)
    return handler


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = [
    "PACKAGE_LOGGER",
    "CorrelationIdFilter",
    "get_logger",
    "make_json_formatter",
    "setup_logging",
]
