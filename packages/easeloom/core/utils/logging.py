"""Logging setup for easeloom.

Library modules only ever call ``logging.getLogger(__name__)``; handlers and
formatting are installed once by the application (the CLI) through
``configure_logging``. Curve construction logs at DEBUG, evaluation never
logs.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Attributes every LogRecord carries; anything else was passed as ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class StructuredJSONFormatter(logging.Formatter):
    """Render each record as a single JSON object.

    Output shape::

        {"timestamp": "...", "level": "DEBUG", "message": "...",
         "context": {"logger_name": "easeloom.core.curves.bezier",
                     "module": "bezier", "function": "__init__", "line": 80,
                     "curve_id": "css_ease"}}

    Context carries the record origin plus any ``extra`` fields, such as
    those bound through ``get_logger(name, curve_id=...)``.
    """

    def format(self, record: logging.LogRecord) -> str:
        context: dict[str, Any] = {
            "logger_name": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )

        if record.exc_info and record.exc_info[0] is not None:
            exc_type, exc_value, _ = record.exc_info
            context["error_type"] = exc_type.__name__
            context["error_message"] = str(exc_value)
            context["stack_trace"] = record.exc_text or self.formatException(record.exc_info)

        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "context": context,
        }
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "INFO",
    format_string: str | None = None,
    filename: str | None = None,
    structured: bool = False,
) -> None:
    """Install a single root handler.

    Safe to call repeatedly; each call replaces the previous configuration.

    Args:
        level: Level name, any case (e.g. "debug").
        format_string: Plain-text format. Ignored when ``structured``.
        filename: Append to this file instead of writing to stdout.
        structured: Emit JSON lines via StructuredJSONFormatter.

    Example:
        >>> configure_logging(level="DEBUG", structured=True, filename="easeloom.jsonl")
    """
    handler: logging.Handler = (
        logging.FileHandler(filename) if filename else logging.StreamHandler(sys.stdout)
    )
    handler.setFormatter(
        StructuredJSONFormatter()
        if structured
        else logging.Formatter(format_string or DEFAULT_FORMAT)
    )

    logging.basicConfig(level=level.upper(), handlers=[handler], force=True)
    logger.debug("Logging configured (level=%s, structured=%s)", level.upper(), structured)


def get_logger(name: str, **context: Any) -> logging.Logger | logging.LoggerAdapter:
    """Return the named logger, bound to ``context`` when any is given.

    Example:
        >>> log = get_logger(__name__, curve_id="elastic_out")
        >>> log.debug("registered")  # context carries curve_id
    """
    base = logging.getLogger(name)
    return logging.LoggerAdapter(base, context) if context else base
