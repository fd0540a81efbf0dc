"""Logging setup for the termtext command line.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here, once, from the loaded ``TermTextConfig``. Records may carry
parse context through ``extra=``:

    logger.debug("Malformed row", extra={"path": path, "line_no": 4})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO, Any

from termtext.config import TermTextConfig, get_config

# Context attributes copied from LogRecord into the JSON entry when present
CONTEXT_FIELDS = ("path", "line_no", "locale")

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class _JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        if record.levelno >= logging.WARNING:
            entry["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }
        return json.dumps(entry, default=str, ensure_ascii=False)


def setup_logging(
    config: TermTextConfig | None = None,
    *,
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a single stderr handler to the ``termtext`` package logger.

    Args:
        config: Supplies ``log_level`` and ``log_format`` ("json" or "text").
            Defaults to ``get_config()``.
        stream: Output stream, ``sys.stderr`` when omitted.

    Calling it again replaces the previous handler.
    """
    if config is None:
        config = get_config()

    formatter: logging.Formatter
    if config.log_format == "json":
        formatter = _JsonFormatter()
    else:
        formatter = logging.Formatter(TEXT_FORMAT)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)

    pkg_logger = logging.getLogger("termtext")
    pkg_logger.handlers.clear()
    pkg_logger.setLevel(config.log_level_value)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    return pkg_logger
