"""JSON-lines logging for the forecast viewer.

The interactive view repaints the terminal on every keypress, so log lines
written to stderr while it runs land in the middle of the drawing. Set
``LOG_FILE`` to send them to a file instead.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from .redaction import sanitize_text

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


class JsonConsoleFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` fields are carried as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": sanitize_text(record.getMessage()),
        }
        for key, value in record.__dict__.items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            event[key] = sanitize_text(value) if isinstance(value, str) else value
        if record.exc_info:
            event["exception"] = sanitize_text(self.formatException(record.exc_info))
        return json.dumps(event, default=str)


def setup_logger(
    name: str = "ascii_weather",
    level: int | str = logging.INFO,
    *,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """Configure ``name`` with a single JSON handler, to stderr or ``log_file``.

    Calling it again replaces the previous handler, which lets the CLI log
    configuration errors to stderr before it knows where ``LOG_FILE`` points.
    If ``log_file`` cannot be opened the existing handler is left in place.
    """
    handler: logging.Handler
    if log_file is None:
        handler = logging.StreamHandler()
    else:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(JsonConsoleFormatter())

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.propagate = False
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    return logger
