"""Logging setup for the docase.* logger hierarchy.

Library code only ever calls get_logger(); nothing is emitted until an
application attaches a handler, either its own or via configure_logging():

    >>> from docase.foundation import configure_logging
    >>> configure_logging(format="json", level="DEBUG")
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from .config import get_settings

ROOT_LOGGER = "docase"

_HANDLER_ATTR = "_docase_handler"


class JsonFormatter(logging.Formatter):
    """JSON Lines output, one object per record."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if context := getattr(record, "context", None):
            payload.update(context)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=repr, option=orjson.OPT_NON_STR_KEYS).decode()


_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Logger under the docase hierarchy ("do" → "docase.do")."""
    return logging.getLogger(name if name.startswith(ROOT_LOGGER) else f"{ROOT_LOGGER}.{name}")


def configure_logging(
    format: str | None = None,  # noqa: A002 - matches the settings field
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Attach a single handler to the docase logger. Unset arguments come from settings."""
    settings = get_settings().logging
    fmt = format or settings.format
    match fmt:
        case "text": formatter: logging.Formatter = logging.Formatter(_TEXT_FORMAT)
        case "json": formatter = JsonFormatter()
        case _: raise ValueError(f"Unknown format: {fmt}. Use 'text' or 'json'")

    root = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in root.handlers if getattr(h, _HANDLER_ATTR, False)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(output or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_ATTR, True)
    root.addHandler(handler)
    root.setLevel(getattr(logging, (level or settings.level).upper(), logging.WARNING))
    return root
