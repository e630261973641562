"""
Log sink configuration.

Lines are rendered as ``[<local time>] <level> :: <message>``, followed by the
record's extra fields as indented JSON when any were given.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from typing import Any, Optional


from .config import Settings
from .console import render, strip_ansi

LOGGER_NAME = "stockwatch"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_LEVEL_NAMES = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "http": logging.INFO,
    "verbose": logging.DEBUG,
    "debug": logging.DEBUG,
    "silly": logging.DEBUG,
    "critical": logging.CRITICAL,
}

_LEVEL_STYLES = {
    logging.DEBUG: "blue",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "bold red",
}


def resolve_level(name: str) -> int:
    """Map a configured level name to a logging level (unknown names -> INFO)."""
    return _LEVEL_NAMES.get(name.strip().lower(), logging.INFO)


def extract_metadata(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


class PrettyJsonFormatter(logging.Formatter):
    """Single-line formatter with an optional pretty-printed metadata block."""

    def __init__(self, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%X")
        level = record.levelname.lower()

        message = record.getMessage()
        if not self.color:
            # Messages may arrive already colorized by the reporter.
            message = strip_ansi(message)

        segments = [
            (f"[{timestamp}]", "bright_black"),
            (" ", None),
            (level, _LEVEL_STYLES.get(record.levelno)),
            (" ", None),
            ("::", "bright_black"),
            (f" {message}", None),
        ]

        metadata = extract_metadata(record)
        if metadata:
            segments.append((" ", None))
            segments.append((json.dumps(metadata, indent=2, default=str), "magenta"))

        out = render(segments, self.color)
        if record.exc_info:
            out = f"{out}\n{self.formatException(record.exc_info)}"
        return out


def configure_logging(settings: Optional[Settings] = None, color: bool = True) -> logging.Logger:
    """
    Configure the ``stockwatch`` logger.

    Safe to call more than once: the level is updated but the handler is only
    attached the first time.
    """
    settings = settings or Settings()

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(resolve_level(settings.log_level))

    if log.handlers:
        return log

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(PrettyJsonFormatter(color=color))

    log.addHandler(handler)
    log.propagate = False

    return log
