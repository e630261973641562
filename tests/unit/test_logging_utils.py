# tests/unit/test_logging_utils.py
import json
import logging
import re

import pytest

from stockwatch.core.config import Settings
from stockwatch.core.console import strip_ansi
from stockwatch.core.logging_utils import (
    LOGGER_NAME,
    PrettyJsonFormatter,
    configure_logging,
    resolve_level,
)


@pytest.fixture
def clean_logger():
    """Restore the stockwatch logger after configure_logging() tests"""
    log = logging.getLogger(LOGGER_NAME)
    handlers, level, propagate = list(log.handlers), log.level, log.propagate
    log.handlers.clear()
    yield log
    log.handlers[:] = handlers
    log.setLevel(level)
    log.propagate = propagate


def _record(msg, level=logging.INFO, extra=None):
    log = logging.getLogger(f"{LOGGER_NAME}.test")
    return log.makeRecord(log.name, level, __file__, 1, msg, None, None, extra=extra)


def test_line_layout():
    line = PrettyJsonFormatter(color=False).format(_record("monitoring started"))

    assert re.fullmatch(r"\[[^\]]+\] info :: monitoring started", line)


def test_warning_level_name():
    line = PrettyJsonFormatter(color=False).format(_record("slow", level=logging.WARNING))

    assert " warning :: slow" in line


def test_extra_fields_are_appended_as_json():
    record = _record("push failed", level=logging.ERROR, extra={"store": "BestBuy", "attempt": 1})

    line = PrettyJsonFormatter(color=False).format(record)
    head, _, metadata = line.partition(" :: push failed ")

    assert json.loads(metadata) == {"store": "BestBuy", "attempt": 1}
    assert '\n  "store": "BestBuy"' in metadata


def test_no_metadata_block_without_extra():
    line = PrettyJsonFormatter(color=False).format(_record("plain"))

    assert "{" not in line


def test_colorized_line_has_same_content():
    record = _record("push failed", level=logging.ERROR, extra={"store": "BestBuy"})

    colored = PrettyJsonFormatter(color=True).format(record)
    plain = PrettyJsonFormatter(color=False).format(record)

    assert "\x1b[31merror" in colored
    assert strip_ansi(colored) == plain


def test_colorized_message_is_stripped_in_plain_mode():
    line = PrettyJsonFormatter(color=False).format(_record("\x1b[33mCAPTCHA\x1b[0m"))

    assert line.endswith(":: CAPTCHA")


@pytest.mark.parametrize(
    "name, level",
    [
        ("error", logging.ERROR),
        ("warn", logging.WARNING),
        ("WARNING", logging.WARNING),
        ("info", logging.INFO),
        ("http", logging.INFO),
        ("verbose", logging.DEBUG),
        ("debug", logging.DEBUG),
        ("silly", logging.DEBUG),
        ("nonsense", logging.INFO),
    ],
)
def test_resolve_level(name, level):
    assert resolve_level(name) == level


def test_configure_logging_is_idempotent(clean_logger):
    configure_logging(Settings(log_level="info"))
    log = configure_logging(Settings(log_level="debug"))

    assert log is clean_logger
    assert len(log.handlers) == 1
    assert log.level == logging.DEBUG
    assert log.propagate is False
    assert isinstance(log.handlers[0].formatter, PrettyJsonFormatter)


def test_configured_logger_writes_to_stdout(clean_logger, capsys):
    log = configure_logging(Settings(log_level="info"), color=False)
    log.info("IN STOCK")
    log.debug("hidden")

    out = capsys.readouterr().out
    assert "info :: IN STOCK" in out
    assert "hidden" not in out


def test_plain_message_keeps_whitespace_control_characters():
    line = PrettyJsonFormatter(color=False).format(_record("GPU\tstock\rnow"))

    assert line.endswith(":: GPU\tstock\rnow")
