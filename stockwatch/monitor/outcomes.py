"""Monitoring outcome kinds and their rendering policy."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Number = Union[int, float]

FAILURE_GLYPH = "✖"
INFO_GLYPH = "ℹ"
IN_STOCK_GLYPHS = ("🚀🚨", "🚨🚀")


class OutcomeKind(str, Enum):
    BACKOFF = "backoff"
    BAD_STATUS_CODE = "bad_status_code"
    BANNED_SELLER = "banned_seller"
    CAPTCHA = "captcha"
    CLOUDFLARE = "cloudflare"
    IN_STOCK = "in_stock"
    IN_STOCK_WAITING = "in_stock_waiting"
    MAX_PRICE = "max_price"
    MESSAGE = "message"
    NO_RESPONSE = "no_response"
    OUT_OF_STOCK = "out_of_stock"
    PRODUCT_IN_STOCK = "product_in_stock"
    RATE_LIMIT = "rate_limit"
    RECURSION_LIMIT = "recursion_limit"


@dataclass(frozen=True)
class Outcome:
    """A single monitoring result, with the parameters its kind needs."""

    kind: OutcomeKind

    # backoff / bad_status_code
    status_code: Optional[int] = None
    delay: Optional[Number] = None

    # max_price
    max_price: Optional[Number] = None

    # message
    message: str = ""
    topic: str = ""

    # in_stock / out_of_stock
    meta: Optional[str] = None
    sms: bool = False


@dataclass(frozen=True)
class Style:
    """How an outcome line is decorated."""

    glyph: str
    suffix_style: str = "yellow"
    setup: bool = False


# Kinds not listed here (in_stock, product_in_stock) have their own layout.
STYLES = {
    OutcomeKind.BACKOFF: Style(FAILURE_GLYPH),
    OutcomeKind.BAD_STATUS_CODE: Style(FAILURE_GLYPH),
    OutcomeKind.BANNED_SELLER: Style(FAILURE_GLYPH),
    OutcomeKind.CAPTCHA: Style(FAILURE_GLYPH),
    OutcomeKind.CLOUDFLARE: Style(FAILURE_GLYPH),
    OutcomeKind.IN_STOCK_WAITING: Style(INFO_GLYPH),
    OutcomeKind.MAX_PRICE: Style(FAILURE_GLYPH),
    OutcomeKind.MESSAGE: Style(FAILURE_GLYPH, setup=True),
    OutcomeKind.NO_RESPONSE: Style(FAILURE_GLYPH),
    OutcomeKind.OUT_OF_STOCK: Style(FAILURE_GLYPH, suffix_style="red"),
    OutcomeKind.RATE_LIMIT: Style(FAILURE_GLYPH),
    OutcomeKind.RECURSION_LIMIT: Style(FAILURE_GLYPH),
}

STOCK_LEVELS = {
    OutcomeKind.IN_STOCK: 1,
    OutcomeKind.OUT_OF_STOCK: 0,
}


def _segment(value) -> str:
    return "" if value is None else str(value)


def format_number(value: Optional[Number]) -> str:
    """Render a number the way it reads in a log line (``1599`` not ``1599.0``)."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def describe(outcome: Outcome, price: Optional[Number] = None) -> str:
    """Outcome text that follows the ``::`` separator."""
    kind = outcome.kind
    if kind is OutcomeKind.BACKOFF:
        return (
            f"BACKOFF DELAY status={format_number(outcome.status_code)} "
            f"delay={format_number(outcome.delay)}"
        )
    if kind is OutcomeKind.BAD_STATUS_CODE:
        return f"STATUS CODE ERROR {format_number(outcome.status_code)}"
    if kind is OutcomeKind.MAX_PRICE:
        return f"PRICE {format_number(price)} EXCEEDS LIMIT {format_number(outcome.max_price)}"
    if kind is OutcomeKind.MESSAGE:
        return _segment(outcome.message)

    return {
        OutcomeKind.BANNED_SELLER: "BANNED SELLER",
        OutcomeKind.CAPTCHA: "CAPTCHA",
        OutcomeKind.CLOUDFLARE: "CLOUDFLARE, WAITING",
        OutcomeKind.IN_STOCK: "IN STOCK",
        OutcomeKind.IN_STOCK_WAITING: "IN STOCK, WAITING",
        OutcomeKind.NO_RESPONSE: "NO RESPONSE",
        OutcomeKind.OUT_OF_STOCK: "OUT OF STOCK",
        OutcomeKind.RATE_LIMIT: "RATE LIMIT EXCEEDED",
        OutcomeKind.RECURSION_LIMIT: "CLOUDFLARE RETRY LIMIT REACHED, ABORT",
    }[kind]
