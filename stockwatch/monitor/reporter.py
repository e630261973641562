"""Render monitoring outcomes as log lines and report stock changes."""

import logging
from typing import List, Optional

from stockwatch.core.config import Settings
from stockwatch.core.console import Segment, render
from stockwatch.core.logging_utils import configure_logging
from stockwatch.stores.base import Link, Store

from .identity import product_segments, setup_segments
from .ingestion import StockStatusClient, StockStatusRecord
from .outcomes import (
    IN_STOCK_GLYPHS,
    STOCK_LEVELS,
    STYLES,
    Number,
    Outcome,
    OutcomeKind,
    describe,
)

logger = logging.getLogger(__name__)

IN_STOCK_STYLE = "bold white on green"


class EventReporter:
    """
    Turn monitoring outcomes into log lines.

    Every method returns the rendered line; the caller picks the log level and
    hands it to the logger. In/out of stock outcomes also push a stock status
    record to the stock stalker server in the background.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[StockStatusClient] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.client = client or StockStatusClient(
            self.settings.stock_status_url,
            timeout=self.settings.push_timeout,
        )

    def report(
        self,
        outcome: Outcome,
        link: Optional[Link] = None,
        store: Optional[Store] = None,
        color: bool = False,
    ) -> str:
        """
        Render an outcome, pushing stock status where the outcome calls for it.

        Args:
            outcome: What the monitor observed
            link: Product the outcome is about (not needed for messages)
            store: Store being monitored
            color: Return ANSI-colored output

        Returns:
            The rendered log line
        """
        kind = outcome.kind

        if kind is OutcomeKind.PRODUCT_IN_STOCK:
            self._require(kind, link=link)
            return self._product_page(link)

        if kind is OutcomeKind.MESSAGE:
            self._require(kind, store=store)
            return self._line(outcome, setup_segments(outcome.topic, store), color)

        self._require(kind, link=link, store=store)

        if kind in STOCK_LEVELS:
            self._push(link, store, STOCK_LEVELS[kind], outcome.meta)

        if kind is OutcomeKind.IN_STOCK:
            return self._in_stock(link, store, color, outcome.sms)

        return self._line(outcome, product_segments(link, store), color, price=link.price)

    def _push(self, link: Link, store: Store, stock: int, meta: Optional[str]) -> None:
        try:
            record = StockStatusRecord.from_link(link, store, stock, meta)
            self.client.push(record, bulk=bool(store.bulk))
        except Exception as e:
            logger.error(
                "Could not schedule stock status push",
                extra={"store": store.name, "stock": stock, "error": repr(e)},
            )

    def _line(
        self,
        outcome: Outcome,
        identity: List[Segment],
        color: bool,
        price: Optional[Number] = None,
    ) -> str:
        style = STYLES[outcome.kind]

        segments = [(f"{style.glyph} ", None), *identity, (" :: ", None)]
        segments.append((describe(outcome, price), style.suffix_style))
        return render(segments, color)

    def _in_stock(self, link: Link, store: Store, color: bool, sms: bool) -> str:
        product_string = f"{render(product_segments(link, store))} :: IN STOCK"

        if not sms:
            left, right = IN_STOCK_GLYPHS
            product_string = f"{left} {product_string} {right}"

        return render([(product_string, IN_STOCK_STYLE)], color)

    @staticmethod
    def _product_page(link: Link) -> str:
        product_string = f"Product Page: {link.url}"
        if link.cart_url:
            product_string += f"\nAdd To Cart Link: {link.cart_url}"
        return product_string

    @staticmethod
    def _require(kind: OutcomeKind, **context) -> None:
        missing = [name for name, value in context.items() if value is None]
        if missing:
            raise ValueError(f"{kind.value} outcome needs {', '.join(missing)}")

    # One method per outcome kind

    def backoff(
        self, link: Link, store: Store, delay: Number, status_code: int, color: bool = False
    ) -> str:
        outcome = Outcome(OutcomeKind.BACKOFF, status_code=status_code, delay=delay)
        return self.report(outcome, link, store, color)

    def bad_status_code(self, link: Link, store: Store, status_code: int, color: bool = False) -> str:
        outcome = Outcome(OutcomeKind.BAD_STATUS_CODE, status_code=status_code)
        return self.report(outcome, link, store, color)

    def banned_seller(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.BANNED_SELLER), link, store, color)

    def captcha(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.CAPTCHA), link, store, color)

    def cloudflare(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.CLOUDFLARE), link, store, color)

    def in_stock(
        self,
        link: Link,
        store: Store,
        color: bool = False,
        sms: bool = False,
        meta: Optional[str] = None,
    ) -> str:
        outcome = Outcome(OutcomeKind.IN_STOCK, sms=sms, meta=meta)
        return self.report(outcome, link, store, color)

    def in_stock_waiting(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.IN_STOCK_WAITING), link, store, color)

    def max_price(self, link: Link, store: Store, max_price: Number, color: bool = False) -> str:
        outcome = Outcome(OutcomeKind.MAX_PRICE, max_price=max_price)
        return self.report(outcome, link, store, color)

    def message(self, message: str, topic: str, store: Store, color: bool = False) -> str:
        outcome = Outcome(OutcomeKind.MESSAGE, message=message, topic=topic)
        return self.report(outcome, store=store, color=color)

    def no_response(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.NO_RESPONSE), link, store, color)

    def out_of_stock(
        self, link: Link, store: Store, color: bool = False, meta: Optional[str] = None
    ) -> str:
        outcome = Outcome(OutcomeKind.OUT_OF_STOCK, meta=meta)
        return self.report(outcome, link, store, color)

    def product_in_stock(self, link: Link) -> str:
        return self.report(Outcome(OutcomeKind.PRODUCT_IN_STOCK), link)

    def rate_limit(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.RATE_LIMIT), link, store, color)

    def recursion_limit(self, link: Link, store: Store, color: bool = False) -> str:
        return self.report(Outcome(OutcomeKind.RECURSION_LIMIT), link, store, color)


# Global instance
_reporter: Optional[EventReporter] = None


def get_reporter() -> EventReporter:
    """Get or create the reporter singleton, configuring logging from the environment."""
    global _reporter
    if _reporter is None:
        _reporter = EventReporter()
        configure_logging(_reporter.settings)
    return _reporter
