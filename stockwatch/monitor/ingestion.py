"""Fire-and-forget stock status pushes to the stock stalker server."""

import asyncio
import logging
import threading
from typing import Optional, Set, Union

import httpx
from pydantic import BaseModel

from stockwatch.stores.base import Link, Store

logger = logging.getLogger(__name__)

BULK_META_WARNING = "Meta is empty for a BULK request!"


class StockStatusRecord(BaseModel):
    """Stock status payload."""

    brand: str
    series: str
    name: str
    store: str
    stock: Optional[int]
    price: Optional[Union[int, float]] = None
    url: str
    meta: Optional[str] = None

    @classmethod
    def from_link(
        cls, link: Link, store: Store, stock: Optional[int], meta: Optional[str] = None
    ) -> "StockStatusRecord":
        return cls(
            brand=link.brand or "",
            series=link.series or "",
            name=link.model or "",
            store=store.name or "",
            stock=stock,
            price=link.price,
            url=link.reporting_url or "",
            meta=meta,
        )

    def to_payload(self) -> dict:
        """JSON body; unset price and meta are left out, stock is always sent."""
        payload = self.model_dump()
        for key in ("price", "meta"):
            if payload[key] is None:
                del payload[key]
        return payload


class StockStatusClient:
    """Post stock status records without blocking the caller."""

    def __init__(
        self,
        base_url: Optional[str],
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self._transport = transport
        self._pending: Set[asyncio.Task] = set()

    def endpoint(self, bulk: bool = False) -> str:
        url = f"{self.base_url}/stock"
        if bulk:
            url += "/bulk"
        return url

    def push(
        self, record: StockStatusRecord, bulk: bool = False
    ) -> Optional[Union[asyncio.Task, threading.Thread]]:
        """
        Schedule a POST of the record and return immediately.

        Args:
            record: Stock status to send
            bulk: Send to the bulk endpoint

        Returns:
            The scheduled task, the helper thread when called outside an event
            loop, or None when no server is configured
        """
        if bulk and not record.meta:
            print(BULK_META_WARNING)

        if not self.base_url:
            logger.warning("Stock stalker server URL is not configured, skipping push")
            return None

        url = self.endpoint(bulk)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Called from synchronous code: give the request its own loop.
            thread = threading.Thread(
                target=asyncio.run, args=(self._post(url, record),), daemon=True
            )
            thread.start()
            return thread

        task = loop.create_task(self._post(url, record))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _post(self, url: str, record: StockStatusRecord) -> bool:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=record.to_payload())
                response.raise_for_status()
        except Exception as e:
            logger.error(
                "Failed to post to stock stalker server",
                extra={"url": url, "store": record.store, "error": repr(e)},
            )
            return False

        logger.info("Successfully posted to stock stalker server")
        return True

    async def drain(self) -> None:
        """Wait for every scheduled push to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
