# tests/conftest.py
import httpx
import pytest

from stockwatch.core.config import Settings
from stockwatch.monitor.ingestion import StockStatusClient
from stockwatch.monitor.reporter import EventReporter
from stockwatch.stores.base import Link, Store

BASE_URL = "http://stock.test"


@pytest.fixture
def link():
    """Provide the product used across reporter tests"""
    return Link(
        brand="Nvidia",
        series="RTX",
        model="4090",
        url="https://www.bestbuy.com/site/rtx-4090",
        price=1599,
    )


@pytest.fixture
def store():
    return Store(name="BestBuy")


@pytest.fixture
def bulk_store():
    return Store(name="BestBuy", bulk=True)


@pytest.fixture
def settings():
    return Settings(stock_status_url=BASE_URL, log_level="debug")


@pytest.fixture
def posted():
    """Requests received by the fake stock stalker server"""
    return []


@pytest.fixture
def transport(posted):
    def handler(request: httpx.Request) -> httpx.Response:
        posted.append(request)
        return httpx.Response(201, json={"ok": True})

    return httpx.MockTransport(handler)


@pytest.fixture
def reporter(settings, transport):
    client = StockStatusClient(settings.stock_status_url, transport=transport)
    return EventReporter(settings=settings, client=client)
