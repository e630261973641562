# tests/unit/test_identity.py
from stockwatch.core.console import strip_ansi
from stockwatch.monitor.identity import build_product_string, build_setup_string
from stockwatch.stores.base import Link, Store


def test_product_string_without_proxy(link, store):
    assert build_product_string(link, store) == "[BestBuy] [Nvidia (RTX)] 4090"


def test_product_string_with_proxy(link):
    store = Store(name="BestBuy", current_proxy_index=2, proxy_list=("p1", "p2", "p3", "p4"))

    assert build_product_string(link, store) == "[3/4] [BestBuy] [Nvidia (RTX)] 4090"


def test_first_proxy_is_displayed_one_based(link):
    store = Store(name="BestBuy", current_proxy_index=0, proxy_list=("p1",))

    assert build_product_string(link, store).startswith("[1/1] [BestBuy]")


def test_partial_proxy_state_falls_back_to_plain_form(link):
    """Index without a list (or list without an index) renders no proxy segment"""
    index_only = Store(name="BestBuy", current_proxy_index=3)
    list_only = Store(name="BestBuy", proxy_list=("p1", "p2"))

    assert build_product_string(link, index_only) == "[BestBuy] [Nvidia (RTX)] 4090"
    assert build_product_string(link, list_only) == "[BestBuy] [Nvidia (RTX)] 4090"


def test_missing_brand_and_series_render_empty():
    link = Link(brand=None, series=None, model="4090", url="https://example.com")

    assert build_product_string(link, Store(name="BestBuy")) == "[BestBuy] [ ()] 4090"


def test_setup_string(store):
    assert build_setup_string("proxies", store) == "[BestBuy] [setup (proxies)]"


def test_colorized_product_string_has_same_content(link):
    store = Store(name="BestBuy", current_proxy_index=0, proxy_list=("p1", "p2"))

    colored = build_product_string(link, store, color=True)

    assert "\x1b[" in colored
    assert strip_ansi(colored) == build_product_string(link, store)


def test_colorized_store_segment_is_cyan(link, store):
    colored = build_product_string(link, store, color=True)

    assert "\x1b[36m[BestBuy]" in colored


def test_colorized_setup_string_has_same_content(store):
    colored = build_setup_string("proxies", store, color=True)

    assert strip_ansi(colored) == "[BestBuy] [setup (proxies)]"
