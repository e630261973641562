"""Identity strings naming the product or setup step a log line is about."""

from typing import List, Optional

from stockwatch.core.console import Segment, render
from stockwatch.stores.base import Link, Store

GREY = "bright_black"
STORE = "cyan"


def _segment(value: Optional[str]) -> str:
    return "" if value is None else str(value)


def product_segments(link: Link, store: Store) -> List[Segment]:
    """Styled ``[i/n] [store] [brand (series)] model``."""
    segments = []

    store_name = _segment(store.name)
    proxy = store.proxy_position()
    if proxy is not None:
        segments.append((f"[{proxy}]", GREY))
        segments.append((f" [{store_name}]", STORE))
    else:
        segments.append((f"[{store_name}]", STORE))

    brand = _segment(link.brand)
    series = _segment(link.series)
    model = _segment(link.model)
    segments.append((f" [{brand} ({series})] {model}", GREY))
    return segments


def setup_segments(topic: str, store: Store) -> List[Segment]:
    """Styled ``[store] [setup (topic)]``."""
    return [
        (f"[{_segment(store.name)}]", STORE),
        (f" [setup ({_segment(topic)})]", GREY),
    ]


def build_product_string(link: Link, store: Store, color: bool = False) -> str:
    return render(product_segments(link, store), color)


def build_setup_string(topic: str, store: Store, color: bool = False) -> str:
    return render(setup_segments(topic, store), color)
