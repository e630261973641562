"""Store and product link definitions consumed by the reporter."""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Union


Number = Union[int, float]


@dataclass(frozen=True)
class Link:
    """A single trackable product listing."""

    brand: str
    series: str
    model: str
    url: str

    # Alternate URLs
    affiliate_url: Optional[str] = None
    cart_url: Optional[str] = None

    price: Optional[Number] = None

    # Cloudflare retry context, owned by the scraper
    cloudflare: Optional[dict] = None

    @property
    def reporting_url(self) -> str:
        """URL reported to the stock status server (affiliate link preferred)."""
        return self.affiliate_url if self.affiliate_url else self.url


@dataclass(frozen=True)
class Store:
    """A monitored site."""

    name: str
    bulk: bool = False

    # Proxy rotation state (both set or both unset)
    current_proxy_index: Optional[int] = None
    proxy_list: Optional[Sequence[str]] = field(default=None)

    def proxy_position(self) -> Optional[str]:
        """1-based "index/total" of the current proxy, if rotation is active."""
        if self.current_proxy_index is None or self.proxy_list is None:
            return None
        return f"{self.current_proxy_index + 1}/{len(self.proxy_list)}"
