"""Store and link definitions for stockwatch."""

from .base import Link, Store
from .registry import StoreRegistry

__all__ = [
    "Link",
    "Store",
    "StoreRegistry",
]
