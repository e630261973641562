"""Outcome reporting and stock status pushes."""

from .identity import build_product_string, build_setup_string
from .ingestion import StockStatusClient, StockStatusRecord
from .outcomes import Outcome, OutcomeKind
from .reporter import EventReporter, get_reporter

__all__ = [
    "build_product_string",
    "build_setup_string",
    "StockStatusClient",
    "StockStatusRecord",
    "Outcome",
    "OutcomeKind",
    "EventReporter",
    "get_reporter",
]
