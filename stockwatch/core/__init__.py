"""Core modules for stockwatch."""

from .config import Settings
from .console import paint, render, strip_ansi
from .logging_utils import PrettyJsonFormatter, configure_logging, resolve_level

__all__ = [
    "Settings",
    "render",
    "paint",
    "strip_ansi",
    "PrettyJsonFormatter",
    "configure_logging",
    "resolve_level",
]
