"""Render styled segments as plain or ANSI-colored strings."""

import re
from typing import Iterable, Optional, Tuple

from rich.color import ColorSystem
from rich.style import Style

Segment = Tuple[str, Optional[str]]

# SGR sequences only; that is all ``paint`` emits.
_SGR = re.compile(r"\x1b\[[0-9;]*m")


def paint(text: str, style: Optional[str]) -> str:
    """Wrap text in the ANSI codes for a rich style name, leaving the text untouched."""
    if not style or not text:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def render(segments: Iterable[Segment], color: bool = False) -> str:
    """Join segments, coloring each one when asked."""
    if color:
        return "".join(paint(text, style) for text, style in segments)
    return "".join(text for text, _ in segments)


def strip_ansi(value: str) -> str:
    """Drop ANSI styling, keeping the text content."""
    return _SGR.sub("", value)
