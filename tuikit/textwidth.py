"""Grapheme segmentation and display width of terminal text."""

from __future__ import annotations

import regex
from wcwidth import wcwidth

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def str_width(text: str) -> int:
    """Return the number of terminal columns the text occupies.

    Control characters take no columns.
    """
    return sum(max(wcwidth(ch), 0) for ch in text)