"""ANSI-aware text measurement and padding utilities.

Listings mix escape sequences, Nerd Font glyphs and wide characters.
These helpers keep columns aligned by counting only visible terminal cells.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, East Asian wide/fullwidth characters
    consume two, and everything else (including private-use icon glyphs)
    consumes one.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    """Remove escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    """Return visible width of a styled string, ignoring escape sequences."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def pad_right(text: str, width: int) -> str:
    """Left-align ``text`` in a field of ``width`` visible columns."""
    return text + " " * max(0, width - display_width(text))


def pad_left(text: str, width: int) -> str:
    """Right-align ``text`` in a field of ``width`` visible columns."""
    return " " * max(0, width - display_width(text)) + text


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "pad_right",
    "pad_left",
]
