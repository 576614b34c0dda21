"""Listing renderers and mode dispatch.

Exactly one renderer runs per invocation, chosen by ``ListingConfig.mode``.
Every renderer returns text; nothing here writes to stdout.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..config import MODE_LONG, MODE_SIZE, MODE_TREE, ListingConfig
from ..listing_model import Entry
from .grid import render_grid
from .long import render_long_listing
from .sizes import render_size_listing
from .tree import render_tree


def render_listing(directory: Path, entries: Sequence[Entry], config: ListingConfig) -> str:
    """Render ``entries`` (or, in tree mode, ``directory`` itself)."""
    mode = config.mode
    if mode == MODE_TREE:
        return render_tree(directory, config)
    if mode == MODE_LONG:
        return render_long_listing(entries, config)
    if mode == MODE_SIZE:
        return render_size_listing(entries, config)
    return render_grid(entries, config)


__all__ = [
    "render_grid",
    "render_long_listing",
    "render_size_listing",
    "render_tree",
    "render_listing",
]
