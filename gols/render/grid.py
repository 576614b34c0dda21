"""Default grid renderer: fixed-width cells, four per line."""

from __future__ import annotations

from collections.abc import Sequence

from ..ansi import display_width
from ..config import ListingConfig
from ..listing_model import Entry
from ..palette import resolve_palette
from .formatting import entry_label, summary_line

GRID_NAME_WIDTH = 19
GRID_ENTRIES_PER_LINE = 4


def render_grid(entries: Sequence[Entry], config: ListingConfig) -> str:
    """Lay entries out left-to-right, padding names to ``GRID_NAME_WIDTH``.

    A name wider than the column forces a line break after it. One-column mode
    puts every entry on its own line.
    """
    palette = resolve_palette(config.color)
    per_line = 1 if config.one_column else GRID_ENTRIES_PER_LINE
    out: list[str] = []
    in_line = 0
    pending_pad = ""
    for entry in entries:
        out.append(pending_pad)
        out.append(entry_label(entry, config, palette))
        in_line += 1
        name_width = display_width(entry.name)
        if in_line >= per_line or name_width > GRID_NAME_WIDTH:
            out.append("\n")
            in_line = 0
            pending_pad = ""
        else:
            pending_pad = " " * (GRID_NAME_WIDTH - name_width)
    if in_line:
        out.append("\n")
    if config.show_summary:
        out.append(summary_line(entries, palette) + "\n")
    return "".join(out)


__all__ = ["GRID_NAME_WIDTH", "GRID_ENTRIES_PER_LINE", "render_grid"]
