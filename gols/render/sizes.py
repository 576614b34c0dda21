"""Size listing renderer: right-aligned size column, then glyph and name."""

from __future__ import annotations

from collections.abc import Sequence

from ..ansi import pad_left
from ..config import ListingConfig
from ..listing_model import Entry
from ..palette import resolve_palette
from .formatting import entry_label, format_size, summary_line

SIZE_FIELD_WIDTH = 10


def render_size_listing(entries: Sequence[Entry], config: ListingConfig) -> str:
    palette = resolve_palette(config.color)
    lines: list[str] = []
    for entry in entries:
        size_text = pad_left(format_size(entry.size, config.human_readable), SIZE_FIELD_WIDTH)
        lines.append(f"{size_text}  {entry_label(entry, config, palette)}")
    if config.show_summary:
        lines.append(summary_line(entries, palette))
    return "".join(f"{line}\n" for line in lines)


__all__ = ["SIZE_FIELD_WIDTH", "render_size_listing"]
