"""Long listing renderer with column widths computed over all rows.

The first pass formats every column and records the widest value per column;
the second pass pads each row to those widths. Owner and group lookups are
injectable so callers and tests can replace the system databases.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime

from ..ansi import display_width, pad_left, pad_right
from ..config import ListingConfig
from ..listing_model import Entry, group_name, owner_name
from ..palette import Palette, resolve_palette
from .formatting import LINK_ARROW, entry_label, format_permissions, format_size, summary_line


@dataclass(frozen=True)
class LongRow:
    """Formatted column values for one entry before padding."""

    permissions: str
    size: str
    owner: str
    group: str
    month: str
    day: str
    time: str
    label: str


_COLUMNS = ("permissions", "size", "owner", "group", "month", "day", "time")


def build_long_row(
    entry: Entry,
    config: ListingConfig,
    palette: Palette,
    owner_for: Callable[[int], str],
    group_for: Callable[[int], str],
) -> LongRow:
    """Format one entry's columns; lookup failures propagate."""
    modified = datetime.fromtimestamp(entry.mtime_ns / 1_000_000_000)
    label = entry_label(entry, config, palette)
    if entry.is_symlink and entry.link_target is not None:
        label = f"{label} {palette.paint(LINK_ARROW, palette.link_arrow)} {entry.link_target}"
    return LongRow(
        permissions=format_permissions(entry, palette),
        size=format_size(entry.size, config.human_readable),
        owner=owner_for(entry.uid),
        group=group_for(entry.gid),
        month=modified.strftime("%b"),
        day=str(modified.day),
        time=modified.strftime("%H:%M"),
        label=label,
    )


def column_widths(rows: Sequence[LongRow]) -> dict[str, int]:
    """Return the widest visible value of each column."""
    widths = {column: 0 for column in _COLUMNS}
    for row in rows:
        for column in _COLUMNS:
            widths[column] = max(widths[column], display_width(getattr(row, column)))
    return widths


def format_long_row(row: LongRow, widths: dict[str, int]) -> str:
    return " ".join(
        (
            pad_right(row.permissions, widths["permissions"]),
            pad_left(row.size, widths["size"]),
            pad_right(row.owner, widths["owner"]),
            pad_right(row.group, widths["group"]),
            pad_right(row.month, widths["month"]),
            pad_right(row.day, widths["day"]),
            pad_right(row.time, widths["time"]),
            row.label,
        )
    )


def render_long_listing(
    entries: Sequence[Entry],
    config: ListingConfig,
    owner_for: Callable[[int], str] = owner_name,
    group_for: Callable[[int], str] = group_name,
) -> str:
    palette = resolve_palette(config.color)
    rows = [build_long_row(entry, config, palette, owner_for, group_for) for entry in entries]
    widths = column_widths(rows)
    lines = [format_long_row(row, widths) for row in rows]
    if config.show_summary:
        lines.append(summary_line(entries, palette))
    return "".join(f"{line}\n" for line in lines)


__all__ = [
    "LongRow",
    "build_long_row",
    "column_widths",
    "format_long_row",
    "render_long_listing",
]
