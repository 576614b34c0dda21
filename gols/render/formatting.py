"""Shared row fragments: entry labels, sizes, permission strings, summaries."""

from __future__ import annotations

import stat
from collections.abc import Iterable

from ..config import ListingConfig
from ..glyphs import DIRECTORY_RULE, resolve_glyph
from ..listing_model import Entry
from ..palette import Palette

SIZE_UNITS = ("KB", "MB", "GB", "TB", "PB")
LINK_ARROW = "==>"

_PERMISSION_TRIPLETS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
)


def format_size(size: int, human_readable: bool) -> str:
    """Format a byte count as ``1234B`` or, human-readable, ``1.21KB``."""
    if not human_readable or size < 1024:
        return f"{size}B"
    value = float(size)
    unit = SIZE_UNITS[0]
    for unit in SIZE_UNITS:
        value /= 1024
        if value < 1024:
            break
    return f"{value:.2f}{unit}"


def type_char(entry: Entry) -> str:
    """Return ``l`` for any symlink, ``d`` for directories, ``-`` otherwise."""
    if entry.is_symlink:
        return "l"
    if entry.is_dir:
        return "d"
    return "-"


def format_permissions(entry: Entry, palette: Palette) -> str:
    """Return the 10-column ``drwxr-xr-x`` style permission string.

    Setuid shows as ``s`` (or ``S`` without owner execute) in the owner
    execute slot.
    """
    mode = entry.mode
    chars = [type_char(entry)]
    for index, (read_bit, write_bit, exec_bit) in enumerate(_PERMISSION_TRIPLETS):
        chars.append(palette.paint("r", palette.perm_read) if mode & read_bit else "-")
        chars.append(palette.paint("w", palette.perm_write) if mode & write_bit else "-")
        exec_char = "x" if mode & exec_bit else "-"
        if index == 0 and mode & stat.S_ISUID:
            exec_char = "s" if mode & exec_bit else "S"
        chars.append(palette.paint(exec_char, palette.perm_exec) if exec_char != "-" else "-")
    return "".join(chars)


def directory_label(entry: Entry, config: ListingConfig, palette: Palette) -> str:
    """Render ``name/`` with the directory glyph on the right (or left)."""
    if config.dir_icon_left:
        text = f"{DIRECTORY_RULE.glyph} {entry.name}/"
    else:
        text = f"{entry.name}/ {DIRECTORY_RULE.glyph}"
    return palette.paint(text, palette.directory)


def entry_label(entry: Entry, config: ListingConfig, palette: Palette) -> str:
    """Render glyph + name, or the directory label for directories."""
    if entry.is_dir:
        return directory_label(entry, config, palette)
    return f"{resolve_glyph(entry, color=palette.enabled)}{entry.name}"


def count_kinds(entries: Iterable[Entry]) -> tuple[int, int]:
    """Return ``(directories, files)``; symlinks count as files."""
    directories = 0
    files = 0
    for entry in entries:
        if entry.is_dir:
            directories += 1
        else:
            files += 1
    return directories, files


def summary_line(entries: Iterable[Entry], palette: Palette) -> str:
    directories, files = count_kinds(entries)
    return palette.paint(f"{directories} directories, {files} files", palette.summary)


__all__ = [
    "SIZE_UNITS",
    "LINK_ARROW",
    "format_size",
    "type_char",
    "format_permissions",
    "directory_label",
    "entry_label",
    "count_kinds",
    "summary_line",
]
