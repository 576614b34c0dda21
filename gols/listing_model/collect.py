"""Entry collection, filtering, and sorting for flat listings."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from ..config import ListingConfig
from .fs import list_directory
from .types import KIND_FILE, Entry


def matches_extension(entry: Entry, extension: str) -> bool:
    """Return whether ``entry`` is a regular file named ``*.<extension>``."""
    return entry.kind == KIND_FILE and entry.name.endswith(f".{extension}")


def read_listing(directory: Path, extension: str | None = None) -> list[Entry]:
    """Read the raw entry list, restricted to one extension when given."""
    entries = list_directory(directory)
    if extension:
        entries = [entry for entry in entries if matches_extension(entry, extension)]
    return entries


def filter_hidden(entries: Iterable[Entry], show_hidden: bool) -> list[Entry]:
    if show_hidden:
        return list(entries)
    return [entry for entry in entries if not entry.is_hidden]


def filter_symlinks(entries: Iterable[Entry], symlinks_only: bool) -> list[Entry]:
    if not symlinks_only:
        return list(entries)
    return [entry for entry in entries if entry.is_symlink]


def sort_entries(entries: Iterable[Entry], config: ListingConfig) -> list[Entry]:
    """Stable ascending sort by size, else by mtime, else keep order.

    Size wins when both sort flags are set.
    """
    ordered = list(entries)
    if config.sort_by_size:
        ordered.sort(key=lambda entry: entry.size)
    elif config.sort_by_time:
        ordered.sort(key=lambda entry: entry.mtime_ns)
    return ordered


def prepare_entries(entries: Iterable[Entry], config: ListingConfig) -> list[Entry]:
    """Apply hidden filter, symlink filter, then sorting, in that order."""
    visible = filter_hidden(entries, config.show_hidden)
    visible = filter_symlinks(visible, config.symlinks_only)
    return sort_entries(visible, config)


__all__ = [
    "matches_extension",
    "read_listing",
    "filter_hidden",
    "filter_symlinks",
    "sort_entries",
    "prepare_entries",
]
