"""Immutable listing configuration shared by the collector and renderers.

Built once from command-line flags by ``gols.cli.parse_arguments``.
"""

from __future__ import annotations

from dataclasses import dataclass

VERSION = "1.0.0"
PROG_NAME = "gols"

MODE_TREE = "tree"
MODE_LONG = "long"
MODE_SIZE = "size"
MODE_GRID = "grid"

UNLIMITED_DEPTH = -1


@dataclass(frozen=True)
class ListingConfig:
    """Flag values for one invocation."""

    long_listing: bool = False
    human_readable: bool = False
    show_size: bool = False
    sort_by_size: bool = False
    sort_by_time: bool = False
    symlinks_only: bool = False
    show_hidden: bool = False
    recursive: bool = False
    max_depth: int = UNLIMITED_DEPTH
    dir_icon_left: bool = False
    one_column: bool = False
    show_summary: bool = False
    show_version: bool = False
    color: bool = True

    @property
    def mode(self) -> str:
        """Active renderer: tree, then long, then size, else grid."""
        if self.recursive:
            return MODE_TREE
        if self.long_listing:
            return MODE_LONG
        if self.show_size:
            return MODE_SIZE
        return MODE_GRID

    def descend_allowed(self, next_depth: int) -> bool:
        """Return whether the tree may render entries at ``next_depth``."""
        return self.max_depth < 0 or next_depth <= self.max_depth


def version_text() -> str:
    return f"{PROG_NAME}: {VERSION}"


__all__ = [
    "VERSION",
    "PROG_NAME",
    "MODE_TREE",
    "MODE_LONG",
    "MODE_SIZE",
    "MODE_GRID",
    "UNLIMITED_DEPTH",
    "ListingConfig",
    "version_text",
]
