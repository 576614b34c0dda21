"""Recursive tree renderer with connector prefixes and depth limiting."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ..config import ListingConfig
from ..listing_model import Entry, filter_hidden, list_directory
from ..palette import resolve_palette
from .formatting import entry_label, summary_line

BRANCH_MIDDLE = "├── "
BRANCH_LAST = "└── "
PREFIX_CONTINUE = "│   "
PREFIX_BLANK = "    "


def render_tree(
    root: Path,
    config: ListingConfig,
    list_entries: Callable[[Path], list[Entry]] = list_directory,
) -> str:
    """Render ``root`` depth-first; its children are depth 0.

    A directory at depth ``d`` is expanded only when ``config`` allows depth
    ``d + 1``. Symlinked directories are never followed. The summary counts
    the top-level children only.
    """
    palette = resolve_palette(config.color)
    lines: list[str] = [palette.paint(str(root), palette.directory)]
    top_level: list[Entry] = []

    def walk(directory: Path, prefix: str, depth: int) -> None:
        children = filter_hidden(list_entries(directory), config.show_hidden)
        if depth == 0:
            top_level.extend(children)
        for idx, child in enumerate(children):
            last = idx == len(children) - 1
            branch = BRANCH_LAST if last else BRANCH_MIDDLE
            lines.append(f"{palette.paint(prefix + branch, palette.tree_branch)}{entry_label(child, config, palette)}")
            if child.is_dir and config.descend_allowed(depth + 1):
                walk(child.path, prefix + (PREFIX_BLANK if last else PREFIX_CONTINUE), depth + 1)

    walk(root, "", 0)
    if config.show_summary:
        lines.append(summary_line(top_level, palette))
    return "".join(f"{line}\n" for line in lines)


__all__ = [
    "BRANCH_MIDDLE",
    "BRANCH_LAST",
    "PREFIX_CONTINUE",
    "PREFIX_BLANK",
    "render_tree",
]
