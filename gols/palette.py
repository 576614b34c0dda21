"""ANSI color names and the semantic palette used by renderers.

Base colors come from ``pygments.console`` so escape codes match the
terminal formatter; extended 256-color shades are spelled out directly.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

RESET = codes["reset"]

COLORS: dict[str, str] = {
    "red": codes["red"],
    "green": codes["green"],
    "yellow": codes["yellow"],
    "blue": codes["blue"],
    "magenta": codes["magenta"],
    "cyan": codes["cyan"],
    "gray": codes["gray"],
    "bright_red": codes["brightred"],
    "bright_green": codes["brightgreen"],
    "bright_blue": codes["brightblue"],
    "bright_magenta": codes["brightmagenta"],
    "bright_cyan": codes["brightcyan"],
    # pygments maps "white" to bold, so bright white is explicit.
    "white": "\033[97m",
    "orange": "\033[38;5;208m",
    "dark_green": "\033[38;5;22m",
    "dark_yellow": "\033[38;5;172m",
    "dark_magenta": "\033[38;5;125m",
    "dim": codes["faint"],
}


def color_code(name: str) -> str:
    """Return the escape sequence for a named color (empty for unknown names)."""
    return COLORS.get(name, "")


@dataclass(frozen=True)
class Palette:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    directory: str
    symlink_dir: str
    symlink_file: str
    executable: str
    link_arrow: str
    tree_branch: str
    perm_read: str
    perm_write: str
    perm_exec: str
    summary: str

    @property
    def enabled(self) -> bool:
        return bool(self.reset)

    def paint(self, text: str, color: str) -> str:
        """Wrap ``text`` in ``color`` when the palette emits escapes."""
        if not self.enabled or not color:
            return text
        return f"{color}{text}{self.reset}"


DEFAULT_PALETTE = Palette(
    name="default",
    reset=RESET,
    directory=COLORS["blue"],
    symlink_dir=COLORS["bright_cyan"],
    symlink_file=COLORS["cyan"],
    executable=COLORS["bright_green"],
    link_arrow=COLORS["gray"],
    tree_branch=COLORS["dim"],
    perm_read=COLORS["green"],
    perm_write=COLORS["yellow"],
    perm_exec=COLORS["red"],
    summary=COLORS["gray"],
)

PLAIN_PALETTE = Palette(
    name="plain",
    reset="",
    directory="",
    symlink_dir="",
    symlink_file="",
    executable="",
    link_arrow="",
    tree_branch="",
    perm_read="",
    perm_write="",
    perm_exec="",
    summary="",
)


def resolve_palette(color: bool) -> Palette:
    """Return the palette for the requested color mode."""
    return DEFAULT_PALETTE if color else PLAIN_PALETTE


__all__ = [
    "RESET",
    "COLORS",
    "color_code",
    "Palette",
    "DEFAULT_PALETTE",
    "PLAIN_PALETTE",
    "resolve_palette",
]
