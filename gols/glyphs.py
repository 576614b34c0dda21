"""Extension and file-type glyph lookup for listing rows.

Glyphs are Nerd Font private-use code points. Resolution checks symlinks,
then directories, then the extension table, then the owner-execute bit.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .listing_model import Entry
from .palette import RESET, color_code

GLYPH_SEPARATOR = " "
BLANK_GLYPH = "  "


@dataclass(frozen=True)
class GlyphRule:
    """Glyph plus color name; ``executable_color`` applies when ``u+x`` is set."""

    glyph: str
    color: str
    executable_color: str | None = None

    def color_for(self, entry: Entry) -> str:
        if self.executable_color is not None and entry.owner_executable:
            return self.executable_color
        return self.color


DIRECTORY_RULE = GlyphRule("\ue5ff", "blue")
SYMLINK_DIR_RULE = GlyphRule("\uf482", "bright_cyan")
SYMLINK_FILE_RULE = GlyphRule("\uf481", "cyan")
EXECUTABLE_RULE = GlyphRule("\uf489", "bright_green")

_C = GlyphRule("\ue61e", "blue")
_CPP = GlyphRule("\ue61d", "blue")
_JAVA = GlyphRule("\ue738", "white")
_MARKUP = GlyphRule("\ueae9", "red")
_CONFIG = GlyphRule("\ue6a8", "dark_yellow")
_IMAGE = GlyphRule("\uf03e", "magenta")
_VECTOR = GlyphRule("\uf1c5", "magenta")
_AUDIO = GlyphRule("\ue638", "cyan")
_VIDEO = GlyphRule("\uf03d", "cyan")
_ARCHIVE = GlyphRule("\U000f0ffa", "yellow")
_WORD = GlyphRule("\uf1c2", "bright_blue")

EXTENSION_RULES: dict[str, GlyphRule] = {
    # source code
    ".go": GlyphRule("\ue627", "cyan"),
    ".sh": GlyphRule("\ue795", "white", executable_color="bright_green"),
    ".c": _C,
    ".h": _C,
    ".cpp": _CPP,
    ".hpp": _CPP,
    ".cxx": _CPP,
    ".hxx": _CPP,
    ".css": GlyphRule("\uf13c", "blue"),
    ".java": _JAVA,
    ".jar": _JAVA,
    ".js": GlyphRule("\ue781", "yellow"),
    ".ts": GlyphRule("\ue628", "bright_blue"),
    ".py": GlyphRule("\ue73c", "yellow"),
    ".rs": GlyphRule("\ue7a8", "orange"),
    ".rb": GlyphRule("\ue791", "red"),
    ".php": GlyphRule("\ue608", "magenta"),
    ".pl": GlyphRule("\ue769", "orange"),
    ".lua": GlyphRule("\ue620", "blue"),
    ".zig": GlyphRule("\ue6a9", "orange"),
    ".hs": GlyphRule("\ue777", "bright_magenta"),
    ".swift": GlyphRule("\ue755", "orange"),
    ".kt": GlyphRule("\ue634", "dark_magenta"),
    # markup and data
    ".xml": _MARKUP,
    ".htm": _MARKUP,
    ".html": _MARKUP,
    ".md": GlyphRule("\ue73e", "blue"),
    ".json": GlyphRule("\ue60b", "yellow"),
    ".toml": GlyphRule("\ue6b2", "dark_yellow"),
    ".yaml": _CONFIG,
    ".yml": _CONFIG,
    ".csv": GlyphRule("\uf1c3", "green"),
    # images
    ".png": _IMAGE,
    ".jpg": _IMAGE,
    ".jpeg": _IMAGE,
    ".webp": _IMAGE,
    ".gif": _IMAGE,
    ".bmp": _IMAGE,
    ".ico": _IMAGE,
    ".xcf": GlyphRule("\uf338", "white"),
    ".svg": _VECTOR,
    ".eps": _VECTOR,
    ".ps": _VECTOR,
    # audio and video
    ".mp3": _AUDIO,
    ".ogg": _AUDIO,
    ".wav": _AUDIO,
    ".flac": _AUDIO,
    ".mp4": _VIDEO,
    ".mkv": _VIDEO,
    ".webm": _VIDEO,
    # archives and packages
    ".zip": _ARCHIVE,
    ".tar": _ARCHIVE,
    ".gz": _ARCHIVE,
    ".bz2": _ARCHIVE,
    ".xz": _ARCHIVE,
    ".zst": _ARCHIVE,
    ".7z": _ARCHIVE,
    ".rar": _ARCHIVE,
    ".deb": GlyphRule("\ue77d", "red"),
    ".xbps": GlyphRule("\uf32e", "dark_green"),
    # documents
    ".txt": GlyphRule("\uf15c", "white"),
    ".pdf": GlyphRule("\uf1c1", "bright_red"),
    ".doc": _WORD,
    ".docx": _WORD,
    ".odt": _WORD,
    ".git": GlyphRule("\ue702", "orange"),
}


def extension_of(name: str) -> str:
    """Return the lower-cased suffix of ``name`` including the dot."""
    return os.path.splitext(name)[1].lower()


def resolve_glyph_rule(entry: Entry) -> GlyphRule | None:
    """Pick the rule for ``entry``; ``None`` means the blank glyph."""
    if entry.is_symlink and entry.link_target_is_dir is not None:
        return SYMLINK_DIR_RULE if entry.link_target_is_dir else SYMLINK_FILE_RULE
    if entry.is_dir:
        return DIRECTORY_RULE
    rule = EXTENSION_RULES.get(extension_of(entry.name))
    if rule is not None:
        return rule
    if entry.owner_executable and not entry.is_symlink:
        return EXECUTABLE_RULE
    return None


def resolve_glyph(entry: Entry, color: bool = True) -> str:
    """Return the glyph for ``entry`` followed by one space, optionally colored."""
    rule = resolve_glyph_rule(entry)
    if rule is None:
        return BLANK_GLYPH
    text = f"{rule.glyph}{GLYPH_SEPARATOR}"
    code = color_code(rule.color_for(entry)) if color else ""
    if not code:
        return text
    return f"{code}{text}{RESET}"


__all__ = [
    "GLYPH_SEPARATOR",
    "BLANK_GLYPH",
    "GlyphRule",
    "DIRECTORY_RULE",
    "SYMLINK_DIR_RULE",
    "SYMLINK_FILE_RULE",
    "EXECUTABLE_RULE",
    "EXTENSION_RULES",
    "extension_of",
    "resolve_glyph_rule",
    "resolve_glyph",
]
