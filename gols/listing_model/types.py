"""Domain datatypes for directory entries observed from the filesystem."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path

KIND_FILE = "file"
KIND_DIR = "dir"
KIND_SYMLINK = "symlink"


class MetadataError(OSError):
    """Raised when entry metadata (stat, owner, group, link) cannot be read."""


@dataclass(frozen=True)
class Entry:
    """One filesystem object as reported by a non-following ``lstat``."""

    name: str
    path: Path
    kind: str
    size: int = 0
    mtime_ns: int = 0
    mode: int = 0
    uid: int = 0
    gid: int = 0
    link_target: str | None = None
    link_target_is_dir: bool | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind == KIND_DIR

    @property
    def is_symlink(self) -> bool:
        return self.kind == KIND_SYMLINK

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def owner_executable(self) -> bool:
        return bool(self.mode & stat.S_IXUSR)


__all__ = [
    "KIND_FILE",
    "KIND_DIR",
    "KIND_SYMLINK",
    "MetadataError",
    "Entry",
]
