"""Filesystem metadata provider: directory reads, per-entry stat, id lookups.

Every per-entry read goes through ``read_entry`` so the failure policy for a
single entry lives in one place. Failures propagate as ``OSError``.
"""

from __future__ import annotations

import grp
import os
import pwd
import stat
from pathlib import Path

from .types import KIND_DIR, KIND_FILE, KIND_SYMLINK, Entry, MetadataError


def kind_for_mode(mode: int) -> str:
    """Map an ``lstat`` mode to an entry kind."""
    if stat.S_ISLNK(mode):
        return KIND_SYMLINK
    if stat.S_ISDIR(mode):
        return KIND_DIR
    return KIND_FILE


def _link_target_is_dir(path: Path) -> bool | None:
    """Return whether a symlink resolves to a directory, ``None`` if dangling."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return None


def read_entry(path: Path) -> Entry:
    """Read metadata for one path without following symlinks.

    Raises ``OSError`` when the entry cannot be stat'ed or its link text cannot
    be read. A symlink whose target does not resolve is not an error; its
    ``link_target_is_dir`` is ``None``.
    """
    st = os.lstat(path)
    kind = kind_for_mode(st.st_mode)
    link_target: str | None = None
    link_target_is_dir: bool | None = None
    if kind == KIND_SYMLINK:
        link_target = os.readlink(path)
        link_target_is_dir = _link_target_is_dir(path)
    return Entry(
        name=path.name,
        path=path,
        kind=kind,
        size=int(st.st_size),
        mtime_ns=int(st.st_mtime_ns),
        mode=int(st.st_mode),
        uid=int(st.st_uid),
        gid=int(st.st_gid),
        link_target=link_target,
        link_target_is_dir=link_target_is_dir,
    )


def list_directory(directory: Path) -> list[Entry]:
    """Return all entries of ``directory`` in name order.

    Hidden entries are included; filtering is the collector's job.
    """
    with os.scandir(directory) as children:
        names = sorted(child.name for child in children)
    return [read_entry(directory / name) for name in names]


def owner_name(uid: int) -> str:
    """Resolve a user id to its login name."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError as exc:
        raise MetadataError(f"user: unknown userid {uid}") from exc


def group_name(gid: int) -> str:
    """Resolve a group id to its group name."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError as exc:
        raise MetadataError(f"group: unknown groupid {gid}") from exc


__all__ = [
    "kind_for_mode",
    "read_entry",
    "list_directory",
    "owner_name",
    "group_name",
]
