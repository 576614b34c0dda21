"""Domain model for directory listings.

This package contains non-UI listing primitives:
- entry datatype and kind constants
- filesystem metadata provider and owner/group lookups
- collection, filtering and sorting helpers
"""

from __future__ import annotations

from .types import KIND_DIR, KIND_FILE, KIND_SYMLINK, Entry, MetadataError
from .fs import group_name, kind_for_mode, list_directory, owner_name, read_entry
from .collect import (
    filter_hidden,
    filter_symlinks,
    matches_extension,
    prepare_entries,
    read_listing,
    sort_entries,
)

__all__ = [
    "KIND_DIR",
    "KIND_FILE",
    "KIND_SYMLINK",
    "Entry",
    "MetadataError",
    "group_name",
    "kind_for_mode",
    "list_directory",
    "owner_name",
    "read_entry",
    "filter_hidden",
    "filter_symlinks",
    "matches_extension",
    "prepare_entries",
    "read_listing",
    "sort_entries",
]
