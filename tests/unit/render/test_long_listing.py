"""Long listing column alignment tests.

Owner and group lookups are injected so rows do not depend on the host
user database.
"""

from __future__ import annotations

import stat
import unittest
from datetime import datetime
from pathlib import Path

from gols.config import ListingConfig
from gols.listing_model import KIND_DIR, KIND_FILE, KIND_SYMLINK, Entry
from gols.render import render_long_listing

OWNERS = {1: "bob", 2: "charlie"}
GROUPS = {10: "staff", 20: "wheel"}
MTIME_NS = int(datetime(2024, 3, 5, 9, 7).timestamp() * 1_000_000_000)


def render(entries: list[Entry], config: ListingConfig | None = None) -> list[str]:
    rendered = render_long_listing(
        entries,
        config or ListingConfig(color=False),
        owner_for=OWNERS.__getitem__,
        group_for=GROUPS.__getitem__,
    )
    return rendered.splitlines()


def make_entry(name: str, uid: int = 1, gid: int = 10, size: int = 10, **overrides) -> Entry:
    values = dict(
        name=name,
        path=Path(name),
        kind=KIND_FILE,
        size=size,
        mtime_ns=MTIME_NS,
        mode=stat.S_IFREG | 0o644,
        uid=uid,
        gid=gid,
    )
    values.update(overrides)
    return Entry(**values)


class LongListingTests(unittest.TestCase):
    def test_owner_column_is_padded_to_widest_owner(self) -> None:
        lines = render([make_entry("a", uid=1), make_entry("b", uid=2)])

        self.assertIn("bob     staff", lines[0])
        self.assertIn("charlie staff", lines[1])
        self.assertEqual(lines[0].index("staff"), lines[1].index("staff"))

    def test_size_column_is_right_aligned(self) -> None:
        lines = render([make_entry("small", size=7), make_entry("large", size=123456)])

        self.assertIn("      7B bob", lines[0])
        self.assertIn(" 123456B bob", lines[1])

    def test_row_layout_with_date_columns(self) -> None:
        lines = render([make_entry("notes", gid=20)])

        self.assertEqual(lines[0], "-rw-r--r-- 10B bob wheel Mar 5 09:07   notes")

    def test_day_column_aligns_single_and_double_digits(self) -> None:
        later = int(datetime(2024, 3, 15, 9, 7).timestamp() * 1_000_000_000)
        lines = render([make_entry("a"), make_entry("b", mtime_ns=later)])

        self.assertIn("Mar 5  09:07", lines[0])
        self.assertIn("Mar 15 09:07", lines[1])

    def test_symlink_appends_target_and_directory_label(self) -> None:
        link = make_entry(
            "latest",
            kind=KIND_SYMLINK,
            mode=stat.S_IFLNK | 0o777,
            link_target="releases/v2",
            link_target_is_dir=True,
        )
        folder = make_entry("releases", kind=KIND_DIR, mode=stat.S_IFDIR | 0o755)

        lines = render([link, folder])

        self.assertTrue(lines[0].startswith("lrwxrwxrwx"))
        self.assertTrue(lines[0].endswith("latest ==> releases/v2"))
        self.assertTrue(lines[1].startswith("drwxr-xr-x"))
        self.assertIn("releases/", lines[1])

    def test_summary_and_lookup_failures(self) -> None:
        lines = render([make_entry("a")], ListingConfig(color=False, show_summary=True))
        self.assertEqual(lines[-1], "0 directories, 1 files")

        with self.assertRaises(KeyError):
            render([make_entry("ghost", uid=99)])


if __name__ == "__main__":
    unittest.main()
