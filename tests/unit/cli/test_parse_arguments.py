"""Flag parsing tests for ``gols.cli.parse_arguments``."""

from __future__ import annotations

import io
import unittest
from unittest import mock

from gols.cli import extension_filter, parse_arguments
from gols.config import MODE_GRID, MODE_LONG, MODE_SIZE, MODE_TREE, UNLIMITED_DEPTH, ListingConfig


class ParseArgumentsTests(unittest.TestCase):
    def assert_usage_error(self, argv: list[str]) -> str:
        with mock.patch("sys.stderr", new_callable=io.StringIO) as stderr:
            with self.assertRaises(SystemExit) as raised:
                parse_arguments(argv)
        self.assertEqual(raised.exception.code, 2)
        return stderr.getvalue()

    def test_defaults_without_arguments(self) -> None:
        parsed = parse_arguments([])

        self.assertEqual(parsed.config, ListingConfig())
        self.assertEqual(parsed.directory, ".")
        self.assertIsNone(parsed.extension)
        self.assertFalse(parsed.any_flag)
        self.assertFalse(parsed.specific_flag)
        self.assertEqual(parsed.config.mode, MODE_GRID)

    def test_fused_flags_are_order_independent(self) -> None:
        self.assertEqual(parse_arguments(["-lh"]).config, parse_arguments(["-hl"]).config)
        self.assertEqual(parse_arguments(["-lh"]).config, parse_arguments(["-l", "-h"]).config)

    def test_every_boolean_letter_sets_its_field(self) -> None:
        config = parse_arguments(["-acfhilmorstv"]).config

        self.assertTrue(config.show_hidden)
        self.assertTrue(config.one_column)
        self.assertTrue(config.show_summary)
        self.assertTrue(config.human_readable)
        self.assertTrue(config.dir_icon_left)
        self.assertTrue(config.long_listing)
        self.assertTrue(config.symlinks_only)
        self.assertTrue(config.sort_by_size)
        self.assertTrue(config.recursive)
        self.assertTrue(config.show_size)
        self.assertTrue(config.sort_by_time)
        self.assertTrue(config.show_version)

    def test_depth_accepts_fused_and_separate_values(self) -> None:
        self.assertEqual(parse_arguments(["-d3"]).config.max_depth, 3)
        self.assertEqual(parse_arguments(["-d", "3"]).config.max_depth, 3)
        self.assertEqual(parse_arguments(["-rd2"]).config.max_depth, 2)
        self.assertEqual(parse_arguments(["-d", "-1"]).config.max_depth, UNLIMITED_DEPTH)

    def test_malformed_or_missing_depth_is_a_usage_error(self) -> None:
        self.assertIn("invalid depth value", self.assert_usage_error(["-dx"]))
        self.assert_usage_error(["-d"])

    def test_unknown_flag_prints_usage(self) -> None:
        stderr = self.assert_usage_error(["-z"])
        self.assertIn("usage: gols", stderr)
        self.assert_usage_error(["-lz"])

    def test_extra_positionals_are_a_usage_error_without_version(self) -> None:
        stderr = self.assert_usage_error(["a", "b", "c"])
        self.assertIn("unrecognized arguments: c", stderr)

    def test_version_flag_tolerates_extra_arguments(self) -> None:
        parsed = parse_arguments(["-v", "a", "b", "c", "d"])

        self.assertTrue(parsed.config.show_version)
        self.assertEqual(parsed.directory, "a")

    def test_mode_precedence(self) -> None:
        self.assertEqual(parse_arguments(["-rls"]).config.mode, MODE_TREE)
        self.assertEqual(parse_arguments(["-ls"]).config.mode, MODE_LONG)
        self.assertEqual(parse_arguments(["-s"]).config.mode, MODE_SIZE)

    def test_flag_presence_markers(self) -> None:
        mode_only = parse_arguments(["-lh"])
        self.assertTrue(mode_only.any_flag)
        self.assertFalse(mode_only.specific_flag)

        specific = parse_arguments(["-la"])
        self.assertTrue(specific.any_flag)
        self.assertTrue(specific.specific_flag)

        depth_only = parse_arguments(["-d", "1"])
        self.assertTrue(depth_only.specific_flag)

    def test_positionals_and_no_color(self) -> None:
        parsed = parse_arguments(["--no-color", "src", "*.go"])

        self.assertEqual(parsed.directory, "src")
        self.assertEqual(parsed.extension, "go")
        self.assertFalse(parsed.config.color)

    def test_extension_filter_token_forms(self) -> None:
        self.assertEqual(extension_filter("*.go"), "go")
        self.assertEqual(extension_filter("main.go"), "go")
        self.assertEqual(extension_filter(".go"), "go")
        self.assertEqual(extension_filter("archive.tar.gz"), "gz")
        self.assertEqual(extension_filter("dir.d/Makefile"), None)
        self.assertIsNone(extension_filter("Makefile"))
        self.assertIsNone(extension_filter("trailing."))
        self.assertIsNone(extension_filter(None))


if __name__ == "__main__":
    unittest.main()
