"""Command-line front door for gols.

Parses flags into a ``ListingConfig``, collects the directory entries, and
writes the selected rendering to stdout. Usage errors exit with status 2 via
argparse; filesystem failures exit with status 1.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .config import PROG_NAME, UNLIMITED_DEPTH, ListingConfig, version_text
from .listing_model import prepare_entries, read_listing
from .render import render_listing

NO_FILES_MESSAGE = "No files found."

# Short flag letter -> ListingConfig field.
_BOOLEAN_FLAGS = {
    "a": "show_hidden",
    "c": "one_column",
    "f": "show_summary",
    "h": "human_readable",
    "i": "dir_icon_left",
    "l": "long_listing",
    "m": "symlinks_only",
    "o": "sort_by_size",
    "r": "recursive",
    "s": "show_size",
    "t": "sort_by_time",
    "v": "show_version",
}
_FLAG_HELP = {
    "a": "show hidden entries (names starting with '.')",
    "c": "one entry per line in grid mode",
    "f": "print directory and file counts after the listing",
    "h": "human-readable sizes (KB, MB, ...)",
    "i": "put the directory icon left of the name",
    "l": "long listing with permissions, owner, group and time",
    "m": "list symlinks only",
    "o": "sort by size, smallest first",
    "r": "recursive tree",
    "s": "list entries with their sizes",
    "t": "sort by modification time, oldest first",
    "v": "print the version and exit",
}
# Flags that only pick or shape a renderer; everything else is "specific".
MODE_FLAGS = frozenset({"long_listing", "show_size", "recursive", "human_readable"})


@dataclass(frozen=True)
class ParsedArguments:
    """Configuration plus positional arguments and flag-presence markers."""

    config: ListingConfig
    directory: str
    extension: str | None
    any_flag: bool
    specific_flag: bool


def _depth_value(value: str) -> int:
    """argparse type for the ``-d`` max-depth value."""
    try:
        return int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid depth value: {value!r}") from exc


def extension_filter(token: str | None) -> str | None:
    """Return the extension of ``token`` without its dot (``*.go`` -> ``go``)."""
    if not token:
        return None
    name = os.path.basename(token)
    if "." not in name:
        return None
    return name.rsplit(".", 1)[1] or None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="List directory entries with colors and file-type icons.",
        add_help=False,
    )
    for letter, dest in _BOOLEAN_FLAGS.items():
        parser.add_argument(f"-{letter}", dest=dest, action="store_true", help=_FLAG_HELP[letter])
    parser.add_argument(
        "-d",
        dest="max_depth",
        type=_depth_value,
        default=None,
        metavar="N",
        help="limit tree recursion to N levels (-1 for unlimited)",
    )
    parser.add_argument("--no-color", dest="no_color", action="store_true", help="disable ANSI colors")
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("directory", nargs="?", default=".", help="directory to list (default: .)")
    parser.add_argument(
        "filename",
        nargs="?",
        default=None,
        help="only list regular files sharing this name's extension",
    )
    return parser


def parse_arguments(argv: list[str]) -> ParsedArguments:
    """Parse ``argv`` (without program name); exits with status 2 on misuse.

    Leftover arguments are tolerated only alongside ``-v``, which prints the
    version whatever else was given.
    """
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)
    if extras and not args.show_version:
        parser.error(f"unrecognized arguments: {' '.join(extras)}")

    present: set[str] = {dest for dest in _BOOLEAN_FLAGS.values() if getattr(args, dest)}
    if args.max_depth is not None:
        present.add("max_depth")
    if args.no_color:
        present.add("no_color")

    config = ListingConfig(
        **{dest: bool(getattr(args, dest)) for dest in _BOOLEAN_FLAGS.values()},
        max_depth=UNLIMITED_DEPTH if args.max_depth is None else args.max_depth,
        color=not args.no_color,
    )
    return ParsedArguments(
        config=config,
        directory=args.directory,
        extension=extension_filter(args.filename),
        any_flag=bool(present),
        specific_flag=bool(present - MODE_FLAGS),
    )


def main(argv: list[str] | None = None) -> None:
    """Run one listing.

    ``argv`` is primarily for tests; when omitted ``sys.argv[1:]`` is used.
    """
    parsed = parse_arguments(sys.argv[1:] if argv is None else argv)
    config = parsed.config
    if config.show_version:
        sys.stdout.write(version_text() + "\n")
        return

    directory = Path(parsed.directory)
    try:
        raw_entries = read_listing(directory, parsed.extension)
        if not raw_entries:
            sys.stdout.write(NO_FILES_MESSAGE + "\n")
            return
        entries = prepare_entries(raw_entries, config)
        output = render_listing(directory, entries, config)
    except OSError as exc:
        raise SystemExit(f"{PROG_NAME}: {exc}") from exc

    sys.stdout.write(output)
    if parsed.any_flag and not parsed.specific_flag:
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
