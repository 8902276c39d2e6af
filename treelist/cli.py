"""Command-line front door for treelist.

Parses options into a ``TreeConfig``, configures stderr logging, and prints
the tree for the target path. Exit status is non-zero when the root is
missing or any directory could not be fully listed.
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import SORT_CHOICES, TreeConfig
from .errors import ConfigurationError, TreeListError
from .walker import walk_tree

PROG = "treelist"
LOG_FORMAT = f"{PROG}: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="List contents of directories in a tree-like format.",
        epilog=(
            "With no arguments, lists the current directory. Upon completion the "
            "total number of directories and files listed is printed."
        ),
    )
    parser.add_argument("path", nargs="?", default=".", help="Directory to list. Defaults to current directory.")
    parser.add_argument(
        "-a",
        "--all",
        dest="all_files",
        action="store_true",
        help="Print hidden entries too (names beginning with '.').",
    )
    parser.add_argument("-d", "--dirs-only", dest="dirs_only", action="store_true", help="List directories only.")
    parser.add_argument(
        "-f",
        "--full-path",
        dest="full_path",
        action="store_true",
        help="Print the full path prefix for each entry.",
    )
    parser.add_argument(
        "-L",
        "--level",
        type=_positive_int,
        default=None,
        metavar="LEVEL",
        help="Max display depth of the directory tree.",
    )
    parser.add_argument(
        "-I",
        "--ignore",
        action="append",
        metavar="PATTERN",
        help="Do not list entries whose name matches the wildcard PATTERN (repeatable).",
    )
    parser.add_argument("--gitignore", action="store_true", help="Skip entries ignored by git.")
    parser.add_argument(
        "--no-follow-links",
        dest="follow_links",
        action="store_false",
        help="List symlinked directories without descending into them (no cycle detection is done otherwise).",
    )
    parser.add_argument(
        "--sort",
        choices=SORT_CHOICES,
        default="none",
        help="Entry order: 'none' keeps filesystem order (default), 'name' sorts by name.",
    )
    color_group = parser.add_mutually_exclusive_group()
    color_group.add_argument(
        "-C",
        "--color",
        dest="color",
        action="store_const",
        const=True,
        default=None,
        help="Always colorize names.",
    )
    color_group.add_argument(
        "-n",
        "--no-color",
        dest="color",
        action="store_const",
        const=False,
        help="Never colorize names (default when stdout is not a TTY).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log traversal details to stderr.")
    return parser


def _resolve_color(requested: bool | None) -> bool:
    if requested is not None:
        return requested
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and print the tree for the requested path.

    Invalid option values exit with status 2 before anything is listed. A
    missing root exits with status 1 and no tree; recoverable listing errors
    are logged to stderr and also yield status 1 after the summary.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = TreeConfig.from_args(args, color=_resolve_color(args.color))
    except ConfigurationError as exc:
        parser.error(exc.message)

    try:
        report = walk_tree(args.path, config, sys.stdout)
    except TreeListError as exc:
        raise SystemExit(f"{PROG}: {exc}") from exc

    if not report.ok:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
