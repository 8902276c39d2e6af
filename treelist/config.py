"""Listing options gathered from the command line.

``TreeConfig`` is the one object handed from argument parsing to the filter
policy and walker. Nothing is persisted between runs.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

from .errors import ConfigurationError

SORT_CHOICES = ("none", "name")


@dataclass(frozen=True)
class TreeConfig:
    """Validated listing options.

    ``max_depth`` of ``None`` means unlimited. ``sort="none"`` keeps the order
    the filesystem driver returns.
    """

    all_files: bool = False
    dirs_only: bool = False
    full_path: bool = False
    max_depth: int | None = None
    ignore_patterns: tuple[str, ...] = ()
    gitignore: bool = False
    follow_links: bool = True
    sort: str = "none"
    color: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                raise ConfigurationError(f"invalid level value: {self.max_depth!r}")
            if self.max_depth <= 0:
                raise ConfigurationError("invalid level, must be greater than 0")
        if self.sort not in SORT_CHOICES:
            raise ConfigurationError(f"invalid sort value: {self.sort!r}")

    @classmethod
    def from_args(cls, args: argparse.Namespace, color: bool = False) -> TreeConfig:
        """Build config from parsed CLI arguments; ``color`` is resolved by the caller."""
        return cls(
            all_files=bool(args.all_files),
            dirs_only=bool(args.dirs_only),
            full_path=bool(args.full_path),
            max_depth=args.level,
            ignore_patterns=tuple(args.ignore or ()),
            gitignore=bool(args.gitignore),
            follow_links=bool(args.follow_links),
            sort=args.sort,
            color=color,
        )


__all__ = ["SORT_CHOICES", "TreeConfig"]
