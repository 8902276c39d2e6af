"""Entry acceptance rules composed from ``TreeConfig``.

A rejected entry is not printed, not counted, and not descended into.
"""

from __future__ import annotations

import fnmatch
import os
from dataclasses import dataclass

from .config import TreeConfig
from .entries import entry_name, is_directory, is_hidden
from .gitignore import IgnoredPaths, load_ignored_paths


@dataclass(frozen=True)
class FilterPolicy:
    """Stateless predicate deciding which entries a walk visits.

    Depth counts from the root at ``0``; its direct children are at ``1``.
    """

    all_files: bool = False
    dirs_only: bool = False
    max_depth: int | None = None
    ignore_patterns: tuple[str, ...] = ()
    git_ignored: IgnoredPaths | None = None

    @classmethod
    def from_config(cls, config: TreeConfig, root: str | os.PathLike[str] | None = None) -> FilterPolicy:
        """Build the policy for one run; ``root`` is needed only for ``--gitignore``."""
        git_ignored = None
        if config.gitignore and root is not None:
            git_ignored = load_ignored_paths(root)
        return cls(
            all_files=config.all_files,
            dirs_only=config.dirs_only,
            max_depth=config.max_depth,
            ignore_patterns=config.ignore_patterns,
            git_ignored=git_ignored,
        )

    def permits_descent(self, depth: int) -> bool:
        """Return whether children of a directory at ``depth`` may be visited."""
        return self.max_depth is None or depth < self.max_depth

    def matches_ignore_pattern(self, path: str | os.PathLike[str]) -> bool:
        name = entry_name(path)
        return any(fnmatch.fnmatch(name, pattern) for pattern in self.ignore_patterns)

    def accepts(self, path: str | os.PathLike[str], depth: int) -> bool:
        """Return whether the entry at ``path`` (at ``depth``) is visited at all.

        The walker never asks past the depth limit because ``permits_descent``
        stops it first; the depth check here serves callers using ``accepts``
        on its own. Only the directories-only rule touches the filesystem; an
        ``OSError`` from that classification propagates.
        """
        if self.max_depth is not None and depth > self.max_depth:
            return False
        if not self.all_files and is_hidden(path):
            return False
        if self.ignore_patterns and self.matches_ignore_pattern(path):
            return False
        if self.git_ignored is not None and self.git_ignored.is_ignored(path):
            return False
        if self.dirs_only and not is_directory(path):
            return False
        return True


__all__ = ["FilterPolicy"]
