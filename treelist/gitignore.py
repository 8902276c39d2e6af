"""Paths git ignores below a listing root, used by ``--gitignore``.

One ``git ls-files`` call per run collects the ignored paths relative to the
listing root. Entries are then matched by their walk location alone, so no
symlink is resolved while filtering.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)

LS_FILES_IGNORED = ("ls-files", "-z", "--others", "--ignored", "--exclude-standard", "--directory")


@dataclass(frozen=True)
class IgnoredPaths:
    """Git-ignored paths under ``root`` as ``/``-joined relative strings.

    An entry in ``dirs`` covers its whole subtree.
    """

    root: str
    files: frozenset[str] = frozenset()
    dirs: frozenset[str] = frozenset()

    def relative_parts(self, location: str | os.PathLike[str]) -> tuple[str, ...]:
        """Split ``location`` into components relative to ``root``; empty when outside it."""
        rel = os.path.relpath(os.fspath(location), self.root)
        if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
            return ()
        return tuple(rel.split(os.sep))

    def is_ignored(self, location: str | os.PathLike[str]) -> bool:
        parts = self.relative_parts(location)
        if not parts:
            return False
        if "/".join(parts) in self.files:
            return True
        return any("/".join(parts[:count]) in self.dirs for count in range(1, len(parts) + 1))


def parse_ignored_listing(root: str, raw: bytes) -> IgnoredPaths:
    """Build ``IgnoredPaths`` from NUL-separated ``ls-files`` output.

    Directory records end in ``/``. Names are decoded the way ``os.scandir``
    decodes them so undecodable bytes still compare equal.
    """
    files: set[str] = set()
    dirs: set[str] = set()
    for record in raw.split(b"\x00"):
        if not record:
            continue
        rel = os.fsdecode(record)
        if rel.endswith("/"):
            dirs.add(rel.rstrip("/"))
        else:
            files.add(rel)
    return IgnoredPaths(root=root, files=frozenset(files), dirs=frozenset(dirs))


def load_ignored_paths(root: str | os.PathLike[str]) -> IgnoredPaths | None:
    """Ask git which paths under ``root`` are ignored.

    ``ls-files`` run from ``root`` reports only that subtree, relative to it.
    Returns ``None`` when git is missing or ``root`` is not in a work tree;
    the listing then proceeds unfiltered.
    """
    root = os.fspath(root)
    if shutil.which("git") is None:
        logger.debug("git not found; --gitignore has no effect")
        return None
    try:
        proc = subprocess.run(
            ["git", "-C", root, *LS_FILES_IGNORED],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        logger.debug("%s is not inside a git work tree; --gitignore has no effect", root)
        return None

    ignored = parse_ignored_listing(root, proc.stdout)
    logger.debug("%s: %d ignored files, %d ignored directories", root, len(ignored.files), len(ignored.dirs))
    return ignored


__all__ = ["IgnoredPaths", "parse_ignored_listing", "load_ignored_paths"]
