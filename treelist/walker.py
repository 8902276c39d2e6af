"""Depth-first directory walk that prints the tree and tallies entries.

Each directory is listed, filtered and classified in full before any of its
rows are printed, so the last surviving child always gets the elbow glyph.
Unreadable directories and vanished entries are recorded on the returned
``WalkReport`` and the walk continues with the next sibling.
"""

from __future__ import annotations

import io
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

from .config import TreeConfig
from .counter import VisitCounter
from .entries import display_name, ensure_displayable, entry_name, is_directory, is_symlink
from .errors import (
    DirectoryReadError,
    EntryAccessError,
    EntryNameError,
    RootNotFoundError,
    TreeListError,
)
from .filtering import FilterPolicy
from .rendering import child_prefix, render_line, sanitize_terminal_text, theme_for

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeChild:
    """One accepted directory child, classified before its row is rendered."""

    location: str
    name: str
    is_dir: bool
    is_link: bool = False


@dataclass
class WalkReport:
    """Counts and recoverable errors collected by one walk."""

    counter: VisitCounter = field(default_factory=VisitCounter)
    errors: list[TreeListError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class TreeWalker:
    """Print the tree rooted at a path to ``out`` using one ``TreeConfig``."""

    def __init__(
        self,
        config: TreeConfig | None = None,
        out: TextIO | None = None,
        policy: FilterPolicy | None = None,
    ) -> None:
        self.config = config if config is not None else TreeConfig()
        self.out = out if out is not None else sys.stdout
        self.policy = policy
        self.theme = theme_for(self.config.color)

    def _emit(self, line: str) -> None:
        self.out.write(line + "\n")

    def _record(self, report: WalkReport, error: TreeListError) -> None:
        logger.warning("%s", error)
        report.errors.append(error)

    def walk(self, root: str | os.PathLike[str]) -> WalkReport:
        """Print the root line, every accepted descendant, then the summary.

        Raises ``RootNotFoundError`` before printing anything when ``root``
        does not exist. The root itself is never counted.
        """
        location = os.fspath(root)
        if not os.path.lexists(location):
            raise RootNotFoundError(location)
        try:
            root_is_dir = is_directory(location)
        except OSError as exc:
            raise RootNotFoundError(location) from exc
        label = sanitize_terminal_text(ensure_displayable(location, location))

        policy = self.policy if self.policy is not None else FilterPolicy.from_config(self.config, location)
        report = WalkReport()
        self._emit(self.theme.paint(label, root_is_dir, is_symlink(location)))
        if root_is_dir:
            try:
                self._walk_directory(location, "", 0, policy, report)
            except DirectoryReadError as exc:
                self._record(report, exc)
        self._emit(report.counter.render())
        return report

    def _classify(self, location: str, depth: int, policy: FilterPolicy) -> TreeChild | None:
        """Return the child for ``location`` or ``None`` when the policy rejects it."""
        try:
            if not policy.accepts(location, depth):
                return None
            is_dir = is_directory(location)
        except OSError as exc:
            raise EntryAccessError(location, exc) from exc
        return TreeChild(
            location=location,
            name=display_name(location, self.config.full_path),
            is_dir=is_dir,
            is_link=is_symlink(location),
        )

    def list_children(self, directory: str, depth: int, policy: FilterPolicy, report: WalkReport) -> list[TreeChild]:
        """Read, order, filter and classify the children of ``directory``.

        ``depth`` is the depth of ``directory`` itself. The scandir handle is
        drained and closed before anything is classified.
        """
        try:
            with os.scandir(directory) as entries:
                locations = [entry.path for entry in entries]
        except OSError as exc:
            raise DirectoryReadError(directory, exc) from exc

        if self.config.sort == "name":
            locations.sort(key=entry_name)

        children: list[TreeChild] = []
        for location in locations:
            try:
                child = self._classify(location, depth + 1, policy)
            except (EntryAccessError, EntryNameError) as exc:
                self._record(report, exc)
                continue
            if child is not None:
                children.append(child)
        return children

    def _walk_directory(
        self,
        directory: str,
        prefix: str,
        depth: int,
        policy: FilterPolicy,
        report: WalkReport,
    ) -> None:
        children = self.list_children(directory, depth, policy, report)
        last_index = len(children) - 1
        for index, child in enumerate(children):
            is_last = index == last_index
            name = self.theme.paint(sanitize_terminal_text(child.name), child.is_dir, child.is_link)
            self._emit(render_line(prefix, is_last, name))
            report.counter.record(child.is_dir)

            if not child.is_dir or not policy.permits_descent(depth + 1):
                continue
            if child.is_link and not self.config.follow_links:
                continue
            logger.debug("descending into %s", child.location)
            try:
                self._walk_directory(child.location, child_prefix(prefix, is_last), depth + 1, policy, report)
            except DirectoryReadError as exc:
                self._record(report, exc)


def walk_tree(
    root: str | os.PathLike[str],
    config: TreeConfig | None = None,
    out: TextIO | None = None,
) -> WalkReport:
    """Print the tree for ``root`` to ``out`` (stdout by default)."""
    return TreeWalker(config, out).walk(root)


def render_tree(root: str | os.PathLike[str], config: TreeConfig | None = None) -> tuple[str, WalkReport]:
    """Return the full listing for ``root`` as text plus its ``WalkReport``."""
    buffer = io.StringIO()
    report = TreeWalker(config, buffer).walk(root)
    return buffer.getvalue(), report


__all__ = [
    "TreeChild",
    "WalkReport",
    "TreeWalker",
    "walk_tree",
    "render_tree",
]
