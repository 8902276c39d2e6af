"""Directory/file tallies accumulated over one traversal."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class VisitCounter:
    """Counts of directories and files visited so far.

    One instance is shared by every recursive call of a single walk. The
    summary is deliberately not pluralised: one file renders as ``1 files``.
    """

    dirs: int = 0
    files: int = 0

    def record_directory(self) -> None:
        self.dirs += 1

    def record_file(self) -> None:
        self.files += 1

    def record(self, is_dir: bool) -> None:
        """Count one entry; anything that is not a directory is a file."""
        if is_dir:
            self.record_directory()
        else:
            self.record_file()

    def render(self) -> str:
        return f"{self.dirs} directories, {self.files} files"

    def __str__(self) -> str:
        return self.render()


__all__ = ["VisitCounter"]
