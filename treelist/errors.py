"""Error types raised while configuring or walking a directory tree.

Every error carries the path it is about so callers can report it verbatim.
"""

from __future__ import annotations

import os


class TreeListError(Exception):
    """Base error for treelist failures attributable to one path."""

    def __init__(self, path: str | os.PathLike[str] | None, message: str):
        self.path = None if path is None else os.fspath(path)
        self.message = message
        super().__init__(self.message if self.path is None else f"{self.path}: {self.message}")


class ConfigurationError(TreeListError):
    """Invalid option value detected before traversal starts."""

    def __init__(self, message: str):
        super().__init__(None, message)


class RootNotFoundError(TreeListError):
    """The requested root path does not exist."""

    def __init__(self, path: str | os.PathLike[str]):
        super().__init__(path, "No such file or directory")


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


class DirectoryReadError(TreeListError):
    """A directory listing could not be opened or drained."""

    def __init__(self, path: str | os.PathLike[str], exc: OSError):
        self.errno = exc.errno
        super().__init__(path, f"error opening dir ({_reason(exc)})")


class EntryAccessError(TreeListError):
    """An entry vanished or became unreadable between listing and classification."""

    def __init__(self, path: str | os.PathLike[str], exc: OSError):
        self.errno = exc.errno
        super().__init__(path, f"error reading entry ({_reason(exc)})")


class EntryNameError(TreeListError):
    """An entry name cannot be represented as displayable text."""

    def __init__(self, path: str | os.PathLike[str]):
        super().__init__(path, "name is not valid UTF-8")


__all__ = [
    "TreeListError",
    "ConfigurationError",
    "RootNotFoundError",
    "DirectoryReadError",
    "EntryAccessError",
    "EntryNameError",
]
