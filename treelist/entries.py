"""Classify filesystem entries and resolve the names printed for them."""

from __future__ import annotations

import os
import stat

from .errors import EntryNameError


def is_directory(path: str | os.PathLike[str]) -> bool:
    """Return whether ``path`` resolves to a directory, following symlinks.

    Dangling or looping symlinks and entries that cannot be stat'ed (for
    example inside a readable but unsearchable directory) are not
    directories. Only an entry that vanished raises ``FileNotFoundError``.
    """
    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        # Raises when the entry itself vanished; a link that survives lstat is broken.
        os.lstat(path)
        return False
    except OSError:
        return False
    return stat.S_ISDIR(mode)


def is_symlink(path: str | os.PathLike[str]) -> bool:
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except OSError:
        return False


def entry_name(path: str | os.PathLike[str]) -> str:
    """Return the final path component of ``path``."""
    return os.path.basename(os.path.normpath(os.fspath(path)))


def is_hidden(path: str | os.PathLike[str]) -> bool:
    """Return whether the final component of ``path`` starts with a dot."""
    return entry_name(path).startswith(".")


def ensure_displayable(path: str | os.PathLike[str], text: str) -> str:
    """Return ``text`` unchanged or raise ``EntryNameError`` for undecodable bytes.

    ``os.scandir`` hands back undecodable name bytes as lone surrogates.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EntryNameError(path) from exc
    return text


def display_name(location: str, full_path: bool) -> str:
    """Return the text printed for one entry.

    ``location`` is the joined path string as produced while walking, so a
    root given as ``.`` yields ``./child`` in full-path mode.
    """
    text = location if full_path else entry_name(location)
    return ensure_displayable(location, text)


__all__ = [
    "is_directory",
    "is_symlink",
    "is_hidden",
    "entry_name",
    "ensure_displayable",
    "display_name",
]
