"""Tree glyph tokens and the pure line/prefix builders.

``render_line`` and ``child_prefix`` fully define the shape of the tree.
``TreeTheme`` optionally colours entry names without touching the glyphs.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pygments.console import ansiformat

BLANK = "    "
BAR = "│   "
TEE = "├── "
ELBOW = "└── "

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def render_line(prefix: str, is_last_sibling: bool, name: str) -> str:
    """Return ``prefix`` plus the tee or elbow separator plus ``name``."""
    separator = ELBOW if is_last_sibling else TEE
    return f"{prefix}{separator}{name}"


def child_prefix(prefix: str, is_last_sibling: bool) -> str:
    """Return the prefix inherited by the children of one entry."""
    return prefix + (BLANK if is_last_sibling else BAR)


def sanitize_terminal_text(text: str) -> str:
    """Escape control bytes so a filename cannot move the cursor or ring the bell."""
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", text)


@dataclass(frozen=True)
class TreeTheme:
    """Pygments ``ansiformat`` attribute strings per entry kind.

    Empty strings leave the name uncoloured.
    """

    name: str
    directory: str
    symlink: str
    file: str

    def paint(self, text: str, is_dir: bool, is_link: bool) -> str:
        if is_link:
            attr = self.symlink
        elif is_dir:
            attr = self.directory
        else:
            attr = self.file
        if not attr:
            return text
        return ansiformat(attr, text)


PLAIN_THEME = TreeTheme(name="plain", directory="", symlink="", file="")
COLOR_THEME = TreeTheme(name="color", directory="*brightblue*", symlink="brightcyan", file="")


def theme_for(color: bool) -> TreeTheme:
    return COLOR_THEME if color else PLAIN_THEME


__all__ = [
    "BLANK",
    "BAR",
    "TEE",
    "ELBOW",
    "render_line",
    "child_prefix",
    "sanitize_terminal_text",
    "TreeTheme",
    "PLAIN_THEME",
    "COLOR_THEME",
    "theme_for",
]
