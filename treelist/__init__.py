"""Public package surface for treelist.

Exports ``main`` for programmatic CLI invocation plus the walker helpers.
Most implementation lives in submodules under ``treelist``.
"""

from __future__ import annotations

from .config import TreeConfig
from .counter import VisitCounter
from .walker import TreeWalker, WalkReport, render_tree, walk_tree


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "main",
    "TreeConfig",
    "VisitCounter",
    "TreeWalker",
    "WalkReport",
    "walk_tree",
    "render_tree",
]
