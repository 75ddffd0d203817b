"""Notebook root discovery.

A zk notebook is any directory holding a ``.zk/`` marker directory.
Discovery walks up from the buffer's path, like git finding ``.git/``.
"""

from __future__ import annotations

from pathlib import Path

NOTEBOOK_MARKER = ".zk"


def notebook_root(path: str | Path, marker: str = NOTEBOOK_MARKER) -> Path | None:
    """Return the nearest ancestor of *path* containing *marker*, or None.

    *path* itself is checked first when it is a directory; otherwise the
    walk starts at its parent. The path does not need to exist yet (a new,
    unsaved buffer still belongs to the notebook it will be written to).
    """
    current = Path(path)
    if not current.is_dir():
        current = current.parent
    while True:
        if (current / marker).is_dir():
            return current
        parent = current.parent
        if parent == current:
            return None
        current = parent
