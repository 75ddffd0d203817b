"""Buffer name → filesystem path normalization.

Editors name buffers by path, but overlay plugins (file browsers, git
viewers, archive readers) rename them with a ``scheme://`` prefix. Any
scheme is accepted; only the remainder decides whether the name still
points at a local file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

# RFC 3986 scheme: a letter, then letters, digits, "+", "." or "-".
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://(.*)$", re.DOTALL)


def strip_scheme(name: str) -> str | None:
    """Return the remainder after ``scheme://``, or None if *name* has no scheme."""
    match = _SCHEME_PATTERN.match(name)
    if match is None:
        return None
    return match.group(1)


def absolute_path(name: str, *, cwd: Path | None = None) -> str:
    """Expand ``~`` and anchor a relative *name* at *cwd*.

    Purely lexical: symlinks are not followed and the path need not exist.
    A trailing separator is preserved, as editors do for directory buffers.
    """
    expanded = os.path.expanduser(name)
    if os.path.isabs(expanded):
        return expanded
    return os.path.join(str(cwd or Path.cwd()), expanded)


def resolve_buffer_path(name: str, *, cwd: Path | None = None) -> str | None:
    """Resolve a buffer name to a local absolute path.

    Returns None when the buffer has no name, or when the scheme remainder
    is not an absolute path (``scp://host/...``, ``oil-ssh://host/...``).
    """
    if not name:
        return None
    remainder = strip_scheme(name)
    if remainder is not None:
        return remainder if remainder.startswith("/") else None
    return absolute_path(name, cwd=cwd)
