"""Heading lookup inside a note body."""

from __future__ import annotations

import re


def find_heading_line(text: str, heading: str) -> int | None:
    """Return the 1-based line number of the first ATX heading starting with *heading*.

    Matches ``#``-prefixed heading lines of any level; *heading* is taken
    literally and matched as a prefix of the heading text.
    Only newlines end a line, matching how editors number rows.
    """
    if not heading:
        return None
    pattern = re.compile(r"^#+\s+" + re.escape(heading))
    for lineno, line in enumerate(text.split("\n"), start=1):
        if pattern.match(line):
            return lineno
    return None
