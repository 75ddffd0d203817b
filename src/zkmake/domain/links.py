"""Wikilink detection under the cursor and ``title#heading`` parsing.

Pure functions over a single line of text. Offsets handed in by editors
are 1-based (``cursor``); offsets handed back are 0-based slice bounds.
"""

from __future__ import annotations

from dataclasses import dataclass

_OPEN = "[["
_CLOSE = "]]"


@dataclass(frozen=True)
class WikilinkSpan:
    """Inner bounds of a ``[[...]]`` pair: ``line[open_end:close_start]``."""

    open_end: int
    close_start: int

    def text(self, line: str) -> str:
        return line[self.open_end : self.close_start]


@dataclass(frozen=True)
class ParsedWikilink:
    """A wikilink target split into note title and optional heading fragment."""

    title: str
    heading: str | None = None


def find_span(line: str, cursor: int) -> WikilinkSpan | None:
    """Find the innermost ``[[...]]`` span enclosing the 1-based *cursor*.

    The cursor counts as inside while it sits on the second ``[`` or the
    first ``]``; on the second ``]`` the link is already closed. Returns
    None when the cursor is outside every span, when the span is
    unterminated, or when *cursor* is out of ``[1, len+1]``.
    """
    if cursor < 1 or cursor > len(line) + 1:
        return None

    # Nearest "[[" whose second bracket is at or before the cursor.
    opener = line.rfind(_OPEN, 0, cursor)
    if opener == -1:
        return None
    open_end = opener + len(_OPEN)

    # A "]]" between the opener and the cursor closes that link already.
    if _CLOSE in line[open_end:cursor]:
        return None

    close_start = line.find(_CLOSE, cursor - 1)
    if close_start == -1:
        return None

    return WikilinkSpan(open_end=open_end, close_start=close_start)


def span_text(line: str, span: WikilinkSpan) -> str | None:
    """Return the trimmed inner text of *span*, or None if it is blank."""
    text = span.text(line).strip()
    return text or None


def get_wikilink(line: str, cursor: int) -> str | None:
    """Return the trimmed text of the wikilink under *cursor*, if any."""
    span = find_span(line, cursor)
    if span is None:
        return None
    return span_text(line, span)


def parse_wikilink(text: str) -> ParsedWikilink:
    """Split ``title#heading`` on the first ``#``.

    ``"a#b#c"`` gives title ``"a"`` and heading ``"b#c"``. A leading or
    trailing bare ``#`` is not a separator: ``"note#"`` is title ``"note"``
    and ``"#x"`` stays the title ``"#x"``.
    """
    title, sep, heading = text.partition("#")
    if sep and title and heading:
        return ParsedWikilink(title=title, heading=heading)
    if text.endswith("#"):
        text = text[:-1]
    return ParsedWikilink(title=text)
