"""Rich Console factory and theme for zkmake output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(editors, tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

ZKMAKE_THEME = Theme(
    {
        "zk.ok": "bold green",
        "zk.warning": "bold yellow",
        "zk.error": "bold red",
        "zk.op": "bold cyan",
        "zk.key": "dim",
        "zk.path": "dim",
        "zk.title": "bold",
        "zk.action.edit": "green",
        "zk.action.create": "bold green",
        "zk.action.exists": "yellow",
        "zk.action.none": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=ZKMAKE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_action(action: str) -> str:
    """Return the Rich style name for a make action."""
    return f"zk.action.{action}" if action in {"edit", "create", "exists", "none"} else ""
