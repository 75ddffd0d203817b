"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from zkmake.output.console import create_console, get_output, style_for_action

if TYPE_CHECKING:
    from rich.console import Console

    from zkmake.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    Prints only what a shell pipeline or editor mapping needs: the target
    path for ``make`` and ``resolve``, the link text for ``link``.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "link":
        return str(result.data.get("text", ""))
    if result.op == "make" and result.data.get("action") in ("exists", "none"):
        return ""
    path = result.data.get("path")
    return str(path) if path else ""


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="zk.ok")
    op = Text(f"  {result.op}", style="zk.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="zk.key")
    if key in ("path", "notebook"):
        v = Text(str(value), style="zk.path")
    elif key == "title":
        v = Text(str(value), style="zk.title")
    elif key == "action":
        v = Text(str(value), style=style_for_action(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    if err is not None and err.severity == "warning":
        label = Text("WARNING", style="zk.warning")
    else:
        label = Text("ERROR", style="zk.error")
    op = Text(f"  {result.op}", style="zk.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_make(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("action", "title", "heading", "path", "line"):
        value = result.data.get(key)
        if value is not None:
            _field(console, key, value)
    if verbose:
        _field(console, "notebook", result.data.get("notebook"))


def _render_link(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "title", result.data["title"])
    if result.data.get("heading") is not None:
        _field(console, "heading", result.data["heading"])
    if verbose:
        _field(console, "span", f"{result.data['start']}:{result.data['end']}")


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "path", result.data["path"])
    _field(console, "notebook", result.data.get("notebook") or "(none)")
    if verbose:
        _field(console, "buffer", result.data["buffer"])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: indented key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "make": _render_make,
    "link": _render_link,
    "resolve": _render_resolve,
}
