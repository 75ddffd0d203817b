"""Command: make — create or open the note under a [[wikilink]]."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zkmake.commands._base import ZkCommand

if TYPE_CHECKING:
    from zkmake.commands._context import AppContext

_MAKE_EXAMPLES = """\
  zkmake make --buffer notes/index.md --line 'see [[New Idea]]' --col 10
  zkmake --json make --buffer "$PWD/index.md" --row 12 --col 7
  zkmake -q make --buffer 'oil:///home/me/notes/' --line '[[Todo#Today]]' --col 4

  Neovim:
    :execute '!zkmake -q make --buffer ' . shellescape(expand('%:p'))
        \\ . ' --row ' . line('.') . ' --col ' . charcol('.')"""


@click.command(cls=ZkCommand, examples=_MAKE_EXAMPLES)
@click.option(
    "--buffer", "buffer", required=True, help="Editor buffer name (path or scheme://path)."
)
@click.option("--col", "cursor", type=int, required=True, help="1-based cursor column.")
@click.option("--line", "line", default=None, help="Text of the cursor line.")
@click.option(
    "--row",
    type=click.IntRange(min=1),
    default=None,
    help="1-based cursor row; the line is read from the buffer's file.",
)
@click.pass_obj
def make(
    app: AppContext,
    buffer: str,
    cursor: int,
    line: str | None,
    row: int | None,
) -> None:
    """Create the note for the [[wikilink]] under the cursor, or open it."""
    if line is None and row is None:
        raise click.UsageError("Pass the cursor line with --line, or --row to read it from disk.")
    result = app.make_service().make(buffer, cursor, line=line, row=row)
    app.emit(result)
