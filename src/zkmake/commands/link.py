"""Command: link — show the [[wikilink]] under the cursor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zkmake.commands._base import ZkCommand

if TYPE_CHECKING:
    from zkmake.commands._context import AppContext


@click.command(
    cls=ZkCommand,
    examples="""\
  zkmake link --line 'see [[Design#Goals]] here' --col 8
  zkmake -q link --line '[[a]] and [[b]]' --col 13""",
)
@click.option("--line", "line", required=True, help="Text of the cursor line.")
@click.option("--col", "cursor", type=int, required=True, help="1-based cursor column.")
@click.pass_obj
def link(app: AppContext, line: str, cursor: int) -> None:
    """Print the title and heading of the wikilink under the cursor."""
    app.emit(app.make_service().locate_link(line, cursor))
