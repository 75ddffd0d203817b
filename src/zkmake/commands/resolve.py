"""Command: resolve — map a buffer name to a local path and notebook."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zkmake.commands._base import ZkCommand

if TYPE_CHECKING:
    from zkmake.commands._context import AppContext


@click.command(
    cls=ZkCommand,
    examples="""\
  zkmake resolve notes/today.md
  zkmake resolve 'fugitive:///home/me/notes/.git//0/index.md'
  zkmake --json resolve 'scp://host/notes/index.md'""",
)
@click.argument("buffer")
@click.pass_obj
def resolve(app: AppContext, buffer: str) -> None:
    """Resolve an editor buffer name to a local path and its zk notebook."""
    app.emit(app.make_service().resolve_buffer(buffer))
