"""Subcommand modules for zkmake.

Provides register_commands() which uses deferred imports to keep
``zkmake --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from zkmake.commands.link import link
    from zkmake.commands.make import make
    from zkmake.commands.resolve import resolve

    cli.add_command(make)
    cli.add_command(link)
    cli.add_command(resolve)
