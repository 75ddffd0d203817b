"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zkmake.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from zkmake.config.settings import ZkmakeSettings
    from zkmake.infrastructure.zk import NotebookClient
    from zkmake.services.make import MakeService
    from zkmake.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The zk client is created lazily so ``--help`` and ``--version``
    never look for the zk binary.
    """

    def __init__(self, settings: ZkmakeSettings) -> None:
        self.settings = settings
        self._client: NotebookClient | None = None

        from zkmake.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def client(self) -> NotebookClient:
        """The notebook client (created lazily on first access)."""
        if self._client is None:
            from zkmake.infrastructure.zk import ZkClient

            self._client = ZkClient(command=self.settings.zk.command)
        return self._client

    def make_service(self) -> MakeService:
        from zkmake.services.make import MakeService

        return MakeService(self.client, self.settings)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
