from zkmake.cli import cli

cli()
