"""sdb-cli interactive console entrypoint."""

from __future__ import annotations

import sys

import click

from sdb_cli.shared.cli import CLIContext, common_cli_options, handle_cli_errors

from .actions import CommandRunner
from .repl import run_loop


@click.command(help="Command line interface for Amazon Web Service SimpleDB service.")
@common_cli_options
@handle_cli_errors
def cli(cli_ctx: CLIContext) -> None:
    """Read commands from standard input until `q` or end of input."""
    cli_ctx.logger.debug("sdb-cli session started; enter an empty line for help.")
    runner = CommandRunner(client=cli_ctx.client, stream=sys.stdout, logger=cli_ctx.logger)
    # Undecodable bytes are read as U+FFFD.
    run_loop(runner, click.get_text_stream("stdin", errors="replace"))


def main() -> None:
    """Entry point for console_scripts."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
