"""sdb-web viewer entrypoint."""

from __future__ import annotations

import click

from sdb_cli.shared.cli import CLIContext, common_cli_options, handle_cli_errors

from .app import create_app


@click.command(help="Serve a read-only HTML view of SimpleDB domains.")
@click.option("--host", type=str, help="Interface to bind (defaults to config web.host).")
@click.option("--port", type=int, help="Port to listen on (defaults to config web.port).")
@common_cli_options
@handle_cli_errors
def cli(host: str | None, port: int | None, cli_ctx: CLIContext) -> None:
    """Start the viewer and serve requests until interrupted."""
    bind_host = host or cli_ctx.config.web.host
    bind_port = port or cli_ctx.config.web.port
    app = create_app(cli_ctx.client, cli_ctx.logger)
    cli_ctx.logger.info(f"Listening on port {bind_port}...")
    app.run(host=bind_host, port=bind_port, threaded=True, debug=False)


def main() -> None:
    """Entry point for console_scripts."""
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
