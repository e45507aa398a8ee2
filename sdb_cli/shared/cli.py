"""Shared CLI helpers and decorators."""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import click

from .client import DatabaseClient, create_client
from .config import AppConfig, load_config
from .exceptions import ConfigurationError, SdbCliError
from .logging import Logger, get_logger

F = TypeVar("F", bound=Callable[..., Any])

ACCESS_KEY_MISSING = "accessKey: AWS Access Key ID is not set"
SECRET_KEY_MISSING = "secret: AWS Secret Key ID is not set"


@dataclass(slots=True)
class CLIContext:
    """Runtime context shared across CLI invocations."""

    config: AppConfig
    client: DatabaseClient
    verbose: bool
    logger: Logger


def common_cli_options(func: F) -> F:
    """Decorator injecting credentials, config and the client handle.

    When either credential is missing a diagnostic is printed and the wrapped
    command is not invoked.
    """

    @click.option(
        "--access-key",
        "-a",
        "access_key",
        envvar="AWS_ACCESS_KEY_ID",
        default="",
        help="AWS Access Key ID.",
    )
    @click.option(
        "--secret-key",
        "-s",
        "secret_key",
        envvar="AWS_SECRET_ACCESS_KEY",
        default="",
        help="AWS Secret Access Key.",
    )
    @click.option("--region", type=str, help="Override the SimpleDB region.")
    @click.option("--endpoint-url", "endpoint_url", type=str, help="Override the SimpleDB endpoint URL.")
    @click.option("--config", "config_path", type=click.Path(path_type=str), help="Path to config file.")
    @click.option("--verbose", is_flag=True, help="Enable verbose logging output.")
    @click.pass_context
    @functools.wraps(func)
    def wrapper(
        ctx: click.Context,
        *args: Any,
        access_key: str = "",
        secret_key: str = "",
        region: str | None = None,
        endpoint_url: str | None = None,
        config_path: str | None = None,
        verbose: bool = False,
        **kwargs: Any,
    ) -> Any:
        if not access_key:
            click.echo(ACCESS_KEY_MISSING)
            return None
        if not secret_key:
            click.echo(SECRET_KEY_MISSING)
            return None

        try:
            app_config = load_config(config_path)
        except ConfigurationError as exc:
            raise click.ClickException(str(exc)) from exc
        app_config = app_config.with_simpledb(region=region, endpoint_url=endpoint_url)

        logger = get_logger(verbose=verbose)
        logger.debug(
            f"Using SimpleDB region {app_config.simpledb.region} (config: {app_config.source_path})"
        )

        cli_ctx = CLIContext(
            config=app_config,
            client=create_client(access_key, secret_key, app_config.simpledb),
            verbose=verbose,
            logger=logger,
        )
        ctx.obj = cli_ctx
        kwargs["cli_ctx"] = cli_ctx
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def handle_cli_errors(func: F) -> F:
    """Convert project exceptions into Click-friendly errors."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ConfigurationError as exc:
            raise click.ClickException(f"Configuration error: {exc}") from exc
        except SdbCliError as exc:
            raise click.ClickException(str(exc)) from exc
        except click.ClickException:
            raise
        except Exception as exc:  # pragma: no cover
            raise click.ClickException(f"Unexpected error: {exc}") from exc

    return wrapper  # type: ignore[return-value]
