"""Read-eval-print loop for the interactive console."""

from __future__ import annotations

from collections.abc import Iterable

from sdb_cli.shared.exceptions import CommandSyntaxError

from .actions import CommandRunner
from .commands import parse_command

PROMPT = "> "


def run_loop(runner: CommandRunner, lines: Iterable[str]) -> None:
    """Process ``lines`` one command at a time until exit or end of input."""
    _prompt(runner)
    try:
        for line in lines:
            try:
                command = parse_command(line)
            except CommandSyntaxError as exc:
                runner.write(str(exc))
            else:
                if not runner.execute(command):
                    return
            _prompt(runner)
    except (OSError, UnicodeDecodeError) as exc:
        runner.logger.error(f"reading standard input: {exc}")


def _prompt(runner: CommandRunner) -> None:
    runner.stream.write(PROMPT)
    runner.stream.flush()
