"""Public exports for the interactive console."""

from .actions import CommandRunner
from .commands import Command, parse_command
from .repl import run_loop

__all__ = ["Command", "CommandRunner", "parse_command", "run_loop"]
