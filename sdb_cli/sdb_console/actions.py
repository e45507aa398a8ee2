"""Execution of parsed console commands against the remote store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from sdb_cli.shared.client import DatabaseClient
from sdb_cli.shared.exceptions import RemoteOperationError
from sdb_cli.shared.logging import Logger
from sdb_cli.table import compute_columns, render_lines

from .commands import (
    HELP_TEXT,
    Command,
    CreateDomain,
    DeleteItem,
    DomainMeta,
    DropDomain,
    Exit,
    Help,
    ListDomains,
    Select,
    Unrecognized,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %z %Z"


@dataclass(slots=True)
class CommandRunner:
    """Runs one command at a time and writes its outcome to ``stream``."""

    client: DatabaseClient
    stream: IO[str]
    logger: Logger

    def execute(self, command: Command) -> bool:
        """Run ``command``; return False when the session should end.

        Remote failures are reported as a single diagnostic line and never
        propagate.
        """
        if isinstance(command, Exit):
            return False
        try:
            self._dispatch(command)
        except RemoteOperationError as exc:
            self.write(exc.diagnostic())
            if isinstance(command, Select) and exc.response is not None:
                self.logger.debug(f"select request {command.query!r} failed with response: {exc.response}")
        return True

    def write(self, line: str = "") -> None:
        print(line, file=self.stream)

    def _dispatch(self, command: Command) -> None:
        if isinstance(command, ListDomains):
            self.list_domains()
        elif isinstance(command, CreateDomain):
            self.client.create_domain(command.name)
            self.write("domain created")
        elif isinstance(command, DropDomain):
            self.client.drop_domain(command.name)
            self.write("domain deleted")
        elif isinstance(command, DomainMeta):
            self.show_metadata(command.name)
        elif isinstance(command, DeleteItem):
            self.client.delete_item(command.domain, command.item)
            self.write("item deleted")
        elif isinstance(command, Select):
            self.query(command.query)
        elif isinstance(command, Help):
            self.stream.write(HELP_TEXT + "\n")
        elif isinstance(command, Unrecognized):
            self.logger.debug(f"Ignoring unrecognized command: {command.line!r}")

    def list_domains(self) -> None:
        names = self.client.list_domains()
        if not names:
            self.write("no domains found")
            return
        for name in names:
            self.write(name)

    def show_metadata(self, name: str) -> None:
        metadata = self.client.domain_metadata(name)
        recorded_at = metadata.recorded_at().strftime(TIMESTAMP_FORMAT)
        self.write(f"Metadata for domain '{name}' at {recorded_at}")
        for label, value in metadata.fields():
            self.write(f"   {label} = {value}")

    def query(self, query: str) -> None:
        records = self.client.select(query)
        for line in render_lines(records, compute_columns(records)):
            self.write(line)
