"""Command grammar for the interactive console.

A line is classified by a single ordered match, so exactly one command
variant results from any input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from sdb_cli.shared.exceptions import CommandSyntaxError

NO_NAME_FOUND = "syntax error, no name found"
INVALID_EXPRESSION = "syntax error, invalid expression"

EXIT_WORDS = frozenset({"q", "exit"})

HELP_TEXT = """
COMMANDS
  ls                      List all domains
  create <domain>         Create domain with name <domain>
  drop <domain>           Drop domain with name <domain>
  meta <domain>           Get metadata for domain with name <domain>
  delete <domain> <item>  Delete item with name <item> from domain named <domain>
  select...               Command starting with "select" will be sent as a select query to SimpleDB
  q                       Exits SimpleDB CLI
"""


@dataclass(frozen=True, slots=True)
class ListDomains:
    pass


@dataclass(frozen=True, slots=True)
class CreateDomain:
    name: str


@dataclass(frozen=True, slots=True)
class DropDomain:
    name: str


@dataclass(frozen=True, slots=True)
class DomainMeta:
    name: str


@dataclass(frozen=True, slots=True)
class DeleteItem:
    domain: str
    item: str


@dataclass(frozen=True, slots=True)
class Select:
    query: str


@dataclass(frozen=True, slots=True)
class Help:
    pass


@dataclass(frozen=True, slots=True)
class Exit:
    pass


@dataclass(frozen=True, slots=True)
class Unrecognized:
    line: str


Command = Union[
    ListDomains,
    CreateDomain,
    DropDomain,
    DomainMeta,
    DeleteItem,
    Select,
    Help,
    Exit,
    Unrecognized,
]

_SINGLE_NAME_COMMANDS = {
    "create": CreateDomain,
    "drop": DropDomain,
    "meta": DomainMeta,
}


def parse_command(line: str) -> Command:
    """Classify one line of console input.

    Tokens are split on single spaces, so doubled spaces yield empty tokens and
    count towards the argument total. Raises :class:`CommandSyntaxError` when a
    known verb has the wrong number of arguments.
    """
    text = line.strip()
    if text in EXIT_WORDS:
        return Exit()
    if not text:
        return Help()
    if text == "ls":
        return ListDomains()

    verb, *args = text.split(" ")
    if verb in _SINGLE_NAME_COMMANDS:
        if len(args) != 1:
            raise CommandSyntaxError(NO_NAME_FOUND)
        return _SINGLE_NAME_COMMANDS[verb](args[0])
    if verb == "delete":
        if len(args) != 2:
            raise CommandSyntaxError(NO_NAME_FOUND)
        return DeleteItem(domain=args[0], item=args[1])
    if verb == "select":
        if not any(args):
            raise CommandSyntaxError(INVALID_EXPRESSION)
        return Select(query=text)
    return Unrecognized(line=text)
