"""Project-wide custom exceptions."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


class SdbCliError(Exception):
    """Base exception for the SimpleDB console and viewer."""


class ConfigurationError(SdbCliError):
    """Raised when configuration loading or validation fails."""


class CommandSyntaxError(SdbCliError):
    """Raised when a console command has the wrong shape or argument count."""


@dataclass(frozen=True, slots=True)
class ErrorDetail:
    """One structured error entry reported by the remote store."""

    code: str
    message: str

    def __str__(self) -> str:
        if self.code and self.message:
            return f"{self.code}: {self.message}"
        return self.code or self.message


class RemoteOperationError(SdbCliError):
    """Raised when the remote store rejects or fails an operation."""

    def __init__(
        self,
        message: str,
        *,
        errors: Sequence[ErrorDetail] = (),
        response: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.errors = tuple(errors)
        self.response = response

    def diagnostic(self) -> str:
        """Return a one-line description, preferring the structured error entries."""
        if self.errors:
            return "; ".join(str(error) for error in self.errors)
        return str(self)
