from __future__ import annotations

from typing import Any

import pytest

from sdb_cli.shared.exceptions import ErrorDetail, RemoteOperationError
from sdb_cli.shared.models import DomainMetadata, Record


class FakeClient:
    """In-memory DatabaseClient recording every call it receives."""

    def __init__(
        self,
        *,
        domains: list[str] | None = None,
        records: list[Record] | None = None,
        metadata: DomainMetadata | None = None,
        error: RemoteOperationError | None = None,
    ) -> None:
        self.domains = list(domains or [])
        self.records = list(records or [])
        self.metadata = metadata
        self.error = error
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.error is not None:
            raise self.error

    def list_domains(self) -> list[str]:
        self._record("list_domains")
        return list(self.domains)

    def create_domain(self, name: str) -> None:
        self._record("create_domain", name)

    def drop_domain(self, name: str) -> None:
        self._record("drop_domain", name)

    def domain_metadata(self, name: str) -> DomainMetadata:
        self._record("domain_metadata", name)
        assert self.metadata is not None
        return self.metadata

    def delete_item(self, domain: str, item: str) -> None:
        self._record("delete_item", domain, item)

    def select(self, query: str) -> list[Record]:
        self._record("select", query)
        return list(self.records)


class StubLogger:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))


@pytest.fixture
def fake_client_factory():
    return FakeClient


@pytest.fixture
def stub_logger() -> StubLogger:
    return StubLogger()


@pytest.fixture
def not_found_error() -> RemoteOperationError:
    return RemoteOperationError(
        "An error occurred (NoSuchDomain) when calling the DomainMetadata operation",
        errors=[ErrorDetail(code="NoSuchDomain", message="The specified domain does not exist.")],
        response={"Error": {"Code": "NoSuchDomain", "Message": "The specified domain does not exist."}},
    )


@pytest.fixture
def sample_records() -> list[Record]:
    return [
        Record.from_pairs("i1", [("color", "red"), ("size", "M")]),
        Record.from_pairs("i2", [("color", "blue")]),
    ]
