"""Adapter between the console/viewer and the SimpleDB service.

The rest of the package only depends on :class:`DatabaseClient`; the boto3
backed :class:`SimpleDBClient` is constructed once per process by the CLI glue
and passed down explicitly. boto3 clients are thread-safe, so a single handle
is shared by concurrent web requests.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol, TypeVar

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .config import SimpleDBSettings
from .exceptions import ErrorDetail, RemoteOperationError
from .models import DomainMetadata, Record, metadata_from_response, record_from_item

T = TypeVar("T")


class DatabaseClient(Protocol):
    """Operations the console and the viewer need from the remote store."""

    def list_domains(self) -> list[str]: ...

    def create_domain(self, name: str) -> None: ...

    def drop_domain(self, name: str) -> None: ...

    def domain_metadata(self, name: str) -> DomainMetadata: ...

    def delete_item(self, domain: str, item: str) -> None: ...

    def select(self, query: str) -> list[Record]: ...


class SimpleDBClient:
    """DatabaseClient implementation backed by a boto3 ``sdb`` client."""

    def __init__(self, sdb: Any) -> None:
        self._sdb = sdb

    def list_domains(self) -> list[str]:
        def _collect() -> list[str]:
            names: list[str] = []
            for page in self._sdb.get_paginator("list_domains").paginate():
                names.extend(page.get("DomainNames", []))
            return names

        return _call(_collect)

    def create_domain(self, name: str) -> None:
        _call(lambda: self._sdb.create_domain(DomainName=name))

    def drop_domain(self, name: str) -> None:
        _call(lambda: self._sdb.delete_domain(DomainName=name))

    def domain_metadata(self, name: str) -> DomainMetadata:
        response = _call(lambda: self._sdb.domain_metadata(DomainName=name))
        return metadata_from_response(response)

    def delete_item(self, domain: str, item: str) -> None:
        _call(lambda: self._sdb.delete_attributes(DomainName=domain, ItemName=item))

    def select(self, query: str) -> list[Record]:
        # Only the first page is fetched; results are never paged.
        response = _call(lambda: self._sdb.select(SelectExpression=query))
        return [record_from_item(item) for item in response.get("Items", [])]


def create_client(access_key: str, secret_key: str, settings: SimpleDBSettings) -> SimpleDBClient:
    """Construct the process-wide client handle from credentials and settings."""
    kwargs: dict[str, Any] = {
        "region_name": settings.region,
        "aws_access_key_id": access_key,
        "aws_secret_access_key": secret_key,
    }
    if settings.endpoint_url:
        kwargs["endpoint_url"] = settings.endpoint_url
    return SimpleDBClient(boto3.client("sdb", **kwargs))


def _call(operation: Callable[[], T]) -> T:
    try:
        return operation()
    except ClientError as exc:
        raise RemoteOperationError(
            str(exc),
            errors=_error_details(exc.response),
            response=exc.response,
        ) from exc
    except BotoCoreError as exc:
        raise RemoteOperationError(str(exc)) from exc


def _error_details(response: Mapping[str, Any]) -> Sequence[ErrorDetail]:
    details: list[ErrorDetail] = []
    entries = response.get("Errors")
    if not entries:
        single = response.get("Error")
        entries = [single] if single else []
    for entry in entries:
        code = str(entry.get("Code") or "")
        message = str(entry.get("Message") or "")
        if code or message:
            details.append(ErrorDetail(code=code, message=message))
    return details
