from __future__ import annotations

import boto3
import pytest
from botocore.exceptions import EndpointConnectionError
from botocore.stub import Stubber

from sdb_cli.shared.client import SimpleDBClient, create_client
from sdb_cli.shared.config import SimpleDBSettings
from sdb_cli.shared.exceptions import ErrorDetail, RemoteOperationError
from sdb_cli.shared.models import Attribute, Record


@pytest.fixture
def sdb():
    return boto3.client(
        "sdb",
        region_name="eu-west-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def test_list_domains_follows_pagination(sdb) -> None:
    with Stubber(sdb) as stubber:
        stubber.add_response("list_domains", {"DomainNames": ["a", "b"], "NextToken": "t1"}, {})
        stubber.add_response("list_domains", {"DomainNames": ["c"]}, {"NextToken": "t1"})

        assert SimpleDBClient(sdb).list_domains() == ["a", "b", "c"]


def test_list_domains_handles_missing_names(sdb) -> None:
    with Stubber(sdb) as stubber:
        stubber.add_response("list_domains", {}, {})

        assert SimpleDBClient(sdb).list_domains() == []


def test_select_passes_query_verbatim_and_keeps_attribute_order(sdb) -> None:
    query = "select * from users where ItemName() > '0'"
    with Stubber(sdb) as stubber:
        stubber.add_response(
            "select",
            {
                "Items": [
                    {
                        "Name": "i1",
                        "Attributes": [
                            {"Name": "size", "Value": "M"},
                            {"Name": "color", "Value": "red"},
                        ],
                    },
                    {"Name": "i2", "Attributes": []},
                ]
            },
            {"SelectExpression": query},
        )

        records = SimpleDBClient(sdb).select(query)

    assert records == [
        Record(name="i1", attributes=(Attribute("size", "M"), Attribute("color", "red"))),
        Record(name="i2"),
    ]


def test_domain_metadata_maps_fields(sdb) -> None:
    with Stubber(sdb) as stubber:
        stubber.add_response(
            "domain_metadata",
            {
                "ItemCount": 3,
                "ItemNamesSizeBytes": 24,
                "AttributeNameCount": 2,
                "AttributeValueCount": 5,
                "AttributeNamesSizeBytes": 9,
                "AttributeValuesSizeBytes": 17,
                "Timestamp": 1700000000,
            },
            {"DomainName": "users"},
        )

        metadata = SimpleDBClient(sdb).domain_metadata("users")

    assert metadata.item_count == 3
    assert metadata.attribute_values_size_bytes == 17
    assert metadata.timestamp == 1700000000


def test_simple_operations_send_expected_parameters(sdb) -> None:
    with Stubber(sdb) as stubber:
        stubber.add_response("create_domain", {}, {"DomainName": "users"})
        stubber.add_response("delete_domain", {}, {"DomainName": "users"})
        stubber.add_response("delete_attributes", {}, {"DomainName": "users", "ItemName": "i1"})

        client = SimpleDBClient(sdb)
        client.create_domain("users")
        client.drop_domain("users")
        client.delete_item("users", "i1")

        stubber.assert_no_pending_responses()


def test_service_errors_carry_structured_details(sdb) -> None:
    with Stubber(sdb) as stubber:
        stubber.add_client_error(
            "domain_metadata",
            service_error_code="NoSuchDomain",
            service_message="The specified domain does not exist.",
            expected_params={"DomainName": "missing"},
        )

        with pytest.raises(RemoteOperationError) as excinfo:
            SimpleDBClient(sdb).domain_metadata("missing")

    error = excinfo.value
    assert error.errors == (ErrorDetail("NoSuchDomain", "The specified domain does not exist."),)
    assert error.diagnostic() == "NoSuchDomain: The specified domain does not exist."
    assert error.response is not None


def test_transport_errors_fall_back_to_message() -> None:
    class Unreachable:
        def create_domain(self, **_kwargs):
            raise EndpointConnectionError(endpoint_url="https://sdb.invalid")

    with pytest.raises(RemoteOperationError) as excinfo:
        SimpleDBClient(Unreachable()).create_domain("users")

    assert excinfo.value.errors == ()
    assert "sdb.invalid" in excinfo.value.diagnostic()


def test_create_client_applies_settings() -> None:
    client = create_client(
        "AKID",
        "SECRET",
        SimpleDBSettings(region="us-west-2", endpoint_url="http://localhost:8000"),
    )

    meta = client._sdb.meta
    assert meta.region_name == "us-west-2"
    assert meta.endpoint_url == "http://localhost:8000"
