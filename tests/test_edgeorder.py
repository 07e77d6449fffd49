from __future__ import annotations

from typing import Any, Callable

import pytest

from azmgmt.core import Accepted202, NoContent204, Ok200, ResponseDecodeError
from azmgmt.core.models import TrackedResource
from azmgmt.edgeorder import EdgeOrderClient
from azmgmt.edgeorder.models import (
    AddressProperties,
    AddressResource,
    AddressUpdateParameter,
    CancellationReason,
    ContactDetails,
    Pav2MeterDetails,
    ProductFamiliesRequest,
    PurchaseMeterDetails,
)
from fakes import ENDPOINT, RecordingTransport, json_response

_RG_PATH = (
    f"{ENDPOINT}/subscriptions/sub/resourceGroups/rg/providers/Microsoft.EdgeOrder"
)

_ADDRESS_JSON = {
    "id": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.EdgeOrder/"
    "addresses/foo",
    "name": "foo",
    "type": "Microsoft.EdgeOrder/addresses",
    "location": "eastus",
    "properties": {
        "contactDetails": {
            "contactName": "Jane",
            "phone": "555-0100",
            "emailList": ["jane@contoso.com"],
        },
        "addressValidationStatus": "Valid",
    },
}


@pytest.fixture
def client(make_client: Callable[..., Any]) -> EdgeOrderClient:
    return make_client(EdgeOrderClient)


@pytest.mark.asyncio
async def test_get_address(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(200, _ADDRESS_JSON))

    address = await client.get_address_by_name("foo", "sub", "rg")

    assert isinstance(address, AddressResource)
    assert address.tracked_resource.resource.name == "foo"
    assert address.properties.contact_details.email_list == ["jane@contoso.com"]
    assert transport.last_request.method == "GET"
    assert transport.last_request.url == (
        f"{_RG_PATH}/addresses/foo?api-version=2021-12-01"
    )


@pytest.mark.asyncio
async def test_create_address(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(200, _ADDRESS_JSON)).add(json_response(202))
    body = AddressResource(
        tracked_resource=TrackedResource(location="eastus"),
        properties=AddressProperties(
            contact_details=ContactDetails(
                contact_name="Jane", phone="555-0100", email_list=["jane@contoso.com"]
            )
        ),
    )

    actual = await client.create_address("foo", "sub", "rg", body)
    assert isinstance(actual, Ok200)
    assert actual.value.tracked_resource.location == "eastus"
    assert transport.last_request.method == "PUT"
    assert transport.last_request.json_content == {
        "location": "eastus",
        "properties": {
            "contactDetails": {
                "contactName": "Jane",
                "phone": "555-0100",
                "emailList": ["jane@contoso.com"],
            }
        },
    }, transport.last_request.json_content

    # accepted means the address is still being created, there's nothing to decode
    actual = await client.create_address("foo", "sub", "rg", body)
    assert actual == Accepted202()


@pytest.mark.asyncio
async def test_update_address_if_match(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(200, _ADDRESS_JSON)).add(json_response(200, {}))

    await client.update_address(
        "foo", "sub", "rg", AddressUpdateParameter(tags={"a": "b"}), if_match="etag1"
    )
    assert transport.last_request.headers["If-Match"] == "etag1"
    assert transport.last_request.json_content == {"tags": {"a": "b"}}

    with pytest.raises(ResponseDecodeError):
        # contactDetails is required on the returned address
        await client.update_address("foo", "sub", "rg", AddressUpdateParameter())
    assert "If-Match" not in transport.last_request.headers


@pytest.mark.asyncio
async def test_delete_address(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(204))
    actual = await client.delete_address_by_name("foo", "sub", "rg")
    assert actual == NoContent204()
    assert transport.last_request.method == "DELETE"


@pytest.mark.asyncio
async def test_cancel_order_item(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(204))

    actual = await client.cancel_order_item(
        "item1", "sub", "rg", CancellationReason(reason="changed my mind")
    )

    assert actual == NoContent204()
    assert transport.last_request.method == "POST"
    assert transport.last_request.url == (
        f"{_RG_PATH}/orderItems/item1/cancel?api-version=2021-12-01"
    )
    assert transport.last_request.json_content == {"reason": "changed my mind"}


@pytest.mark.asyncio
async def test_list_addresses(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    next_link = f"{_RG_PATH}/addresses?api-version=2021-12-01&$skipToken=2"
    transport.add(json_response(200, {"value": [_ADDRESS_JSON], "nextLink": next_link}))
    transport.add(json_response(200, {"value": [_ADDRESS_JSON]}))

    addresses = [
        address
        async for address in client.list_addresses_at_resource_group_level(
            "sub", "rg", filter="properties/contactDetails/contactName eq 'Jane'"
        )
    ]

    assert len(addresses) == 2
    first, second = transport.requests
    assert first.url == (
        f"{_RG_PATH}/addresses?api-version=2021-12-01"
        "&$filter=properties%2FcontactDetails%2FcontactName%20eq%20%27Jane%27"
    ), first.url
    assert second.url == next_link


@pytest.mark.asyncio
async def test_list_product_families(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            200,
            {
                "value": [{"properties": {"displayName": "Azure Stack Edge"}}],
                "nextLink": "https://management.azure.com/next?token=1",
            },
        )
    )
    transport.add(json_response(200, {"value": []}))

    pager = client.list_product_families(
        "sub",
        ProductFamiliesRequest(
            filterable_properties={"azurestackedge": [{"type": "ShipToCountries"}]}
        ),
        expand="configurations",
    ).into_pages()
    pages = [page async for page in pager]

    assert len(pages) == 2
    properties = pages[0].value[0].properties
    assert properties.common_properties.basic_information.display_name == (
        "Azure Stack Edge"
    )
    first, second = transport.requests
    assert first.method == "POST"
    assert first.url == (
        f"{ENDPOINT}/subscriptions/sub/providers/Microsoft.EdgeOrder/"
        "listProductFamilies?api-version=2021-12-01&$expand=configurations"
    )
    assert first.json_content == {
        "filterableProperties": {"azurestackedge": [{"type": "ShipToCountries"}]}
    }
    assert second.method == "GET"
    assert second.url == (
        "https://management.azure.com/next?token=1&api-version=2021-12-01"
    )


@pytest.mark.asyncio
async def test_meter_details(
    client: EdgeOrderClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            200,
            {
                "value": [
                    {
                        "properties": {
                            "costInformation": {
                                "billingMeterDetails": [
                                    {
                                        "name": "a",
                                        "meterDetails": {
                                            "billingType": "Pav2",
                                            "meterGuid": "g",
                                        },
                                    },
                                    {
                                        "name": "b",
                                        "meterDetails": {
                                            "billingType": "Purchase",
                                            "productId": "p",
                                        },
                                    },
                                ]
                            }
                        }
                    }
                ]
            },
        )
    )

    page = await client.list_product_families(
        "sub", ProductFamiliesRequest(filterable_properties={})
    )

    family = page.value[0]
    basic_information = family.properties.common_properties.basic_information
    assert basic_information.cost_information is not None
    details = basic_information.cost_information.billing_meter_details
    assert isinstance(details[0].meter_details, Pav2MeterDetails)
    assert details[0].meter_details.meter_guid == "g"
    assert isinstance(details[1].meter_details, PurchaseMeterDetails)
