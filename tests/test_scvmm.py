from __future__ import annotations

from typing import Any, Callable

import pytest

from azmgmt.core import Accepted202, Created201, NoContent204, Ok200
from azmgmt.core.models import ProxyResource, TrackedResource
from azmgmt.scvmm import ScVmmClient
from azmgmt.scvmm.models import (
    Cloud,
    CloudProperties,
    DeleteFromHost,
    ExtendedLocation,
    ForceDelete,
    GuestAgent,
    GuestAgentProperties,
    GuestCredential,
    InventoryItem,
    ProvisioningAction,
    ResourcePatch,
    StopVirtualMachineOptions,
    TrueFalse,
    VirtualMachineCreateCheckpoint,
    VirtualMachineTemplateInventoryItem,
)
from fakes import ENDPOINT, RecordingTransport, json_response

_API_VERSION = "api-version=2023-10-07"
_RG_PATH = f"{ENDPOINT}/subscriptions/sub/resourceGroups/rg/providers/Microsoft.ScVmm"
_MACHINE_ID = (
    "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.HybridCompute/"
    "machines/vm1"
)
_INSTANCE_PATH = (
    f"{ENDPOINT}{_MACHINE_ID}/providers/Microsoft.ScVmm/virtualMachineInstances/default"
)


def _cloud_json(name: str) -> dict:
    return {
        "id": f"/subscriptions/sub/resourceGroups/rg/providers/Microsoft.ScVmm/"
        f"clouds/{name}",
        "name": name,
        "type": "Microsoft.ScVmm/clouds",
        "location": "eastus",
        "properties": {"cloudName": name, "provisioningState": "Succeeded"},
        "extendedLocation": {"type": "customLocation", "name": "cl"},
    }


@pytest.fixture
def client(make_client: Callable[..., Any]) -> ScVmmClient:
    return make_client(ScVmmClient)


@pytest.mark.asyncio
async def test_get_cloud(client: ScVmmClient, transport: RecordingTransport) -> None:
    transport.add(json_response(200, _cloud_json("foo")))

    cloud = await client.clouds().get("sub", "rg", "foo")

    assert isinstance(cloud, Cloud)
    assert cloud.tracked_resource.resource.name == "foo"
    assert cloud.properties.cloud_name == "foo"
    assert transport.last_request.url == f"{_RG_PATH}/clouds/foo?{_API_VERSION}"


@pytest.mark.asyncio
async def test_create_cloud(client: ScVmmClient, transport: RecordingTransport) -> None:
    transport.add(json_response(201, _cloud_json("foo")))

    actual = await client.clouds().create_or_update(
        "sub",
        "rg",
        "foo",
        Cloud(
            tracked_resource=TrackedResource(location="eastus"),
            properties=CloudProperties(inventory_item_id="item1"),
            extended_location=ExtendedLocation(type_="customLocation", name="cl"),
        ),
    )

    assert isinstance(actual, Created201)
    assert actual.value.tracked_resource.location == "eastus"
    assert transport.last_request.json_content == {
        "location": "eastus",
        "properties": {"inventoryItemId": "item1"},
        "extendedLocation": {"type": "customLocation", "name": "cl"},
    }, transport.last_request.json_content


@pytest.mark.asyncio
async def test_update_and_delete_vmm_server(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(202)).add(json_response(204))
    vmm_servers = client.vmm_servers()

    actual = await vmm_servers.update(
        "sub", "rg", "vmm1", ResourcePatch(tags={"env": "test"})
    )
    assert actual == Accepted202()
    assert transport.last_request.method == "PATCH"
    assert transport.last_request.json_content == {"tags": {"env": "test"}}

    actual = await vmm_servers.delete("sub", "rg", "vmm1", force=ForceDelete.TRUE)
    assert actual == NoContent204()
    assert transport.last_request.url == (
        f"{_RG_PATH}/vmmServers/vmm1?{_API_VERSION}&force=true"
    )


@pytest.mark.asyncio
async def test_list_by_subscription(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    next_link = (
        f"{ENDPOINT}/subscriptions/sub/providers/Microsoft.ScVmm/clouds?"
        f"{_API_VERSION}&$skipToken=2"
    )
    transport.add(
        json_response(200, {"value": [_cloud_json("a")], "nextLink": next_link})
    )
    transport.add(json_response(200, {"value": [_cloud_json("b")]}))

    names = [
        cloud.tracked_resource.resource.name
        async for cloud in client.clouds().list_by_subscription("sub")
    ]

    assert names == ["a", "b"]
    assert transport.requests[0].url == (
        f"{ENDPOINT}/subscriptions/sub/providers/Microsoft.ScVmm/clouds?{_API_VERSION}"
    )
    assert transport.requests[1].url == next_link


@pytest.mark.asyncio
async def test_inventory_items(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            200,
            {
                "value": [
                    {
                        "name": "t1",
                        "properties": {
                            "inventoryType": "VirtualMachineTemplate",
                            "cpuCount": 4,
                        },
                    },
                    {"name": "x1", "properties": {"inventoryType": "Switch"}},
                ]
            },
        )
    )

    items = [
        item
        async for item in client.inventory_items().list_by_vmm_server(
            "sub", "rg", "vmm1"
        )
    ]

    assert isinstance(items[0].properties, VirtualMachineTemplateInventoryItem)
    assert items[0].properties.cpu_count == 4
    assert items[1].properties.inventory_type == "Switch"
    assert transport.last_request.url == (
        f"{_RG_PATH}/vmmServers/vmm1/inventoryItems?{_API_VERSION}"
    )


@pytest.mark.asyncio
async def test_create_inventory_item(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(200, {"name": "i1", "properties": {"inventoryType": "Cloud"}})
    )

    actual = await client.inventory_items().create(
        "sub",
        "rg",
        "vmm1",
        "i1",
        InventoryItem.model_validate({"properties": {"inventoryType": "Cloud"}}),
    )

    assert isinstance(actual, Ok200)
    assert transport.last_request.method == "PUT"
    assert transport.last_request.json_content == {
        "properties": {"inventoryType": "Cloud"}
    }


@pytest.mark.asyncio
async def test_virtual_machine_instance_get(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            200,
            {
                "id": f"{_MACHINE_ID}/providers/Microsoft.ScVmm/"
                "virtualMachineInstances/default",
                "name": "default",
                "properties": {
                    "infrastructureProfile": {"vmName": "vm1"},
                    "powerState": "Running",
                },
                "extendedLocation": {"type": "customLocation", "name": "cl"},
            },
        )
    )

    instance = await client.virtual_machine_instances().get(_MACHINE_ID)

    assert instance.proxy_resource.resource.name == "default"
    assert instance.properties.infrastructure_profile.vm_name == "vm1"
    assert transport.last_request.url == f"{_INSTANCE_PATH}?{_API_VERSION}"


@pytest.mark.asyncio
async def test_virtual_machine_instance_actions(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(202)).add(json_response(200)).add(json_response(202))
    instances = client.virtual_machine_instances()

    actual = await instances.stop(
        _MACHINE_ID, StopVirtualMachineOptions(skip_shutdown=TrueFalse.TRUE)
    )
    assert actual == Accepted202()
    assert transport.last_request.method == "POST"
    assert transport.last_request.url == f"{_INSTANCE_PATH}/stop?{_API_VERSION}"
    assert transport.last_request.json_content == {"skipShutdown": "true"}

    actual = await instances.start(_MACHINE_ID)
    assert actual == Ok200(None)
    assert transport.last_request.json_content is None

    await instances.create_checkpoint(
        _MACHINE_ID, VirtualMachineCreateCheckpoint(name="before-upgrade")
    )
    assert transport.last_request.url == (
        f"{_INSTANCE_PATH}/createCheckpoint?{_API_VERSION}"
    )


@pytest.mark.asyncio
async def test_virtual_machine_instance_delete(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(202))

    actual = await client.virtual_machine_instances().delete(
        _MACHINE_ID, delete_from_host=DeleteFromHost.TRUE
    )

    assert actual == Accepted202()
    assert transport.last_request.url == (
        f"{_INSTANCE_PATH}?{_API_VERSION}&deleteFromHost=true"
    )


@pytest.mark.asyncio
async def test_guest_agent_create(
    client: ScVmmClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            201,
            {
                "name": "default",
                "properties": {
                    "provisioningAction": "install",
                    "status": "Connected",
                },
            },
        )
    )

    actual = await client.guest_agents().create(
        _MACHINE_ID,
        GuestAgent(
            proxy_resource=ProxyResource(),
            properties=GuestAgentProperties(
                credentials=GuestCredential(username="admin", password="p"),
                provisioning_action=ProvisioningAction.INSTALL,
            ),
        ),
    )

    assert isinstance(actual, Created201)
    assert transport.last_request.url == (
        f"{_INSTANCE_PATH}/guestAgents/default?{_API_VERSION}"
    )
    assert transport.last_request.json_content == {
        "properties": {
            "credentials": {"username": "admin", "password": "p"},
            "provisioningAction": "install",
        }
    }
