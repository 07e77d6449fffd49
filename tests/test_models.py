from __future__ import annotations

import enum
from typing import List, Optional

import pydantic
import pytest
from pydantic import Field

from azmgmt.core.models import (
    AzureModel,
    OpenEnum,
    TrackedResource,
    decode,
    encode,
)
from azmgmt.edgeorder.models import (
    BillingMeterDetails,
    MeterDetails,
    Pav2MeterDetails,
)
from azmgmt.migrateprojects.models import (
    DatabaseProjectSummary,
    MigrateProject,
    ServersProjectSummary,
)
from azmgmt.reservations.models import ReservationResponse
from azmgmt.scvmm.models import (
    ExtendedLocation,
    InventoryItem,
    InventoryItemProperties,
    InventoryType,
    ResourceProvisioningState,
    VirtualMachineInventoryItem,
    VmmServer,
    VmmServerProperties,
)


VMM_SERVER_JSON = {
    "id": "/subscriptions/sub/resourceGroups/rg/providers/Microsoft.ScVmm/vmmServers/a",
    "name": "a",
    "type": "Microsoft.ScVmm/vmmServers",
    "location": "eastus",
    "tags": {"team": "infra"},
    "properties": {"fqdn": "vmm.contoso.com", "port": 8100},
    "extendedLocation": {"type": "customLocation", "name": "/custom/location"},
    "systemData": {"createdBy": "someone", "createdByType": "User"},
}


def test_flattened_decode() -> None:
    server = VmmServer.model_validate(VMM_SERVER_JSON)

    assert server.tracked_resource.resource.name == "a"
    assert server.tracked_resource.resource.type_ == "Microsoft.ScVmm/vmmServers"
    assert server.tracked_resource.location == "eastus"
    assert server.tracked_resource.tags == {"team": "infra"}
    assert server.properties.fqdn == "vmm.contoso.com"
    assert server.extended_location.name == "/custom/location"
    assert server.system_data is not None
    assert server.system_data.created_by == "someone"


def test_flattened_encode_spreads_embedded_keys() -> None:
    server = VmmServer(
        tracked_resource=TrackedResource(location="westus"),
        properties=VmmServerProperties(fqdn="vmm.contoso.com"),
        extended_location=ExtendedLocation(type_="customLocation", name="cl"),
    )

    actual = encode(server)
    expected = {
        "location": "westus",
        "properties": {"fqdn": "vmm.contoso.com"},
        "extendedLocation": {"type": "customLocation", "name": "cl"},
    }
    assert actual == expected, actual


def test_flattened_construct_from_json_names() -> None:
    # the embedded record's keys can also be given directly to the outer record
    server = VmmServer(
        location="westus",
        properties={"fqdn": "vmm"},
        extendedLocation={"name": "cl"},
    )
    assert server.tracked_resource.location == "westus"
    assert encode(server)["location"] == "westus"


def test_flattened_required_field_missing() -> None:
    body = dict(VMM_SERVER_JSON)
    del body["location"]
    with pytest.raises(pydantic.ValidationError):
        VmmServer.model_validate(body)


def test_open_enum() -> None:
    known = decode(VmmServerProperties, {"fqdn": "a", "provisioningState": "Failed"})
    assert known.provisioning_state == ResourceProvisioningState.FAILED

    # values the service added after this library was written are not an error
    unknown = decode(VmmServerProperties, {"fqdn": "a", "provisioningState": "Moving"})
    assert unknown.provisioning_state == "Moving"
    assert encode(unknown)["provisioningState"] == "Moving"

    assert encode(known)["provisioningState"] == "Failed"


def test_open_enum_is_case_sensitive() -> None:
    actual = decode(VmmServerProperties, {"fqdn": "a", "provisioningState": "failed"})
    assert actual.provisioning_state == "failed"
    assert not isinstance(actual.provisioning_state, ResourceProvisioningState)


class _Color(str, enum.Enum):
    RED = "Red"


class _Palette(AzureModel):
    colors: Optional[List[OpenEnum[_Color]]] = None
    primary: OpenEnum[_Color] = Field(alias="primaryColor")


def test_open_enum_list_and_required() -> None:
    palette = _Palette.model_validate(
        {"colors": ["Red", "Mauve"], "primaryColor": "Red"}
    )
    assert palette.colors == [_Color.RED, "Mauve"], palette.colors
    assert palette.primary == _Color.RED

    with pytest.raises(pydantic.ValidationError):
        _Palette.model_validate({"primaryColor": 3})


def test_none_is_not_encoded() -> None:
    actual = encode(VmmServerProperties(fqdn="a"))
    assert actual == {"fqdn": "a"}, actual


def test_unknown_keys_are_ignored() -> None:
    actual = decode(VmmServerProperties, {"fqdn": "a", "somethingNew": [1, 2]})
    assert actual.fqdn == "a"


def test_polymorphic_decode() -> None:
    item = InventoryItem.model_validate(
        {
            "id": "/x/inventoryItems/1",
            "name": "1",
            "properties": {
                "inventoryType": "VirtualMachine",
                "inventoryItemName": "vm1",
                "osName": "Windows Server 2019",
                "ipAddresses": ["10.0.0.4"],
            },
        }
    )

    assert isinstance(item.properties, VirtualMachineInventoryItem)
    base = item.properties.inventory_item_properties
    assert base.inventory_type == InventoryType.VIRTUAL_MACHINE
    assert base.inventory_item_name == "vm1"
    assert item.properties.ip_addresses == ["10.0.0.4"]


def test_polymorphic_unknown_discriminator_uses_base() -> None:
    item = InventoryItem.model_validate(
        {"properties": {"inventoryType": "StoragePool", "inventoryItemName": "p"}}
    )
    assert type(item.properties) is InventoryItemProperties
    assert item.properties.inventory_type == "StoragePool"


def test_polymorphic_encode() -> None:
    item = InventoryItem.model_validate(
        {"properties": {"inventoryType": "VirtualMachine", "osName": "Ubuntu"}}
    )
    actual = encode(item)
    expected = {"properties": {"inventoryType": "VirtualMachine", "osName": "Ubuntu"}}
    assert actual == expected, actual


def test_polymorphic_in_dict() -> None:
    project = MigrateProject.model_validate(
        {
            "location": "westus",
            "properties": {
                "summary": {
                    "ServerMigration": {
                        "instanceType": "Servers",
                        "migratedCount": 4,
                    },
                    "DataMigrationService": {"instanceType": "Databases"},
                }
            },
        }
    )

    assert project.properties is not None
    summary = project.properties.summary
    assert summary is not None
    servers = summary["ServerMigration"]
    assert isinstance(servers, ServersProjectSummary)
    assert servers.migrated_count == 4
    assert servers.project_summary.instance_type == "Servers"
    assert isinstance(summary["DataMigrationService"], DatabaseProjectSummary)


def test_polymorphic_optional_field() -> None:
    details = BillingMeterDetails.model_validate(
        {"name": "a", "meterDetails": {"billingType": "Pav2", "meterGuid": "g"}}
    )
    assert isinstance(details.meter_details, Pav2MeterDetails)

    details = BillingMeterDetails.model_validate(
        {"name": "a", "meterDetails": {"billingType": "Barter"}}
    )
    assert isinstance(details.meter_details, MeterDetails)

    assert BillingMeterDetails.model_validate({"name": "a"}).meter_details is None


def test_decode_list() -> None:
    actual = decode(
        List[ReservationResponse],
        [{"id": "r1", "name": "o/r1"}, {"id": "r2", "name": "o/r2"}],
    )
    assert [r.proxy_resource.resource.id for r in actual] == ["r1", "r2"]
