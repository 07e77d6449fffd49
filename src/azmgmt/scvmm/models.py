"""Request and response bodies for Microsoft.ScVmm (System Center VMM on Azure Arc)"""

from __future__ import annotations

import enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from azmgmt.core.models import (
    AzureModel,
    OpenEnum,
    ProxyResource,
    SystemData,
    TrackedResource,
    flattened,
    polymorphic,
)


class ResourceProvisioningState(str, enum.Enum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    CANCELED = "Canceled"
    PROVISIONING = "Provisioning"
    UPDATING = "Updating"
    DELETING = "Deleting"
    ACCEPTED = "Accepted"
    CREATED = "Created"


class AllocationMethod(str, enum.Enum):
    DYNAMIC = "Dynamic"
    STATIC = "Static"


class OsType(str, enum.Enum):
    WINDOWS = "Windows"
    LINUX = "Linux"
    OTHER = "Other"


class InventoryType(str, enum.Enum):
    CLOUD = "Cloud"
    VIRTUAL_NETWORK = "VirtualNetwork"
    VIRTUAL_MACHINE_TEMPLATE = "VirtualMachineTemplate"
    VIRTUAL_MACHINE = "VirtualMachine"


class ProvisioningAction(str, enum.Enum):
    INSTALL = "install"
    UNINSTALL = "uninstall"
    REPAIR = "repair"


class TrueFalse(str, enum.Enum):
    """Several VMM settings are the strings "true"/"false" rather than booleans"""

    FALSE = "false"
    TRUE = "true"


class ForceDelete(str, enum.Enum):
    TRUE = "true"
    FALSE = "false"


class DeleteFromHost(str, enum.Enum):
    TRUE = "true"
    FALSE = "false"


class ExtendedLocation(AzureModel):
    type_: Optional[str] = Field(None, alias="type")
    name: Optional[str] = None


class ResourcePatch(AzureModel):
    tags: Optional[Dict[str, Any]] = None


# vmm servers


class VmmCredential(AzureModel):
    username: Optional[str] = None
    password: Optional[str] = None


class VmmServerProperties(AzureModel):
    credentials: Optional[VmmCredential] = None
    fqdn: str
    port: Optional[int] = None
    connection_status: Optional[str] = Field(None, alias="connectionStatus")
    error_message: Optional[str] = Field(None, alias="errorMessage")
    uuid: Optional[str] = None
    version: Optional[str] = None
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class VmmServer(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: VmmServerProperties
    extended_location: ExtendedLocation = Field(alias="extendedLocation")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class VmmServerListResult(AzureModel):
    value: Optional[List[VmmServer]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# clouds


class CloudCapacity(AzureModel):
    cpu_count: Optional[int] = Field(None, alias="cpuCount")
    memory_mb: Optional[int] = Field(None, alias="memoryMB")
    vm_count: Optional[int] = Field(None, alias="vmCount")


class StorageQoSPolicy(AzureModel):
    name: Optional[str] = None
    id: Optional[str] = None
    iops_maximum: Optional[int] = Field(None, alias="iopsMaximum")
    iops_minimum: Optional[int] = Field(None, alias="iopsMinimum")
    bandwidth_limit: Optional[int] = Field(None, alias="bandwidthLimit")
    policy_id: Optional[str] = Field(None, alias="policyId")


class StorageQoSPolicyDetails(AzureModel):
    name: Optional[str] = None
    id: Optional[str] = None


class CloudProperties(AzureModel):
    inventory_item_id: Optional[str] = Field(None, alias="inventoryItemId")
    uuid: Optional[str] = None
    vmm_server_id: Optional[str] = Field(None, alias="vmmServerId")
    cloud_name: Optional[str] = Field(None, alias="cloudName")
    cloud_capacity: Optional[CloudCapacity] = Field(None, alias="cloudCapacity")
    storage_qos_policies: Optional[List[StorageQoSPolicy]] = Field(
        None, alias="storageQoSPolicies"
    )
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class Cloud(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: CloudProperties
    extended_location: ExtendedLocation = Field(alias="extendedLocation")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class CloudListResult(AzureModel):
    value: Optional[List[Cloud]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# virtual networks


class VirtualNetworkProperties(AzureModel):
    inventory_item_id: Optional[str] = Field(None, alias="inventoryItemId")
    uuid: Optional[str] = None
    vmm_server_id: Optional[str] = Field(None, alias="vmmServerId")
    network_name: Optional[str] = Field(None, alias="networkName")
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class VirtualNetwork(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: VirtualNetworkProperties
    extended_location: ExtendedLocation = Field(alias="extendedLocation")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class VirtualNetworkListResult(AzureModel):
    value: Optional[List[VirtualNetwork]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# virtual machine templates


class NetworkInterface(AzureModel):
    name: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    mac_address: Optional[str] = Field(None, alias="macAddress")
    virtual_network_id: Optional[str] = Field(None, alias="virtualNetworkId")
    network_name: Optional[str] = Field(None, alias="networkName")
    mac_address_type: Optional[OpenEnum[AllocationMethod]] = Field(
        None, alias="macAddressType"
    )
    nic_id: Optional[str] = Field(None, alias="nicId")


class VirtualDisk(AzureModel):
    name: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    disk_id: Optional[str] = Field(None, alias="diskId")
    disk_size_gb: Optional[int] = Field(None, alias="diskSizeGB")
    max_disk_size_gb: Optional[int] = Field(None, alias="maxDiskSizeGB")
    bus: Optional[int] = None
    lun: Optional[int] = None
    bus_type: Optional[str] = Field(None, alias="busType")
    vhd_type: Optional[str] = Field(None, alias="vhdType")
    volume_type: Optional[str] = Field(None, alias="volumeType")
    vhd_format_type: Optional[str] = Field(None, alias="vhdFormatType")
    template_disk_id: Optional[str] = Field(None, alias="templateDiskId")
    storage_qos_policy: Optional[StorageQoSPolicyDetails] = Field(
        None, alias="storageQoSPolicy"
    )
    create_diff_disk: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="createDiffDisk"
    )


class VirtualMachineTemplateProperties(AzureModel):
    inventory_item_id: Optional[str] = Field(None, alias="inventoryItemId")
    uuid: Optional[str] = None
    vmm_server_id: Optional[str] = Field(None, alias="vmmServerId")
    os_type: Optional[OpenEnum[OsType]] = Field(None, alias="osType")
    os_name: Optional[str] = Field(None, alias="osName")
    computer_name: Optional[str] = Field(None, alias="computerName")
    memory_mb: Optional[int] = Field(None, alias="memoryMB")
    cpu_count: Optional[int] = Field(None, alias="cpuCount")
    limit_cpu_for_migration: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="limitCpuForMigration"
    )
    dynamic_memory_enabled: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="dynamicMemoryEnabled"
    )
    is_customizable: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="isCustomizable"
    )
    dynamic_memory_max_mb: Optional[int] = Field(None, alias="dynamicMemoryMaxMB")
    dynamic_memory_min_mb: Optional[int] = Field(None, alias="dynamicMemoryMinMB")
    is_highly_available: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="isHighlyAvailable"
    )
    generation: Optional[int] = None
    network_interfaces: Optional[List[NetworkInterface]] = Field(
        None, alias="networkInterfaces"
    )
    disks: Optional[List[VirtualDisk]] = None
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class VirtualMachineTemplate(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: VirtualMachineTemplateProperties
    extended_location: ExtendedLocation = Field(alias="extendedLocation")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class VirtualMachineTemplateListResult(AzureModel):
    value: Optional[List[VirtualMachineTemplate]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# availability sets


class AvailabilitySetProperties(AzureModel):
    availability_set_name: Optional[str] = Field(None, alias="availabilitySetName")
    vmm_server_id: Optional[str] = Field(None, alias="vmmServerId")
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class AvailabilitySet(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: AvailabilitySetProperties
    extended_location: ExtendedLocation = Field(alias="extendedLocation")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class AvailabilitySetListResult(AzureModel):
    value: Optional[List[AvailabilitySet]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class AvailabilitySetListItem(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None


# inventory items, the things VMM knows about that haven't necessarily been enabled in
# Azure yet


class InventoryItemProperties(AzureModel):
    inventory_type: OpenEnum[InventoryType] = Field(alias="inventoryType")
    managed_resource_id: Optional[str] = Field(None, alias="managedResourceId")
    uuid: Optional[str] = None
    inventory_item_name: Optional[str] = Field(None, alias="inventoryItemName")
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class InventoryItemDetails(AzureModel):
    inventory_item_id: Optional[str] = Field(None, alias="inventoryItemId")
    inventory_item_name: Optional[str] = Field(None, alias="inventoryItemName")


class CloudInventoryItem(AzureModel):
    inventory_item_properties: InventoryItemProperties = flattened(
        InventoryItemProperties
    )


class VirtualNetworkInventoryItem(AzureModel):
    inventory_item_properties: InventoryItemProperties = flattened(
        InventoryItemProperties
    )


class VirtualMachineTemplateInventoryItem(AzureModel):
    inventory_item_properties: InventoryItemProperties = flattened(
        InventoryItemProperties
    )
    cpu_count: Optional[int] = Field(None, alias="cpuCount")
    memory_mb: Optional[int] = Field(None, alias="memoryMB")
    os_type: Optional[OpenEnum[OsType]] = Field(None, alias="osType")
    os_name: Optional[str] = Field(None, alias="osName")


class VirtualMachineInventoryItem(AzureModel):
    inventory_item_properties: InventoryItemProperties = flattened(
        InventoryItemProperties
    )
    os_type: Optional[OpenEnum[OsType]] = Field(None, alias="osType")
    os_name: Optional[str] = Field(None, alias="osName")
    os_version: Optional[str] = Field(None, alias="osVersion")
    power_state: Optional[str] = Field(None, alias="powerState")
    ip_addresses: Optional[List[str]] = Field(None, alias="ipAddresses")
    cloud: Optional[InventoryItemDetails] = None
    bios_guid: Optional[str] = Field(None, alias="biosGuid")
    managed_machine_resource_id: Optional[str] = Field(
        None, alias="managedMachineResourceId"
    )


InventoryItemPropertiesPayload = polymorphic(
    "inventoryType",
    {
        "Cloud": CloudInventoryItem,
        "VirtualNetwork": VirtualNetworkInventoryItem,
        "VirtualMachineTemplate": VirtualMachineTemplateInventoryItem,
        "VirtualMachine": VirtualMachineInventoryItem,
    },
    InventoryItemProperties,
)


class InventoryItem(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: InventoryItemPropertiesPayload
    kind: Optional[str] = None
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class InventoryItemsList(AzureModel):
    next_link: Optional[str] = Field(None, alias="nextLink")
    value: Optional[List[InventoryItem]] = None


# virtual machine instances


class Checkpoint(AzureModel):
    parent_checkpoint_id: Optional[str] = Field(None, alias="parentCheckpointID")
    checkpoint_id: Optional[str] = Field(None, alias="checkpointID")
    name: Optional[str] = None
    description: Optional[str] = None


class InfrastructureProfile(AzureModel):
    inventory_item_id: Optional[str] = Field(None, alias="inventoryItemId")
    vmm_server_id: Optional[str] = Field(None, alias="vmmServerId")
    cloud_id: Optional[str] = Field(None, alias="cloudId")
    template_id: Optional[str] = Field(None, alias="templateId")
    vm_name: Optional[str] = Field(None, alias="vmName")
    uuid: Optional[str] = None
    last_restored_vm_checkpoint: Optional[Checkpoint] = Field(
        None, alias="lastRestoredVMCheckpoint"
    )
    checkpoints: Optional[List[Checkpoint]] = None
    checkpoint_type: Optional[str] = Field(None, alias="checkpointType")
    generation: Optional[int] = None
    bios_guid: Optional[str] = Field(None, alias="biosGuid")


class InfrastructureProfileUpdate(AzureModel):
    checkpoint_type: Optional[str] = Field(None, alias="checkpointType")


class OsProfileForVmInstance(AzureModel):
    admin_password: Optional[str] = Field(None, alias="adminPassword")
    computer_name: Optional[str] = Field(None, alias="computerName")
    os_type: Optional[OpenEnum[OsType]] = Field(None, alias="osType")
    os_sku: Optional[str] = Field(None, alias="osSku")
    os_version: Optional[str] = Field(None, alias="osVersion")


class HardwareProfile(AzureModel):
    memory_mb: Optional[int] = Field(None, alias="memoryMB")
    cpu_count: Optional[int] = Field(None, alias="cpuCount")
    limit_cpu_for_migration: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="limitCpuForMigration"
    )
    dynamic_memory_enabled: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="dynamicMemoryEnabled"
    )
    dynamic_memory_max_mb: Optional[int] = Field(None, alias="dynamicMemoryMaxMB")
    dynamic_memory_min_mb: Optional[int] = Field(None, alias="dynamicMemoryMinMB")
    is_highly_available: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="isHighlyAvailable"
    )


class HardwareProfileUpdate(AzureModel):
    memory_mb: Optional[int] = Field(None, alias="memoryMB")
    cpu_count: Optional[int] = Field(None, alias="cpuCount")
    limit_cpu_for_migration: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="limitCpuForMigration"
    )
    dynamic_memory_enabled: Optional[OpenEnum[TrueFalse]] = Field(
        None, alias="dynamicMemoryEnabled"
    )
    dynamic_memory_max_mb: Optional[int] = Field(None, alias="dynamicMemoryMaxMB")
    dynamic_memory_min_mb: Optional[int] = Field(None, alias="dynamicMemoryMinMB")


class NetworkProfile(AzureModel):
    network_interfaces: Optional[List[NetworkInterface]] = Field(
        None, alias="networkInterfaces"
    )


class NetworkInterfaceUpdate(AzureModel):
    name: Optional[str] = None
    mac_address: Optional[str] = Field(None, alias="macAddress")
    virtual_network_id: Optional[str] = Field(None, alias="virtualNetworkId")
    mac_address_type: Optional[OpenEnum[AllocationMethod]] = Field(
        None, alias="macAddressType"
    )
    nic_id: Optional[str] = Field(None, alias="nicId")


class NetworkProfileUpdate(AzureModel):
    network_interfaces: Optional[List[NetworkInterfaceUpdate]] = Field(
        None, alias="networkInterfaces"
    )


class StorageProfile(AzureModel):
    disks: Optional[List[VirtualDisk]] = None


class VirtualDiskUpdate(AzureModel):
    name: Optional[str] = None
    disk_id: Optional[str] = Field(None, alias="diskId")
    disk_size_gb: Optional[int] = Field(None, alias="diskSizeGB")
    bus: Optional[int] = None
    lun: Optional[int] = None
    bus_type: Optional[str] = Field(None, alias="busType")
    vhd_type: Optional[str] = Field(None, alias="vhdType")
    storage_qos_policy: Optional[StorageQoSPolicyDetails] = Field(
        None, alias="storageQoSPolicy"
    )


class StorageProfileUpdate(AzureModel):
    disks: Optional[List[VirtualDiskUpdate]] = None


class VirtualMachineInstanceProperties(AzureModel):
    availability_sets: Optional[List[AvailabilitySetListItem]] = Field(
        None, alias="availabilitySets"
    )
    os_profile: Optional[OsProfileForVmInstance] = Field(None, alias="osProfile")
    hardware_profile: Optional[HardwareProfile] = Field(None, alias="hardwareProfile")
    network_profile: Optional[NetworkProfile] = Field(None, alias="networkProfile")
    storage_profile: Optional[StorageProfile] = Field(None, alias="storageProfile")
    infrastructure_profile: Optional[InfrastructureProfile] = Field(
        None, alias="infrastructureProfile"
    )
    power_state: Optional[str] = Field(None, alias="powerState")
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class VirtualMachineInstance(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: VirtualMachineInstanceProperties
    extended_location: ExtendedLocation = Field(alias="extendedLocation")
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class VirtualMachineInstanceListResult(AzureModel):
    value: Optional[List[VirtualMachineInstance]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class VirtualMachineInstanceUpdateProperties(AzureModel):
    hardware_profile: Optional[HardwareProfileUpdate] = Field(
        None, alias="hardwareProfile"
    )
    storage_profile: Optional[StorageProfileUpdate] = Field(
        None, alias="storageProfile"
    )
    network_profile: Optional[NetworkProfileUpdate] = Field(
        None, alias="networkProfile"
    )
    availability_sets: Optional[List[AvailabilitySetListItem]] = Field(
        None, alias="availabilitySets"
    )
    infrastructure_profile: Optional[InfrastructureProfileUpdate] = Field(
        None, alias="infrastructureProfile"
    )


class VirtualMachineInstanceUpdate(AzureModel):
    properties: Optional[VirtualMachineInstanceUpdateProperties] = None


class StopVirtualMachineOptions(AzureModel):
    skip_shutdown: Optional[OpenEnum[TrueFalse]] = Field(None, alias="skipShutdown")


class VirtualMachineCreateCheckpoint(AzureModel):
    name: Optional[str] = None
    description: Optional[str] = None


class VirtualMachineDeleteCheckpoint(AzureModel):
    id: Optional[str] = None


class VirtualMachineRestoreCheckpoint(AzureModel):
    id: Optional[str] = None


# guest agents and hybrid identity


class GuestCredential(AzureModel):
    username: str
    password: str


class HttpProxyConfiguration(AzureModel):
    https_proxy: Optional[str] = Field(None, alias="httpsProxy")


class GuestAgentProperties(AzureModel):
    uuid: Optional[str] = None
    credentials: Optional[GuestCredential] = None
    http_proxy_config: Optional[HttpProxyConfiguration] = Field(
        None, alias="httpProxyConfig"
    )
    provisioning_action: Optional[OpenEnum[ProvisioningAction]] = Field(
        None, alias="provisioningAction"
    )
    status: Optional[str] = None
    custom_resource_name: Optional[str] = Field(None, alias="customResourceName")
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class GuestAgent(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: GuestAgentProperties
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class GuestAgentList(AzureModel):
    next_link: Optional[str] = Field(None, alias="nextLink")
    value: Optional[List[GuestAgent]] = None


class VmInstanceHybridIdentityMetadataProperties(AzureModel):
    resource_uid: Optional[str] = Field(None, alias="resourceUid")
    public_key: Optional[str] = Field(None, alias="publicKey")
    provisioning_state: Optional[OpenEnum[ResourceProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class VmInstanceHybridIdentityMetadata(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: VmInstanceHybridIdentityMetadataProperties
    system_data: Optional[SystemData] = Field(None, alias="systemData")


class VmInstanceHybridIdentityMetadataList(AzureModel):
    next_link: Optional[str] = Field(None, alias="nextLink")
    value: Optional[List[VmInstanceHybridIdentityMetadata]] = None
