from __future__ import annotations

from typing import Any, Optional

from azmgmt.core.client import OperationGroup, ServiceClient
from azmgmt.core.models import OperationListResult
from azmgmt.core.operation import PageableRequestBuilder, RequestBuilder
from azmgmt.core.rest_api import quote_path

from .models import (
    AvailabilitySet,
    AvailabilitySetListResult,
    Cloud,
    CloudListResult,
    DeleteFromHost,
    ForceDelete,
    GuestAgent,
    GuestAgentList,
    InventoryItem,
    InventoryItemsList,
    ResourcePatch,
    StopVirtualMachineOptions,
    VirtualMachineCreateCheckpoint,
    VirtualMachineDeleteCheckpoint,
    VirtualMachineInstance,
    VirtualMachineInstanceListResult,
    VirtualMachineInstanceUpdate,
    VirtualMachineRestoreCheckpoint,
    VirtualMachineTemplate,
    VirtualMachineTemplateListResult,
    VirtualNetwork,
    VirtualNetworkListResult,
    VmInstanceHybridIdentityMetadata,
    VmInstanceHybridIdentityMetadataList,
    VmmServer,
    VmmServerListResult,
)

API_VERSION = "2023-10-07"

_PROVIDER = "providers/Microsoft.ScVmm"


def _extension_path(resource_uri: str, rest: str) -> str:
    """
    Virtual machine instances are extension resources on an Arc machine, resource_uri
    is that machine's full ARM id and is used as is
    """
    return f"{resource_uri.strip('/')}/{_PROVIDER}/virtualMachineInstances/{rest}"


class _ScVmmResourceOperations(OperationGroup):
    """
    vmmServers, clouds, virtualNetworks, virtualMachineTemplates and availabilitySets
    all support the same set of operations, subclasses fill in the collection name and
    the types
    """

    API_VERSION = API_VERSION
    COLLECTION: str
    RESOURCE_TYPE: Any
    LIST_TYPE: Any

    def _path(
        self, subscription_id: str, resource_group_name: str, resource_name: str
    ) -> str:
        return (
            f"subscriptions/{quote_path(subscription_id)}"
            f"/resourceGroups/{quote_path(resource_group_name)}"
            f"/{_PROVIDER}/{self.COLLECTION}/{quote_path(resource_name)}"
        )

    def get(
        self, subscription_id: str, resource_group_name: str, resource_name: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._path(subscription_id, resource_group_name, resource_name),
            {200: self.RESOURCE_TYPE},
        )

    def create_or_update(
        self,
        subscription_id: str,
        resource_group_name: str,
        resource_name: str,
        body: Any,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._path(subscription_id, resource_group_name, resource_name),
            {200: self.RESOURCE_TYPE, 201: self.RESOURCE_TYPE},
            body=body,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        resource_name: str,
        properties: ResourcePatch,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            self._path(subscription_id, resource_group_name, resource_name),
            {200: self.RESOURCE_TYPE, 202: None},
            body=properties,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        resource_name: str,
        *,
        force: Optional[ForceDelete] = None,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._path(subscription_id, resource_group_name, resource_name),
            {200: None, 202: None, 204: None},
            query_parameters={"force": force},
        )

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            f"subscriptions/{quote_path(subscription_id)}"
            f"/resourceGroups/{quote_path(resource_group_name)}"
            f"/{_PROVIDER}/{self.COLLECTION}",
            self.LIST_TYPE,
        )

    def list_by_subscription(self, subscription_id: str) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            f"subscriptions/{quote_path(subscription_id)}"
            f"/{_PROVIDER}/{self.COLLECTION}",
            self.LIST_TYPE,
        )


class VmmServersOperations(_ScVmmResourceOperations):
    COLLECTION = "vmmServers"
    RESOURCE_TYPE = VmmServer
    LIST_TYPE = VmmServerListResult


class CloudsOperations(_ScVmmResourceOperations):
    COLLECTION = "clouds"
    RESOURCE_TYPE = Cloud
    LIST_TYPE = CloudListResult


class VirtualNetworksOperations(_ScVmmResourceOperations):
    COLLECTION = "virtualNetworks"
    RESOURCE_TYPE = VirtualNetwork
    LIST_TYPE = VirtualNetworkListResult


class VirtualMachineTemplatesOperations(_ScVmmResourceOperations):
    COLLECTION = "virtualMachineTemplates"
    RESOURCE_TYPE = VirtualMachineTemplate
    LIST_TYPE = VirtualMachineTemplateListResult


class AvailabilitySetsOperations(_ScVmmResourceOperations):
    COLLECTION = "availabilitySets"
    RESOURCE_TYPE = AvailabilitySet
    LIST_TYPE = AvailabilitySetListResult


class InventoryItemsOperations(OperationGroup):
    API_VERSION = API_VERSION

    @staticmethod
    def _path(
        subscription_id: str, resource_group_name: str, vmm_server_name: str
    ) -> str:
        return (
            f"subscriptions/{quote_path(subscription_id)}"
            f"/resourceGroups/{quote_path(resource_group_name)}"
            f"/{_PROVIDER}/vmmServers/{quote_path(vmm_server_name)}/inventoryItems"
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        vmm_server_name: str,
        inventory_item_resource_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            f"{self._path(subscription_id, resource_group_name, vmm_server_name)}"
            f"/{quote_path(inventory_item_resource_name)}",
            {200: InventoryItem},
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        vmm_server_name: str,
        inventory_item_resource_name: str,
        resource: InventoryItem,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            f"{self._path(subscription_id, resource_group_name, vmm_server_name)}"
            f"/{quote_path(inventory_item_resource_name)}",
            {200: InventoryItem, 201: InventoryItem},
            body=resource,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        vmm_server_name: str,
        inventory_item_resource_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            f"{self._path(subscription_id, resource_group_name, vmm_server_name)}"
            f"/{quote_path(inventory_item_resource_name)}",
            {200: None, 204: None},
        )

    def list_by_vmm_server(
        self, subscription_id: str, resource_group_name: str, vmm_server_name: str
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            self._path(subscription_id, resource_group_name, vmm_server_name),
            InventoryItemsList,
        )


class VirtualMachineInstancesOperations(OperationGroup):
    API_VERSION = API_VERSION

    def get(self, resource_uri: str) -> RequestBuilder:
        return self._request(
            "GET",
            _extension_path(resource_uri, "default"),
            {200: VirtualMachineInstance},
        )

    def create_or_update(
        self, resource_uri: str, resource: VirtualMachineInstance
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            _extension_path(resource_uri, "default"),
            {200: VirtualMachineInstance, 201: VirtualMachineInstance},
            body=resource,
        )

    def update(
        self, resource_uri: str, properties: VirtualMachineInstanceUpdate
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _extension_path(resource_uri, "default"),
            {200: VirtualMachineInstance, 202: None},
            body=properties,
        )

    def delete(
        self,
        resource_uri: str,
        *,
        force: Optional[ForceDelete] = None,
        delete_from_host: Optional[DeleteFromHost] = None,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            _extension_path(resource_uri, "default"),
            {200: None, 202: None, 204: None},
            query_parameters={
                "force": force,
                "deleteFromHost": delete_from_host,
            },
        )

    def list(self, resource_uri: str) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            f"{resource_uri.strip('/')}/{_PROVIDER}/virtualMachineInstances",
            VirtualMachineInstanceListResult,
        )

    def _action(
        self, resource_uri: str, action: str, body: Any = None
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _extension_path(resource_uri, f"default/{action}"),
            {200: None, 202: None},
            body=body,
        )

    def start(self, resource_uri: str) -> RequestBuilder:
        return self._action(resource_uri, "start")

    def stop(
        self, resource_uri: str, body: Optional[StopVirtualMachineOptions] = None
    ) -> RequestBuilder:
        return self._action(resource_uri, "stop", body)

    def restart(self, resource_uri: str) -> RequestBuilder:
        return self._action(resource_uri, "restart")

    def create_checkpoint(
        self, resource_uri: str, body: VirtualMachineCreateCheckpoint
    ) -> RequestBuilder:
        return self._action(resource_uri, "createCheckpoint", body)

    def delete_checkpoint(
        self, resource_uri: str, body: VirtualMachineDeleteCheckpoint
    ) -> RequestBuilder:
        return self._action(resource_uri, "deleteCheckpoint", body)

    def restore_checkpoint(
        self, resource_uri: str, body: VirtualMachineRestoreCheckpoint
    ) -> RequestBuilder:
        return self._action(resource_uri, "restoreCheckpoint", body)


class GuestAgentsOperations(OperationGroup):
    API_VERSION = API_VERSION

    def get(self, resource_uri: str) -> RequestBuilder:
        return self._request(
            "GET",
            _extension_path(resource_uri, "default/guestAgents/default"),
            {200: GuestAgent},
        )

    def create(self, resource_uri: str, resource: GuestAgent) -> RequestBuilder:
        return self._request(
            "PUT",
            _extension_path(resource_uri, "default/guestAgents/default"),
            {200: GuestAgent, 201: GuestAgent},
            body=resource,
        )

    def delete(self, resource_uri: str) -> RequestBuilder:
        return self._request(
            "DELETE",
            _extension_path(resource_uri, "default/guestAgents/default"),
            {200: None, 204: None},
        )

    def list(self, resource_uri: str) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _extension_path(resource_uri, "default/guestAgents"),
            GuestAgentList,
        )


class VmInstanceHybridIdentityMetadatasOperations(OperationGroup):
    API_VERSION = API_VERSION

    def get(self, resource_uri: str) -> RequestBuilder:
        return self._request(
            "GET",
            _extension_path(resource_uri, "default/hybridIdentityMetadata/default"),
            {200: VmInstanceHybridIdentityMetadata},
        )

    def list(self, resource_uri: str) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _extension_path(resource_uri, "default/hybridIdentityMetadata"),
            VmInstanceHybridIdentityMetadataList,
        )


class OperationsOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list(self) -> PageableRequestBuilder:
        return self._pageable("GET", f"{_PROVIDER}/operations", OperationListResult)


class ScVmmClient(ServiceClient):
    """System Center Virtual Machine Manager resources projected into Azure via Arc"""

    API_VERSION = API_VERSION

    def vmm_servers(self) -> VmmServersOperations:
        return VmmServersOperations(self.config)

    def clouds(self) -> CloudsOperations:
        return CloudsOperations(self.config)

    def virtual_networks(self) -> VirtualNetworksOperations:
        return VirtualNetworksOperations(self.config)

    def virtual_machine_templates(self) -> VirtualMachineTemplatesOperations:
        return VirtualMachineTemplatesOperations(self.config)

    def availability_sets(self) -> AvailabilitySetsOperations:
        return AvailabilitySetsOperations(self.config)

    def inventory_items(self) -> InventoryItemsOperations:
        return InventoryItemsOperations(self.config)

    def virtual_machine_instances(self) -> VirtualMachineInstancesOperations:
        return VirtualMachineInstancesOperations(self.config)

    def guest_agents(self) -> GuestAgentsOperations:
        return GuestAgentsOperations(self.config)

    def vm_instance_hybrid_identity_metadatas(
        self,
    ) -> VmInstanceHybridIdentityMetadatasOperations:
        return VmInstanceHybridIdentityMetadatasOperations(self.config)

    def operations(self) -> OperationsOperations:
        return OperationsOperations(self.config)
