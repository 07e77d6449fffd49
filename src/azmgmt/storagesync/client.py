from __future__ import annotations

from azmgmt.core.client import OperationGroup, ServiceClient
from azmgmt.core.operation import PageableRequestBuilder, RequestBuilder
from azmgmt.core.rest_api import quote_path

from .models import (
    BackupRequest,
    CheckNameAvailabilityParameters,
    CheckNameAvailabilityResult,
    CloudEndpoint,
    CloudEndpointArray,
    CloudEndpointCreateParameters,
    LocationOperationStatus,
    OperationEntityListResult,
    OperationStatus,
    PostBackupResponse,
    PostRestoreRequest,
    PreRestoreRequest,
    PrivateEndpointConnection,
    PrivateEndpointConnectionListResult,
    PrivateLinkResourceListResult,
    RecallActionParameters,
    RegisteredServer,
    RegisteredServerArray,
    RegisteredServerCreateParameters,
    ServerEndpoint,
    ServerEndpointArray,
    ServerEndpointCreateParameters,
    ServerEndpointUpdateParameters,
    StorageSyncService,
    StorageSyncServiceArray,
    StorageSyncServiceCreateParameters,
    StorageSyncServiceUpdateParameters,
    SyncGroup,
    SyncGroupArray,
    SyncGroupCreateParameters,
    TriggerChangeDetectionParameters,
    TriggerRolloverRequest,
    Workflow,
    WorkflowArray,
)

API_VERSION = "2020-03-01"

_PROVIDER = "providers/Microsoft.StorageSync"


def _resource_group_path(subscription_id: str, resource_group_name: str) -> str:
    return (
        f"subscriptions/{quote_path(subscription_id)}"
        f"/resourceGroups/{quote_path(resource_group_name)}/{_PROVIDER}"
    )


def _service_path(
    subscription_id: str, resource_group_name: str, storage_sync_service_name: str
) -> str:
    return (
        f"{_resource_group_path(subscription_id, resource_group_name)}"
        f"/storageSyncServices/{quote_path(storage_sync_service_name)}"
    )


def _sync_group_path(
    subscription_id: str,
    resource_group_name: str,
    storage_sync_service_name: str,
    sync_group_name: str,
) -> str:
    return (
        _service_path(subscription_id, resource_group_name, storage_sync_service_name)
        + f"/syncGroups/{quote_path(sync_group_name)}"
    )


class OperationsOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list(self) -> PageableRequestBuilder:
        return self._pageable(
            "GET", f"{_PROVIDER}/operations", OperationEntityListResult
        )


class StorageSyncServicesOperations(OperationGroup):
    API_VERSION = API_VERSION

    def check_name_availability(
        self,
        location_name: str,
        subscription_id: str,
        parameters: CheckNameAvailabilityParameters,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            f"subscriptions/{quote_path(subscription_id)}/{_PROVIDER}"
            f"/locations/{quote_path(location_name)}/checkNameAvailability",
            {200: CheckNameAvailabilityResult},
            body=parameters,
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        parameters: StorageSyncServiceCreateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            ),
            {200: StorageSyncService, 202: None},
            body=parameters,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            ),
            {200: StorageSyncService},
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        parameters: StorageSyncServiceUpdateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            ),
            {200: StorageSyncService, 202: None},
            body=parameters,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            ),
            {200: None, 202: None, 204: None},
        )

    def list_by_resource_group(
        self, subscription_id: str, resource_group_name: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            f"{_resource_group_path(subscription_id, resource_group_name)}"
            "/storageSyncServices",
            {200: StorageSyncServiceArray},
        )

    def list_by_subscription(self, subscription_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            f"subscriptions/{quote_path(subscription_id)}/{_PROVIDER}"
            "/storageSyncServices",
            {200: StorageSyncServiceArray},
        )


class SyncGroupsOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list_by_storage_sync_service(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + "/syncGroups",
            {200: SyncGroupArray},
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        parameters: SyncGroupCreateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            ),
            {200: SyncGroup},
            body=parameters,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            ),
            {200: SyncGroup},
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            ),
            {200: None, 204: None},
        )


class CloudEndpointsOperations(OperationGroup):
    API_VERSION = API_VERSION

    @staticmethod
    def _path(
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        action: str = "",
    ) -> str:
        path = (
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            )
            + f"/cloudEndpoints/{quote_path(cloud_endpoint_name)}"
        )
        if action:
            path = f"{path}/{action}"
        return path

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        parameters: CloudEndpointCreateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
            ),
            {200: CloudEndpoint, 202: None},
            body=parameters,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
            ),
            {200: CloudEndpoint},
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
            ),
            {200: None, 202: None, 204: None},
        )

    def list_by_sync_group(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            )
            + "/cloudEndpoints",
            {200: CloudEndpointArray},
        )

    def pre_backup(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        parameters: BackupRequest,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
                "prebackup",
            ),
            {200: None, 202: None},
            body=parameters,
        )

    def post_backup(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        parameters: BackupRequest,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
                "postbackup",
            ),
            {200: PostBackupResponse, 202: None},
            body=parameters,
        )

    def pre_restore(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        parameters: PreRestoreRequest,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
                "prerestore",
            ),
            {200: None, 202: None},
            body=parameters,
        )

    def post_restore(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        parameters: PostRestoreRequest,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
                "postrestore",
            ),
            {200: None, 202: None},
            body=parameters,
        )

    def trigger_change_detection(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        cloud_endpoint_name: str,
        parameters: TriggerChangeDetectionParameters,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                cloud_endpoint_name,
                "triggerChangeDetection",
            ),
            {200: None, 202: None},
            body=parameters,
        )


class ServerEndpointsOperations(OperationGroup):
    API_VERSION = API_VERSION

    @staticmethod
    def _path(
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        server_endpoint_name: str,
        action: str = "",
    ) -> str:
        path = (
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            )
            + f"/serverEndpoints/{quote_path(server_endpoint_name)}"
        )
        if action:
            path = f"{path}/{action}"
        return path

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        server_endpoint_name: str,
        parameters: ServerEndpointCreateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                server_endpoint_name,
            ),
            {200: ServerEndpoint, 202: None},
            body=parameters,
        )

    def update(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        server_endpoint_name: str,
        parameters: ServerEndpointUpdateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                server_endpoint_name,
            ),
            {200: ServerEndpoint, 202: None},
            body=parameters,
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        server_endpoint_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                server_endpoint_name,
            ),
            {200: ServerEndpoint},
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        server_endpoint_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                server_endpoint_name,
            ),
            {200: None, 202: None, 204: None},
        )

    def list_by_sync_group(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _sync_group_path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
            )
            + "/serverEndpoints",
            {200: ServerEndpointArray},
        )

    def recall_action(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        sync_group_name: str,
        server_endpoint_name: str,
        parameters: RecallActionParameters,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                sync_group_name,
                server_endpoint_name,
                "recallAction",
            ),
            {200: None, 202: None},
            body=parameters,
        )


class RegisteredServersOperations(OperationGroup):
    API_VERSION = API_VERSION

    @staticmethod
    def _path(
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        server_id: str,
        action: str = "",
    ) -> str:
        path = (
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + f"/registeredServers/{quote_path(server_id)}"
        )
        if action:
            path = f"{path}/{action}"
        return path

    def list_by_storage_sync_service(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + "/registeredServers",
            {200: RegisteredServerArray},
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        server_id: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                server_id,
            ),
            {200: RegisteredServer},
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        server_id: str,
        parameters: RegisteredServerCreateParameters,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                server_id,
            ),
            {200: RegisteredServer, 202: None},
            body=parameters,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        server_id: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                server_id,
            ),
            {200: None, 202: None, 204: None},
        )

    def trigger_rollover(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        server_id: str,
        parameters: TriggerRolloverRequest,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                server_id,
                "triggerRollover",
            ),
            {200: None, 202: None},
            body=parameters,
        )


class WorkflowsOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list_by_storage_sync_service(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + "/workflows",
            {200: WorkflowArray},
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        workflow_id: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + f"/workflows/{quote_path(workflow_id)}",
            {200: Workflow},
        )

    def abort(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        workflow_id: str,
    ) -> RequestBuilder:
        return self._request(
            "POST",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + f"/workflows/{quote_path(workflow_id)}/abort",
            {200: None},
            headers={"Content-Length": "0"},
        )


class PrivateEndpointConnectionsOperations(OperationGroup):
    API_VERSION = API_VERSION

    @staticmethod
    def _path(
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        private_endpoint_connection_name: str,
    ) -> str:
        return (
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + "/privateEndpointConnections/"
            + quote_path(private_endpoint_connection_name)
        )

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        private_endpoint_connection_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                private_endpoint_connection_name,
            ),
            {200: PrivateEndpointConnection},
        )

    def create(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        private_endpoint_connection_name: str,
        properties: PrivateEndpointConnection,
    ) -> RequestBuilder:
        return self._request(
            "PUT",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                private_endpoint_connection_name,
            ),
            {200: PrivateEndpointConnection, 202: None},
            body=properties,
        )

    def delete(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
        private_endpoint_connection_name: str,
    ) -> RequestBuilder:
        return self._request(
            "DELETE",
            self._path(
                subscription_id,
                resource_group_name,
                storage_sync_service_name,
                private_endpoint_connection_name,
            ),
            {200: None, 202: None, 204: None},
        )

    def list_by_storage_sync_service(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + "/privateEndpointConnections",
            {200: PrivateEndpointConnectionListResult},
        )


class PrivateLinkResourcesOperations(OperationGroup):
    API_VERSION = API_VERSION

    def list_by_storage_sync_service(
        self,
        subscription_id: str,
        resource_group_name: str,
        storage_sync_service_name: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _service_path(
                subscription_id, resource_group_name, storage_sync_service_name
            )
            + "/privateLinkResources",
            {200: PrivateLinkResourceListResult},
        )


class OperationStatusOperations(OperationGroup):
    API_VERSION = API_VERSION

    def get(
        self,
        subscription_id: str,
        resource_group_name: str,
        location_name: str,
        workflow_id: str,
        operation_id: str,
    ) -> RequestBuilder:
        return self._request(
            "GET",
            f"{_resource_group_path(subscription_id, resource_group_name)}"
            f"/locations/{quote_path(location_name)}"
            f"/workflows/{quote_path(workflow_id)}"
            f"/operations/{quote_path(operation_id)}",
            {200: OperationStatus},
        )

    def get_by_location(
        self, subscription_id: str, location_name: str, operation_id: str
    ) -> RequestBuilder:
        """Status of an operation that isn't tied to a workflow, e.g. a move"""
        return self._request(
            "GET",
            f"subscriptions/{quote_path(subscription_id)}/{_PROVIDER}"
            f"/locations/{quote_path(location_name)}"
            f"/operations/{quote_path(operation_id)}",
            {200: LocationOperationStatus},
        )


class StorageSyncClient(ServiceClient):
    """
    Azure File Sync. Most list operations here return the whole collection in one
    response rather than being paged.
    """

    API_VERSION = API_VERSION

    def operations(self) -> OperationsOperations:
        return OperationsOperations(self.config)

    def storage_sync_services(self) -> StorageSyncServicesOperations:
        return StorageSyncServicesOperations(self.config)

    def sync_groups(self) -> SyncGroupsOperations:
        return SyncGroupsOperations(self.config)

    def cloud_endpoints(self) -> CloudEndpointsOperations:
        return CloudEndpointsOperations(self.config)

    def server_endpoints(self) -> ServerEndpointsOperations:
        return ServerEndpointsOperations(self.config)

    def registered_servers(self) -> RegisteredServersOperations:
        return RegisteredServersOperations(self.config)

    def workflows(self) -> WorkflowsOperations:
        return WorkflowsOperations(self.config)

    def private_endpoint_connections(self) -> PrivateEndpointConnectionsOperations:
        return PrivateEndpointConnectionsOperations(self.config)

    def private_link_resources(self) -> PrivateLinkResourcesOperations:
        return PrivateLinkResourcesOperations(self.config)

    def operation_status(self) -> OperationStatusOperations:
        return OperationStatusOperations(self.config)
