"""
Request and response bodies for Microsoft.StorageSync (Azure File Sync). Many status
fields (provisioningState, backupEnabled, ...) are documented as free-form strings and
are kept as str here.
"""

from __future__ import annotations

import datetime
import enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from azmgmt.core.models import (
    AzureModel,
    OpenEnum,
    ProxyResource,
    Resource,
    TrackedResource,
    flattened,
)


class FeatureStatus(str, enum.Enum):
    ON = "on"
    OFF = "off"


class IncomingTrafficPolicy(str, enum.Enum):
    ALLOW_ALL_TRAFFIC = "AllowAllTraffic"
    ALLOW_VIRTUAL_NETWORKS_ONLY = "AllowVirtualNetworksOnly"


class InitialDownloadPolicy(str, enum.Enum):
    NAMESPACE_ONLY = "NamespaceOnly"
    NAMESPACE_THEN_MODIFIED_FILES = "NamespaceThenModifiedFiles"
    AVOID_TIERED_FILES = "AvoidTieredFiles"


class LocalCacheMode(str, enum.Enum):
    DOWNLOAD_NEW_AND_MODIFIED_FILES = "DownloadNewAndModifiedFiles"
    UPDATE_LOCALLY_CACHED_FILES = "UpdateLocallyCachedFiles"


class OperationDirection(str, enum.Enum):
    DO = "do"
    UNDO = "undo"
    CANCEL = "cancel"


class NameAvailabilityReason(str, enum.Enum):
    INVALID = "Invalid"
    ALREADY_EXISTS = "AlreadyExists"


class PrivateEndpointConnectionProvisioningState(str, enum.Enum):
    SUCCEEDED = "Succeeded"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"


class PrivateEndpointServiceConnectionStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class RegisteredServerAgentVersionStatus(str, enum.Enum):
    OK = "Ok"
    NEAR_EXPIRY = "NearExpiry"
    EXPIRED = "Expired"
    BLOCKED = "Blocked"


class ServerEndpointCloudTieringHealthState(str, enum.Enum):
    HEALTHY = "Healthy"
    ERROR = "Error"


class ServerEndpointOfflineDataTransferState(str, enum.Enum):
    IN_PROGRESS = "InProgress"
    STOPPING = "Stopping"
    NOT_RUNNING = "NotRunning"
    COMPLETE = "Complete"


class ServerEndpointSyncActivityState(str, enum.Enum):
    UPLOAD = "Upload"
    DOWNLOAD = "Download"
    UPLOAD_AND_DOWNLOAD = "UploadAndDownload"


class ServerEndpointSyncHealthState(str, enum.Enum):
    HEALTHY = "Healthy"
    ERROR = "Error"
    SYNC_BLOCKED_FOR_RESTORE = "SyncBlockedForRestore"
    SYNC_BLOCKED_FOR_CHANGE_DETECTION_POST_RESTORE = (
        "SyncBlockedForChangeDetectionPostRestore"
    )
    NO_ACTIVITY = "NoActivity"


class ServerEndpointSyncMode(str, enum.Enum):
    REGULAR = "Regular"
    NAMESPACE_DOWNLOAD = "NamespaceDownload"
    INITIAL_UPLOAD = "InitialUpload"
    SNAPSHOT_UPLOAD = "SnapshotUpload"
    INITIAL_FULL_DOWNLOAD = "InitialFullDownload"


class ChangeDetectionMode(str, enum.Enum):
    DEFAULT = "Default"
    RECURSIVE = "Recursive"


class WorkflowStatus(str, enum.Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    SUCCEEDED = "succeeded"
    ABORTED = "aborted"
    FAILED = "failed"


# errors and operation status


class StorageSyncErrorDetails(AzureModel):
    code: Optional[str] = None
    message: Optional[str] = None
    target: Optional[str] = None
    request_uri: Optional[str] = Field(None, alias="requestUri")
    exception_type: Optional[str] = Field(None, alias="exceptionType")
    http_method: Optional[str] = Field(None, alias="httpMethod")
    hashed_message: Optional[str] = Field(None, alias="hashedMessage")
    http_error_code: Optional[str] = Field(None, alias="httpErrorCode")


class StorageSyncInnerErrorDetails(AzureModel):
    call_stack: Optional[str] = Field(None, alias="callStack")
    message: Optional[str] = None
    inner_exception: Optional[str] = Field(None, alias="innerException")
    inner_exception_call_stack: Optional[str] = Field(
        None, alias="innerExceptionCallStack"
    )


class StorageSyncApiError(AzureModel):
    code: Optional[str] = None
    message: Optional[str] = None
    target: Optional[str] = None
    details: Optional[StorageSyncErrorDetails] = None
    innererror: Optional[StorageSyncInnerErrorDetails] = None


class StorageSyncError(AzureModel):
    error: Optional[StorageSyncApiError] = None
    innererror: Optional[StorageSyncApiError] = None


class OperationStatus(AzureModel):
    name: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[datetime.datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime.datetime] = Field(None, alias="endTime")
    error: Optional[StorageSyncApiError] = None


class LocationOperationStatus(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[str] = None
    start_time: Optional[datetime.datetime] = Field(None, alias="startTime")
    end_time: Optional[datetime.datetime] = Field(None, alias="endTime")
    error: Optional[StorageSyncApiError] = None
    percent_complete: Optional[int] = Field(None, alias="percentComplete")


# operations, storage sync has its own richer shape for these


class OperationDisplayInfo(AzureModel):
    description: Optional[str] = None
    operation: Optional[str] = None
    provider: Optional[str] = None
    resource: Optional[str] = None


class OperationResourceMetricSpecificationDimension(AzureModel):
    name: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    to_be_exported_for_shoebox: Optional[bool] = Field(
        None, alias="toBeExportedForShoebox"
    )


class OperationResourceMetricSpecification(AzureModel):
    name: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    display_description: Optional[str] = Field(None, alias="displayDescription")
    unit: Optional[str] = None
    aggregation_type: Optional[str] = Field(None, alias="aggregationType")
    supported_aggregation_types: Optional[List[str]] = Field(
        None, alias="supportedAggregationTypes"
    )
    fill_gap_with_zero: Optional[bool] = Field(None, alias="fillGapWithZero")
    dimensions: Optional[List[OperationResourceMetricSpecificationDimension]] = None


class OperationResourceServiceSpecification(AzureModel):
    metric_specifications: Optional[List[OperationResourceMetricSpecification]] = (
        Field(None, alias="metricSpecifications")
    )


class OperationProperties(AzureModel):
    service_specification: Optional[OperationResourceServiceSpecification] = Field(
        None, alias="serviceSpecification"
    )


class OperationEntity(AzureModel):
    name: Optional[str] = None
    display: Optional[OperationDisplayInfo] = None
    origin: Optional[str] = None
    properties: Optional[OperationProperties] = None


class OperationEntityListResult(AzureModel):
    next_link: Optional[str] = Field(None, alias="nextLink")
    value: Optional[List[OperationEntity]] = None


# storage sync services


class CheckNameAvailabilityParameters(AzureModel):
    name: str
    type_: str = Field("Microsoft.StorageSync/storageSyncServices", alias="type")


class CheckNameAvailabilityResult(AzureModel):
    name_available: Optional[bool] = Field(None, alias="nameAvailable")
    reason: Optional[OpenEnum[NameAvailabilityReason]] = None
    message: Optional[str] = None


class PrivateEndpoint(AzureModel):
    id: Optional[str] = None


class PrivateLinkServiceConnectionState(AzureModel):
    status: Optional[OpenEnum[PrivateEndpointServiceConnectionStatus]] = None
    description: Optional[str] = None
    actions_required: Optional[str] = Field(None, alias="actionsRequired")


class PrivateEndpointConnectionProperties(AzureModel):
    private_endpoint: Optional[PrivateEndpoint] = Field(None, alias="privateEndpoint")
    private_link_service_connection_state: PrivateLinkServiceConnectionState = Field(
        alias="privateLinkServiceConnectionState"
    )
    provisioning_state: Optional[
        OpenEnum[PrivateEndpointConnectionProvisioningState]
    ] = Field(None, alias="provisioningState")


class PrivateEndpointConnection(AzureModel):
    resource: Resource = flattened(Resource)
    properties: Optional[PrivateEndpointConnectionProperties] = None


class PrivateEndpointConnectionListResult(AzureModel):
    value: Optional[List[PrivateEndpointConnection]] = None


class PrivateLinkResourceProperties(AzureModel):
    group_id: Optional[str] = Field(None, alias="groupId")
    required_members: Optional[List[str]] = Field(None, alias="requiredMembers")
    required_zone_names: Optional[List[str]] = Field(None, alias="requiredZoneNames")


class PrivateLinkResource(AzureModel):
    resource: Resource = flattened(Resource)
    properties: Optional[PrivateLinkResourceProperties] = None


class PrivateLinkResourceListResult(AzureModel):
    value: Optional[List[PrivateLinkResource]] = None


class StorageSyncServiceProperties(AzureModel):
    incoming_traffic_policy: Optional[OpenEnum[IncomingTrafficPolicy]] = Field(
        None, alias="incomingTrafficPolicy"
    )
    storage_sync_service_status: Optional[int] = Field(
        None, alias="storageSyncServiceStatus"
    )
    storage_sync_service_uid: Optional[str] = Field(
        None, alias="storageSyncServiceUid"
    )
    provisioning_state: Optional[str] = Field(None, alias="provisioningState")
    last_workflow_id: Optional[str] = Field(None, alias="lastWorkflowId")
    last_operation_name: Optional[str] = Field(None, alias="lastOperationName")
    private_endpoint_connections: Optional[List[PrivateEndpointConnection]] = Field(
        None, alias="privateEndpointConnections"
    )


class StorageSyncService(AzureModel):
    tracked_resource: TrackedResource = flattened(TrackedResource)
    properties: Optional[StorageSyncServiceProperties] = None


class StorageSyncServiceArray(AzureModel):
    value: Optional[List[StorageSyncService]] = None


class StorageSyncServiceCreateParametersProperties(AzureModel):
    incoming_traffic_policy: Optional[OpenEnum[IncomingTrafficPolicy]] = Field(
        None, alias="incomingTrafficPolicy"
    )


class StorageSyncServiceCreateParameters(AzureModel):
    location: str
    tags: Optional[Dict[str, Any]] = None
    properties: Optional[StorageSyncServiceCreateParametersProperties] = None


class StorageSyncServiceUpdateProperties(AzureModel):
    incoming_traffic_policy: Optional[OpenEnum[IncomingTrafficPolicy]] = Field(
        None, alias="incomingTrafficPolicy"
    )


class StorageSyncServiceUpdateParameters(AzureModel):
    tags: Optional[Dict[str, Any]] = None
    properties: Optional[StorageSyncServiceUpdateProperties] = None


# sync groups


class SyncGroupProperties(AzureModel):
    unique_id: Optional[str] = Field(None, alias="uniqueId")
    sync_group_status: Optional[str] = Field(None, alias="syncGroupStatus")


class SyncGroup(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[SyncGroupProperties] = None


class SyncGroupArray(AzureModel):
    value: Optional[List[SyncGroup]] = None


class SyncGroupCreateParameters(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    # the service accepts an empty object here
    properties: Optional[Dict[str, Any]] = None


# cloud endpoints


class CloudEndpointProperties(AzureModel):
    storage_account_resource_id: Optional[str] = Field(
        None, alias="storageAccountResourceId"
    )
    azure_file_share_name: Optional[str] = Field(None, alias="azureFileShareName")
    storage_account_tenant_id: Optional[str] = Field(
        None, alias="storageAccountTenantId"
    )
    partnership_id: Optional[str] = Field(None, alias="partnershipId")
    friendly_name: Optional[str] = Field(None, alias="friendlyName")
    backup_enabled: Optional[str] = Field(None, alias="backupEnabled")
    provisioning_state: Optional[str] = Field(None, alias="provisioningState")
    last_workflow_id: Optional[str] = Field(None, alias="lastWorkflowId")
    last_operation_name: Optional[str] = Field(None, alias="lastOperationName")


class CloudEndpoint(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[CloudEndpointProperties] = None


class CloudEndpointArray(AzureModel):
    value: Optional[List[CloudEndpoint]] = None


class CloudEndpointCreateParametersProperties(AzureModel):
    storage_account_resource_id: Optional[str] = Field(
        None, alias="storageAccountResourceId"
    )
    azure_file_share_name: Optional[str] = Field(None, alias="azureFileShareName")
    storage_account_tenant_id: Optional[str] = Field(
        None, alias="storageAccountTenantId"
    )
    friendly_name: Optional[str] = Field(None, alias="friendlyName")


class CloudEndpointCreateParameters(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[CloudEndpointCreateParametersProperties] = None


class BackupRequest(AzureModel):
    azure_file_share: Optional[str] = Field(None, alias="azureFileShare")


class PostBackupResponseProperties(AzureModel):
    cloud_endpoint_name: Optional[str] = Field(None, alias="cloudEndpointName")


class PostBackupResponse(AzureModel):
    backup_metadata: Optional[PostBackupResponseProperties] = Field(
        None, alias="backupMetadata"
    )


class RestoreFileSpec(AzureModel):
    path: Optional[str] = None
    isdir: Optional[bool] = None


class PreRestoreRequest(AzureModel):
    partition: Optional[str] = None
    replica_group: Optional[str] = Field(None, alias="replicaGroup")
    request_id: Optional[str] = Field(None, alias="requestId")
    azure_file_share_uri: Optional[str] = Field(None, alias="azureFileShareUri")
    status: Optional[str] = None
    source_azure_file_share_uri: Optional[str] = Field(
        None, alias="sourceAzureFileShareUri"
    )
    backup_metadata_property_bag: Optional[str] = Field(
        None, alias="backupMetadataPropertyBag"
    )
    restore_file_spec: Optional[List[RestoreFileSpec]] = Field(
        None, alias="restoreFileSpec"
    )
    pause_wait_for_sync_drain_time_period_in_seconds: Optional[int] = Field(
        None, alias="pauseWaitForSyncDrainTimePeriodInSeconds"
    )


class PostRestoreRequest(AzureModel):
    partition: Optional[str] = None
    replica_group: Optional[str] = Field(None, alias="replicaGroup")
    request_id: Optional[str] = Field(None, alias="requestId")
    azure_file_share_uri: Optional[str] = Field(None, alias="azureFileShareUri")
    status: Optional[str] = None
    source_azure_file_share_uri: Optional[str] = Field(
        None, alias="sourceAzureFileShareUri"
    )
    failed_file_list: Optional[str] = Field(None, alias="failedFileList")
    restore_file_spec: Optional[List[RestoreFileSpec]] = Field(
        None, alias="restoreFileSpec"
    )


class TriggerChangeDetectionParameters(AzureModel):
    directory_path: Optional[str] = Field(None, alias="directoryPath")
    change_detection_mode: Optional[OpenEnum[ChangeDetectionMode]] = Field(
        None, alias="changeDetectionMode"
    )
    paths: Optional[List[str]] = None


# server endpoints


class CloudTieringCachePerformance(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    cache_hit_bytes: Optional[int] = Field(None, alias="cacheHitBytes")
    cache_miss_bytes: Optional[int] = Field(None, alias="cacheMissBytes")
    cache_hit_bytes_percent: Optional[int] = Field(None, alias="cacheHitBytesPercent")


class CloudTieringDatePolicyStatus(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    tiered_files_most_recent_access_timestamp: Optional[datetime.datetime] = Field(
        None, alias="tieredFilesMostRecentAccessTimestamp"
    )


class FilesNotTieringError(AzureModel):
    error_code: Optional[int] = Field(None, alias="errorCode")
    file_count: Optional[int] = Field(None, alias="fileCount")


class CloudTieringFilesNotTiering(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    total_file_count: Optional[int] = Field(None, alias="totalFileCount")
    errors: Optional[List[FilesNotTieringError]] = None


class CloudTieringSpaceSavings(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    volume_size_bytes: Optional[int] = Field(None, alias="volumeSizeBytes")
    total_size_cloud_bytes: Optional[int] = Field(None, alias="totalSizeCloudBytes")
    cached_size_bytes: Optional[int] = Field(None, alias="cachedSizeBytes")
    space_savings_percent: Optional[int] = Field(None, alias="spaceSavingsPercent")
    space_savings_bytes: Optional[int] = Field(None, alias="spaceSavingsBytes")


class CloudTieringVolumeFreeSpacePolicyStatus(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    effective_volume_free_space_policy: Optional[int] = Field(
        None, alias="effectiveVolumeFreeSpacePolicy"
    )
    current_volume_free_space_percent: Optional[int] = Field(
        None, alias="currentVolumeFreeSpacePercent"
    )


class ServerEndpointCloudTieringStatus(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    health: Optional[OpenEnum[ServerEndpointCloudTieringHealthState]] = None
    health_last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="healthLastUpdatedTimestamp"
    )
    last_cloud_tiering_result: Optional[int] = Field(
        None, alias="lastCloudTieringResult"
    )
    last_success_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastSuccessTimestamp"
    )
    space_savings: Optional[CloudTieringSpaceSavings] = Field(
        None, alias="spaceSavings"
    )
    cache_performance: Optional[CloudTieringCachePerformance] = Field(
        None, alias="cachePerformance"
    )
    files_not_tiering: Optional[CloudTieringFilesNotTiering] = Field(
        None, alias="filesNotTiering"
    )
    volume_free_space_policy_status: Optional[
        CloudTieringVolumeFreeSpacePolicyStatus
    ] = Field(None, alias="volumeFreeSpacePolicyStatus")
    date_policy_status: Optional[CloudTieringDatePolicyStatus] = Field(
        None, alias="datePolicyStatus"
    )


class ServerEndpointRecallError(AzureModel):
    error_code: Optional[int] = Field(None, alias="errorCode")
    count: Optional[int] = None


class ServerEndpointRecallStatus(AzureModel):
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    total_recall_errors_count: Optional[int] = Field(
        None, alias="totalRecallErrorsCount"
    )
    recall_errors: Optional[List[ServerEndpointRecallError]] = Field(
        None, alias="recallErrors"
    )


class ServerEndpointFilesNotSyncingError(AzureModel):
    error_code: Optional[int] = Field(None, alias="errorCode")
    persistent_count: Optional[int] = Field(None, alias="persistentCount")
    transient_count: Optional[int] = Field(None, alias="transientCount")


class ServerEndpointSyncSessionStatus(AzureModel):
    last_sync_result: Optional[int] = Field(None, alias="lastSyncResult")
    last_sync_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastSyncTimestamp"
    )
    last_sync_success_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastSyncSuccessTimestamp"
    )
    last_sync_per_item_error_count: Optional[int] = Field(
        None, alias="lastSyncPerItemErrorCount"
    )
    persistent_files_not_syncing_count: Optional[int] = Field(
        None, alias="persistentFilesNotSyncingCount"
    )
    transient_files_not_syncing_count: Optional[int] = Field(
        None, alias="transientFilesNotSyncingCount"
    )
    files_not_syncing_errors: Optional[List[ServerEndpointFilesNotSyncingError]] = (
        Field(None, alias="filesNotSyncingErrors")
    )
    last_sync_mode: Optional[OpenEnum[ServerEndpointSyncMode]] = Field(
        None, alias="lastSyncMode"
    )


class ServerEndpointSyncActivityStatus(AzureModel):
    timestamp: Optional[datetime.datetime] = None
    per_item_error_count: Optional[int] = Field(None, alias="perItemErrorCount")
    applied_item_count: Optional[int] = Field(None, alias="appliedItemCount")
    total_item_count: Optional[int] = Field(None, alias="totalItemCount")
    applied_bytes: Optional[int] = Field(None, alias="appliedBytes")
    total_bytes: Optional[int] = Field(None, alias="totalBytes")
    sync_mode: Optional[OpenEnum[ServerEndpointSyncMode]] = Field(
        None, alias="syncMode"
    )


class ServerEndpointSyncStatus(AzureModel):
    download_health: Optional[OpenEnum[ServerEndpointSyncHealthState]] = Field(
        None, alias="downloadHealth"
    )
    upload_health: Optional[OpenEnum[ServerEndpointSyncHealthState]] = Field(
        None, alias="uploadHealth"
    )
    combined_health: Optional[OpenEnum[ServerEndpointSyncHealthState]] = Field(
        None, alias="combinedHealth"
    )
    sync_activity: Optional[OpenEnum[ServerEndpointSyncActivityState]] = Field(
        None, alias="syncActivity"
    )
    total_persistent_files_not_syncing_count: Optional[int] = Field(
        None, alias="totalPersistentFilesNotSyncingCount"
    )
    last_updated_timestamp: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTimestamp"
    )
    upload_status: Optional[ServerEndpointSyncSessionStatus] = Field(
        None, alias="uploadStatus"
    )
    download_status: Optional[ServerEndpointSyncSessionStatus] = Field(
        None, alias="downloadStatus"
    )
    upload_activity: Optional[ServerEndpointSyncActivityStatus] = Field(
        None, alias="uploadActivity"
    )
    download_activity: Optional[ServerEndpointSyncActivityStatus] = Field(
        None, alias="downloadActivity"
    )
    offline_data_transfer_status: Optional[
        OpenEnum[ServerEndpointOfflineDataTransferState]
    ] = Field(None, alias="offlineDataTransferStatus")


class ServerEndpointProperties(AzureModel):
    server_local_path: Optional[str] = Field(None, alias="serverLocalPath")
    cloud_tiering: Optional[OpenEnum[FeatureStatus]] = Field(
        None, alias="cloudTiering"
    )
    volume_free_space_percent: Optional[int] = Field(
        None, alias="volumeFreeSpacePercent"
    )
    tier_files_older_than_days: Optional[int] = Field(
        None, alias="tierFilesOlderThanDays"
    )
    friendly_name: Optional[str] = Field(None, alias="friendlyName")
    server_resource_id: Optional[str] = Field(None, alias="serverResourceId")
    provisioning_state: Optional[str] = Field(None, alias="provisioningState")
    last_workflow_id: Optional[str] = Field(None, alias="lastWorkflowId")
    last_operation_name: Optional[str] = Field(None, alias="lastOperationName")
    sync_status: Optional[ServerEndpointSyncStatus] = Field(None, alias="syncStatus")
    offline_data_transfer: Optional[OpenEnum[FeatureStatus]] = Field(
        None, alias="offlineDataTransfer"
    )
    offline_data_transfer_storage_account_resource_id: Optional[str] = Field(
        None, alias="offlineDataTransferStorageAccountResourceId"
    )
    offline_data_transfer_storage_account_tenant_id: Optional[str] = Field(
        None, alias="offlineDataTransferStorageAccountTenantId"
    )
    offline_data_transfer_share_name: Optional[str] = Field(
        None, alias="offlineDataTransferShareName"
    )
    cloud_tiering_status: Optional[ServerEndpointCloudTieringStatus] = Field(
        None, alias="cloudTieringStatus"
    )
    recall_status: Optional[ServerEndpointRecallStatus] = Field(
        None, alias="recallStatus"
    )
    initial_download_policy: Optional[OpenEnum[InitialDownloadPolicy]] = Field(
        None, alias="initialDownloadPolicy"
    )
    local_cache_mode: Optional[OpenEnum[LocalCacheMode]] = Field(
        None, alias="localCacheMode"
    )


class ServerEndpoint(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[ServerEndpointProperties] = None


class ServerEndpointArray(AzureModel):
    value: Optional[List[ServerEndpoint]] = None


class ServerEndpointCreateParametersProperties(AzureModel):
    server_local_path: Optional[str] = Field(None, alias="serverLocalPath")
    cloud_tiering: Optional[OpenEnum[FeatureStatus]] = Field(
        None, alias="cloudTiering"
    )
    volume_free_space_percent: Optional[int] = Field(
        None, alias="volumeFreeSpacePercent"
    )
    tier_files_older_than_days: Optional[int] = Field(
        None, alias="tierFilesOlderThanDays"
    )
    friendly_name: Optional[str] = Field(None, alias="friendlyName")
    server_resource_id: Optional[str] = Field(None, alias="serverResourceId")
    offline_data_transfer: Optional[OpenEnum[FeatureStatus]] = Field(
        None, alias="offlineDataTransfer"
    )
    offline_data_transfer_share_name: Optional[str] = Field(
        None, alias="offlineDataTransferShareName"
    )
    initial_download_policy: Optional[OpenEnum[InitialDownloadPolicy]] = Field(
        None, alias="initialDownloadPolicy"
    )
    local_cache_mode: Optional[OpenEnum[LocalCacheMode]] = Field(
        None, alias="localCacheMode"
    )


class ServerEndpointCreateParameters(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[ServerEndpointCreateParametersProperties] = None


class ServerEndpointUpdateProperties(AzureModel):
    cloud_tiering: Optional[OpenEnum[FeatureStatus]] = Field(
        None, alias="cloudTiering"
    )
    volume_free_space_percent: Optional[int] = Field(
        None, alias="volumeFreeSpacePercent"
    )
    tier_files_older_than_days: Optional[int] = Field(
        None, alias="tierFilesOlderThanDays"
    )
    offline_data_transfer: Optional[OpenEnum[FeatureStatus]] = Field(
        None, alias="offlineDataTransfer"
    )
    offline_data_transfer_share_name: Optional[str] = Field(
        None, alias="offlineDataTransferShareName"
    )
    local_cache_mode: Optional[OpenEnum[LocalCacheMode]] = Field(
        None, alias="localCacheMode"
    )


class ServerEndpointUpdateParameters(AzureModel):
    properties: Optional[ServerEndpointUpdateProperties] = None


class RecallActionParameters(AzureModel):
    pattern: Optional[str] = None
    recall_path: Optional[str] = Field(None, alias="recallPath")


# registered servers


class RegisteredServerProperties(AzureModel):
    server_certificate: Optional[str] = Field(None, alias="serverCertificate")
    agent_version: Optional[str] = Field(None, alias="agentVersion")
    agent_version_status: Optional[OpenEnum[RegisteredServerAgentVersionStatus]] = (
        Field(None, alias="agentVersionStatus")
    )
    agent_version_expiration_date: Optional[datetime.datetime] = Field(
        None, alias="agentVersionExpirationDate"
    )
    server_os_version: Optional[str] = Field(None, alias="serverOSVersion")
    server_management_error_code: Optional[int] = Field(
        None, alias="serverManagementErrorCode"
    )
    last_heart_beat: Optional[str] = Field(None, alias="lastHeartBeat")
    provisioning_state: Optional[str] = Field(None, alias="provisioningState")
    server_role: Optional[str] = Field(None, alias="serverRole")
    cluster_id: Optional[str] = Field(None, alias="clusterId")
    cluster_name: Optional[str] = Field(None, alias="clusterName")
    server_id: Optional[str] = Field(None, alias="serverId")
    storage_sync_service_uid: Optional[str] = Field(
        None, alias="storageSyncServiceUid"
    )
    last_workflow_id: Optional[str] = Field(None, alias="lastWorkflowId")
    last_operation_name: Optional[str] = Field(None, alias="lastOperationName")
    discovery_endpoint_uri: Optional[str] = Field(None, alias="discoveryEndpointUri")
    resource_location: Optional[str] = Field(None, alias="resourceLocation")
    service_location: Optional[str] = Field(None, alias="serviceLocation")
    friendly_name: Optional[str] = Field(None, alias="friendlyName")
    management_endpoint_uri: Optional[str] = Field(
        None, alias="managementEndpointUri"
    )
    monitoring_endpoint_uri: Optional[str] = Field(
        None, alias="monitoringEndpointUri"
    )
    monitoring_configuration: Optional[str] = Field(
        None, alias="monitoringConfiguration"
    )


class RegisteredServer(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[RegisteredServerProperties] = None


class RegisteredServerArray(AzureModel):
    value: Optional[List[RegisteredServer]] = None


class RegisteredServerCreateParametersProperties(AzureModel):
    server_certificate: Optional[str] = Field(None, alias="serverCertificate")
    agent_version: Optional[str] = Field(None, alias="agentVersion")
    server_os_version: Optional[str] = Field(None, alias="serverOSVersion")
    last_heart_beat: Optional[str] = Field(None, alias="lastHeartBeat")
    server_role: Optional[str] = Field(None, alias="serverRole")
    cluster_id: Optional[str] = Field(None, alias="clusterId")
    cluster_name: Optional[str] = Field(None, alias="clusterName")
    server_id: Optional[str] = Field(None, alias="serverId")
    friendly_name: Optional[str] = Field(None, alias="friendlyName")


class RegisteredServerCreateParameters(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[RegisteredServerCreateParametersProperties] = None


class TriggerRolloverRequest(AzureModel):
    server_certificate: Optional[str] = Field(None, alias="serverCertificate")


# workflows


class WorkflowProperties(AzureModel):
    last_step_name: Optional[str] = Field(None, alias="lastStepName")
    status: Optional[OpenEnum[WorkflowStatus]] = None
    operation: Optional[OpenEnum[OperationDirection]] = None
    steps: Optional[str] = None
    last_operation_id: Optional[str] = Field(None, alias="lastOperationId")


class Workflow(AzureModel):
    proxy_resource: ProxyResource = flattened(ProxyResource)
    properties: Optional[WorkflowProperties] = None


class WorkflowArray(AzureModel):
    value: Optional[List[Workflow]] = None
