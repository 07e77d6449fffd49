"""Request and response bodies for Microsoft.Migrate migrate projects"""

from __future__ import annotations

import datetime
import enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from azmgmt.core.models import AzureModel, OpenEnum, flattened, polymorphic


class RefreshSummaryState(str, enum.Enum):
    STARTED = "Started"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    FAILED = "Failed"


class ProvisioningState(str, enum.Enum):
    ACCEPTED = "Accepted"
    CREATING = "Creating"
    DELETING = "Deleting"
    FAILED = "Failed"
    MOVING = "Moving"
    SUCCEEDED = "Succeeded"


class Tool(str, enum.Enum):
    SERVER_DISCOVERY = "ServerDiscovery"
    SERVER_ASSESSMENT = "ServerAssessment"
    SERVER_MIGRATION = "ServerMigration"
    CLOUDAMIZE = "Cloudamize"
    TURBONOMIC = "Turbonomic"
    ZERTO = "Zerto"
    CORENT_TECH = "CorentTech"
    SERVER_ASSESSMENT_V1 = "ServerAssessmentV1"
    SERVER_MIGRATION_REPLICATION = "ServerMigrationReplication"
    CARBONITE = "Carbonite"
    DATA_MIGRATION_ASSISTANT = "DataMigrationAssistant"
    DATABASE_MIGRATION_SERVICE = "DatabaseMigrationService"


class Goal(str, enum.Enum):
    SERVERS = "Servers"
    DATABASES = "Databases"


class Purpose(str, enum.Enum):
    DISCOVERY = "Discovery"
    ASSESSMENT = "Assessment"
    MIGRATION = "Migration"


class SolutionStatus(str, enum.Enum):
    INACTIVE = "Inactive"
    ACTIVE = "Active"


class CleanupState(str, enum.Enum):
    NONE = "None"
    STARTED = "Started"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    FAILED = "Failed"


# Resources in this API carry their own id, name and type rather than sharing a common
# base, and all of them are optional


# summaries, keyed by instanceType


class ProjectSummary(AzureModel):
    instance_type: Optional[str] = Field(None, alias="instanceType")
    refresh_summary_state: Optional[OpenEnum[RefreshSummaryState]] = Field(
        None, alias="refreshSummaryState"
    )
    last_summary_refreshed_time: Optional[datetime.datetime] = Field(
        None, alias="lastSummaryRefreshedTime"
    )
    extended_summary: Optional[Dict[str, Any]] = Field(None, alias="extendedSummary")


class ServersProjectSummary(AzureModel):
    project_summary: ProjectSummary = flattened(ProjectSummary)
    discovered_count: Optional[int] = Field(None, alias="discoveredCount")
    assessed_count: Optional[int] = Field(None, alias="assessedCount")
    replicating_count: Optional[int] = Field(None, alias="replicatingCount")
    test_migrated_count: Optional[int] = Field(None, alias="testMigratedCount")
    migrated_count: Optional[int] = Field(None, alias="migratedCount")


class DatabaseProjectSummary(AzureModel):
    project_summary: ProjectSummary = flattened(ProjectSummary)


ProjectSummaryPayload = polymorphic(
    "instanceType",
    {"Servers": ServersProjectSummary, "Databases": DatabaseProjectSummary},
    ProjectSummary,
)


class SolutionSummary(AzureModel):
    instance_type: Optional[str] = Field(None, alias="instanceType")


class ServersSolutionSummary(AzureModel):
    solution_summary: SolutionSummary = flattened(SolutionSummary)
    discovered_count: Optional[int] = Field(None, alias="discoveredCount")
    assessed_count: Optional[int] = Field(None, alias="assessedCount")
    replicating_count: Optional[int] = Field(None, alias="replicatingCount")
    test_migrated_count: Optional[int] = Field(None, alias="testMigratedCount")
    migrated_count: Optional[int] = Field(None, alias="migratedCount")


class DatabasesSolutionSummary(AzureModel):
    solution_summary: SolutionSummary = flattened(SolutionSummary)
    databases_assessed_count: Optional[int] = Field(
        None, alias="databasesAssessedCount"
    )
    database_instances_assessed_count: Optional[int] = Field(
        None, alias="databaseInstancesAssessedCount"
    )
    migration_ready_count: Optional[int] = Field(None, alias="migrationReadyCount")


SolutionSummaryPayload = polymorphic(
    "instanceType",
    {"Servers": ServersSolutionSummary, "Databases": DatabasesSolutionSummary},
    SolutionSummary,
)


# migrate projects


class MigrateProjectProperties(AzureModel):
    registered_tools: Optional[List[OpenEnum[Tool]]] = Field(
        None, alias="registeredTools"
    )
    # one summary per tool, keyed by tool name
    summary: Optional[Dict[str, ProjectSummaryPayload]] = None
    last_summary_refreshed_time: Optional[datetime.datetime] = Field(
        None, alias="lastSummaryRefreshedTime"
    )
    refresh_summary_state: Optional[OpenEnum[RefreshSummaryState]] = Field(
        None, alias="refreshSummaryState"
    )
    provisioning_state: Optional[OpenEnum[ProvisioningState]] = Field(
        None, alias="provisioningState"
    )


class MigrateProject(AzureModel):
    e_tag: Optional[str] = Field(None, alias="eTag")
    location: Optional[str] = None
    properties: Optional[MigrateProjectProperties] = None
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    tags: Optional[Dict[str, Any]] = None


class RegisterToolInput(AzureModel):
    tool: Optional[OpenEnum[Tool]] = None


class RegistrationResult(AzureModel):
    is_registered: Optional[bool] = Field(None, alias="isRegistered")


class RefreshSummaryInput(AzureModel):
    goal: Optional[OpenEnum[Goal]] = None


class RefreshSummaryResult(AzureModel):
    is_refreshed: Optional[bool] = Field(None, alias="isRefreshed")


# solutions


class SolutionDetails(AzureModel):
    group_count: Optional[int] = Field(None, alias="groupCount")
    assessment_count: Optional[int] = Field(None, alias="assessmentCount")
    extended_details: Optional[Dict[str, Any]] = Field(None, alias="extendedDetails")


class SolutionProperties(AzureModel):
    tool: Optional[OpenEnum[Tool]] = None
    purpose: Optional[OpenEnum[Purpose]] = None
    goal: Optional[OpenEnum[Goal]] = None
    status: Optional[OpenEnum[SolutionStatus]] = None
    cleanup_state: Optional[OpenEnum[CleanupState]] = Field(
        None, alias="cleanupState"
    )
    summary: Optional[SolutionSummaryPayload] = None
    details: Optional[SolutionDetails] = None


class Solution(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    etag: Optional[str] = None
    properties: Optional[SolutionProperties] = None


class SolutionsCollection(AzureModel):
    value: Optional[List[Solution]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class SolutionConfig(AzureModel):
    publisher_sas_uri: Optional[str] = Field(None, alias="publisherSasUri")


# discovered machines


class _MachineDataDetails(AzureModel):
    """Fields reported by every solution about a machine"""

    enqueue_time: Optional[str] = Field(None, alias="enqueueTime")
    solution_name: Optional[str] = Field(None, alias="solutionName")
    machine_id: Optional[str] = Field(None, alias="machineId")
    machine_manager_id: Optional[str] = Field(None, alias="machineManagerId")
    fabric_type: Optional[str] = Field(None, alias="fabricType")
    last_updated_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTime"
    )
    machine_name: Optional[str] = Field(None, alias="machineName")
    ip_addresses: Optional[List[str]] = Field(None, alias="ipAddresses")
    fqdn: Optional[str] = None
    bios_id: Optional[str] = Field(None, alias="biosId")
    mac_addresses: Optional[List[str]] = Field(None, alias="macAddresses")
    extended_info: Optional[Dict[str, Any]] = Field(None, alias="extendedInfo")


class DiscoveryDetails(_MachineDataDetails):
    os_type: Optional[str] = Field(None, alias="osType")
    os_name: Optional[str] = Field(None, alias="osName")
    os_version: Optional[str] = Field(None, alias="osVersion")


class AssessmentDetails(_MachineDataDetails):
    assessment_id: Optional[str] = Field(None, alias="assessmentId")
    target_vm_size: Optional[str] = Field(None, alias="targetVMSize")
    target_vm_location: Optional[str] = Field(None, alias="targetVMLocation")
    target_storage_type: Optional[Dict[str, Any]] = Field(
        None, alias="targetStorageType"
    )


class MigrationDetails(_MachineDataDetails):
    migration_phase: Optional[str] = Field(None, alias="migrationPhase")
    migration_tested: Optional[bool] = Field(None, alias="migrationTested")
    replication_progress_percentage: Optional[int] = Field(
        None, alias="replicationProgressPercentage"
    )
    target_vm_arm_id: Optional[str] = Field(None, alias="targetVMArmId")


class MachineProperties(AzureModel):
    discovery_data: Optional[List[DiscoveryDetails]] = Field(
        None, alias="discoveryData"
    )
    assessment_data: Optional[List[AssessmentDetails]] = Field(
        None, alias="assessmentData"
    )
    migration_data: Optional[List[MigrationDetails]] = Field(
        None, alias="migrationData"
    )
    last_updated_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTime"
    )


class Machine(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[MachineProperties] = None


class MachineCollection(AzureModel):
    value: Optional[List[Machine]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# databases


class DatabaseAssessmentDetails(AzureModel):
    assessment_id: Optional[str] = Field(None, alias="assessmentId")
    migration_blockers_count: Optional[int] = Field(
        None, alias="migrationBlockersCount"
    )
    breaking_changes_count: Optional[int] = Field(None, alias="breakingChangesCount")
    is_ready_for_migration: Optional[bool] = Field(None, alias="isReadyForMigration")
    assessment_target_type: Optional[str] = Field(None, alias="assessmentTargetType")
    last_assessed_time: Optional[datetime.datetime] = Field(
        None, alias="lastAssessedTime"
    )
    compatibility_level: Optional[str] = Field(None, alias="compatibilityLevel")
    database_size_in_mb: Optional[str] = Field(None, alias="databaseSizeInMB")
    last_updated_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTime"
    )
    enqueue_time: Optional[str] = Field(None, alias="enqueueTime")
    solution_name: Optional[str] = Field(None, alias="solutionName")
    instance_id: Optional[str] = Field(None, alias="instanceId")
    database_name: Optional[str] = Field(None, alias="databaseName")
    extended_info: Optional[Dict[str, Any]] = Field(None, alias="extendedInfo")


class DatabaseProperties(AzureModel):
    assessment_data: Optional[List[DatabaseAssessmentDetails]] = Field(
        None, alias="assessmentData"
    )
    last_updated_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTime"
    )


class Database(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[DatabaseProperties] = None


class DatabaseCollection(AzureModel):
    value: Optional[List[Database]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class DatabaseInstanceDiscoveryDetails(AzureModel):
    last_updated_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTime"
    )
    instance_id: Optional[str] = Field(None, alias="instanceId")
    enqueue_time: Optional[str] = Field(None, alias="enqueueTime")
    solution_name: Optional[str] = Field(None, alias="solutionName")
    instance_name: Optional[str] = Field(None, alias="instanceName")
    instance_version: Optional[str] = Field(None, alias="instanceVersion")
    instance_type: Optional[str] = Field(None, alias="instanceType")
    host_name: Optional[str] = Field(None, alias="hostName")
    ip_address: Optional[str] = Field(None, alias="ipAddress")
    port_number: Optional[int] = Field(None, alias="portNumber")
    extended_info: Optional[Dict[str, Any]] = Field(None, alias="extendedInfo")


class DatabaseInstanceSummary(AzureModel):
    databases_assessed_count: Optional[int] = Field(
        None, alias="databasesAssessedCount"
    )
    migration_ready_count: Optional[int] = Field(None, alias="migrationReadyCount")


class DatabaseInstanceProperties(AzureModel):
    discovery_data: Optional[List[DatabaseInstanceDiscoveryDetails]] = Field(
        None, alias="discoveryData"
    )
    # keyed by solution name
    summary: Optional[Dict[str, DatabaseInstanceSummary]] = None
    last_updated_time: Optional[datetime.datetime] = Field(
        None, alias="lastUpdatedTime"
    )


class DatabaseInstance(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[DatabaseInstanceProperties] = None


class DatabaseInstanceCollection(AzureModel):
    value: Optional[List[DatabaseInstance]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# events


class MigrateEventProperties(AzureModel):
    instance_type: Optional[str] = Field(None, alias="instanceType")
    error_code: Optional[str] = Field(None, alias="errorCode")
    error_message: Optional[str] = Field(None, alias="errorMessage")
    recommendation: Optional[str] = None
    possible_causes: Optional[str] = Field(None, alias="possibleCauses")
    solution: Optional[str] = None
    client_request_id: Optional[str] = Field(None, alias="clientRequestId")


class MachineMigrateEventProperties(AzureModel):
    migrate_event_properties: MigrateEventProperties = flattened(
        MigrateEventProperties
    )
    machine: Optional[str] = None


class DatabaseMigrateEventProperties(AzureModel):
    migrate_event_properties: MigrateEventProperties = flattened(
        MigrateEventProperties
    )
    database: Optional[str] = None
    database_instance_id: Optional[str] = Field(None, alias="databaseInstanceId")


MigrateEventPropertiesPayload = polymorphic(
    "instanceType",
    {
        "Servers": MachineMigrateEventProperties,
        "Databases": DatabaseMigrateEventProperties,
    },
    MigrateEventProperties,
)


class MigrateEvent(AzureModel):
    id: Optional[str] = None
    name: Optional[str] = None
    type_: Optional[str] = Field(None, alias="type")
    properties: Optional[MigrateEventPropertiesPayload] = None


class EventCollection(AzureModel):
    value: Optional[List[MigrateEvent]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


# operations


class OperationDisplay(AzureModel):
    provider: Optional[str] = None
    resource: Optional[str] = None
    operation: Optional[str] = None
    description: Optional[str] = None


class Operation(AzureModel):
    name: Optional[str] = None
    display: Optional[OperationDisplay] = None
    origin: Optional[str] = None


class OperationResultList(AzureModel):
    value: Optional[List[Operation]] = None
