"""
Bodies for the Azure Load Testing data plane. Unlike the resource manager services,
these are not resources, there is no id/name/type envelope and updates are json merge
patches.
"""

from __future__ import annotations

import datetime
import enum
from typing import Dict, List, Optional

from pydantic import Field

from azmgmt.core.models import AzureModel, OpenEnum


class AggregationType(str, enum.Enum):
    AVERAGE = "Average"
    COUNT = "Count"
    NONE = "None"
    TOTAL = "Total"
    PERCENTILE90 = "Percentile90"
    PERCENTILE95 = "Percentile95"
    PERCENTILE99 = "Percentile99"


class CertificateType(str, enum.Enum):
    AKV_CERT_URI = "AKV_CERT_URI"


class SecretType(str, enum.Enum):
    AKV_SECRET_URI = "AKV_SECRET_URI"
    SECRET_VALUE = "SECRET_VALUE"


class FileStatus(str, enum.Enum):
    NOT_VALIDATED = "NOT_VALIDATED"
    VALIDATION_SUCCESS = "VALIDATION_SUCCESS"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"
    VALIDATION_INITIATED = "VALIDATION_INITIATED"
    VALIDATION_NOT_REQUIRED = "VALIDATION_NOT_REQUIRED"


class FileType(str, enum.Enum):
    JMX_FILE = "JMX_FILE"
    USER_PROPERTIES = "USER_PROPERTIES"
    ADDITIONAL_ARTIFACTS = "ADDITIONAL_ARTIFACTS"


class MetricUnit(str, enum.Enum):
    NOT_SPECIFIED = "NotSpecified"
    PERCENT = "Percent"
    COUNT = "Count"
    SECONDS = "Seconds"
    MILLISECONDS = "Milliseconds"
    BYTES = "Bytes"
    BYTES_PER_SECOND = "BytesPerSecond"
    COUNT_PER_SECOND = "CountPerSecond"


class PfAgFunc(str, enum.Enum):
    COUNT = "count"
    PERCENTAGE = "percentage"
    AVG = "avg"
    P50 = "p50"
    P90 = "p90"
    P95 = "p95"
    P99 = "p99"
    MIN = "min"
    MAX = "max"


class PfMetrics(str, enum.Enum):
    RESPONSE_TIME_MS = "response_time_ms"
    LATENCY = "latency"
    ERROR = "error"
    REQUESTS = "requests"
    REQUESTS_PER_SEC = "requests_per_sec"


class PfAction(str, enum.Enum):
    CONTINUE = "continue"
    STOP = "stop"


class PfResult(str, enum.Enum):
    PASSED = "passed"
    UNDETERMINED = "undetermined"
    FAILED = "failed"


class PfTestResult(str, enum.Enum):
    PASSED = "PASSED"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    FAILED = "FAILED"


class Status(str, enum.Enum):
    ACCEPTED = "ACCEPTED"
    NOTSTARTED = "NOTSTARTED"
    PROVISIONING = "PROVISIONING"
    PROVISIONED = "PROVISIONED"
    CONFIGURING = "CONFIGURING"
    CONFIGURED = "CONFIGURED"
    EXECUTING = "EXECUTING"
    EXECUTED = "EXECUTED"
    DEPROVISIONING = "DEPROVISIONING"
    DEPROVISIONED = "DEPROVISIONED"
    DONE = "DONE"
    CANCELLING = "CANCELLING"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"
    VALIDATION_SUCCESS = "VALIDATION_SUCCESS"
    VALIDATION_FAILURE = "VALIDATION_FAILURE"


class TimeGrain(str, enum.Enum):
    PT5S = "PT5S"
    PT10S = "PT10S"
    PT1M = "PT1M"
    PT5M = "PT5M"
    PT1H = "PT1H"


# test configuration


class PassFailMetric(AzureModel):
    client_metric: Optional[OpenEnum[PfMetrics]] = Field(None, alias="clientMetric")
    aggregate: Optional[OpenEnum[PfAgFunc]] = None
    condition: Optional[str] = None
    request_name: Optional[str] = Field(None, alias="requestName")
    value: Optional[float] = None
    action: Optional[OpenEnum[PfAction]] = None
    actual_value: Optional[float] = Field(None, alias="actualValue")
    result: Optional[OpenEnum[PfResult]] = None


class PassFailCriteria(AzureModel):
    # keyed by a client-chosen criterion id
    pass_fail_metrics: Optional[Dict[str, PassFailMetric]] = Field(
        None, alias="passFailMetrics"
    )


class Secret(AzureModel):
    value: Optional[str] = None
    type_: Optional[OpenEnum[SecretType]] = Field(None, alias="type")


class CertificateMetadata(AzureModel):
    value: Optional[str] = None
    type_: Optional[OpenEnum[CertificateType]] = Field(None, alias="type")
    name: Optional[str] = None


class OptionalLoadTestConfig(AzureModel):
    endpoint_url: Optional[str] = Field(None, alias="endpointUrl")
    virtual_users: Optional[int] = Field(None, alias="virtualUsers")
    ramp_up_time: Optional[int] = Field(None, alias="rampUpTime")
    duration: Optional[int] = None


class LoadTestConfiguration(AzureModel):
    engine_instances: Optional[int] = Field(None, alias="engineInstances")
    split_all_csvs: Optional[bool] = Field(None, alias="splitAllCSVs")
    quick_start_test: Optional[bool] = Field(None, alias="quickStartTest")
    optional_load_test_config: Optional[OptionalLoadTestConfig] = Field(
        None, alias="optionalLoadTestConfig"
    )


class TestFileInfo(AzureModel):
    file_name: str = Field(alias="fileName")
    url: Optional[str] = None
    file_type: Optional[OpenEnum[FileType]] = Field(None, alias="fileType")
    expire_date_time: Optional[datetime.datetime] = Field(
        None, alias="expireDateTime"
    )
    validation_status: Optional[OpenEnum[FileStatus]] = Field(
        None, alias="validationStatus"
    )
    validation_failure_details: Optional[str] = Field(
        None, alias="validationFailureDetails"
    )


class TestInputArtifacts(AzureModel):
    config_file_info: Optional[TestFileInfo] = Field(None, alias="configFileInfo")
    test_script_file_info: Optional[TestFileInfo] = Field(
        None, alias="testScriptFileInfo"
    )
    user_prop_file_info: Optional[TestFileInfo] = Field(
        None, alias="userPropFileInfo"
    )
    input_artifacts_zip_file_info: Optional[TestFileInfo] = Field(
        None, alias="inputArtifactsZipFileInfo"
    )
    additional_file_info: Optional[List[TestFileInfo]] = Field(
        None, alias="additionalFileInfo"
    )


class _Audited(AzureModel):
    created_date_time: Optional[datetime.datetime] = Field(
        None, alias="createdDateTime"
    )
    created_by: Optional[str] = Field(None, alias="createdBy")
    last_modified_date_time: Optional[datetime.datetime] = Field(
        None, alias="lastModifiedDateTime"
    )
    last_modified_by: Optional[str] = Field(None, alias="lastModifiedBy")


class Test(_Audited):
    __test__ = False  # not a pytest test class

    pass_fail_criteria: Optional[PassFailCriteria] = Field(
        None, alias="passFailCriteria"
    )
    secrets: Optional[Dict[str, Secret]] = None
    certificate: Optional[CertificateMetadata] = None
    environment_variables: Optional[Dict[str, str]] = Field(
        None, alias="environmentVariables"
    )
    load_test_configuration: Optional[LoadTestConfiguration] = Field(
        None, alias="loadTestConfiguration"
    )
    input_artifacts: Optional[TestInputArtifacts] = Field(
        None, alias="inputArtifacts"
    )
    test_id: Optional[str] = Field(None, alias="testId")
    description: Optional[str] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    subnet_id: Optional[str] = Field(None, alias="subnetId")
    keyvault_reference_identity_type: Optional[str] = Field(
        None, alias="keyvaultReferenceIdentityType"
    )
    keyvault_reference_identity_id: Optional[str] = Field(
        None, alias="keyvaultReferenceIdentityId"
    )


class PagedTest(AzureModel):
    value: List[Test]
    next_link: Optional[str] = Field(None, alias="nextLink")


class PagedTestFileInfo(AzureModel):
    value: List[TestFileInfo]
    next_link: Optional[str] = Field(None, alias="nextLink")


# app components and server metrics, the azure resources a test exercises and what to
# monitor on them


class AppComponent(AzureModel):
    resource_id: Optional[str] = Field(None, alias="resourceId")
    resource_name: Optional[str] = Field(None, alias="resourceName")
    resource_type: Optional[str] = Field(None, alias="resourceType")
    display_name: Optional[str] = Field(None, alias="displayName")
    resource_group: Optional[str] = Field(None, alias="resourceGroup")
    subscription_id: Optional[str] = Field(None, alias="subscriptionId")
    kind: Optional[str] = None


class TestAppComponents(_Audited):
    __test__ = False

    # keyed by the component's resource id
    components: Dict[str, Optional[AppComponent]]
    test_id: Optional[str] = Field(None, alias="testId")


class TestRunAppComponents(_Audited):
    components: Dict[str, Optional[AppComponent]]
    test_run_id: Optional[str] = Field(None, alias="testRunId")


class ResourceMetric(AzureModel):
    id: Optional[str] = None
    resource_id: Optional[str] = Field(None, alias="resourceId")
    metric_namespace: Optional[str] = Field(None, alias="metricNamespace")
    display_description: Optional[str] = Field(None, alias="displayDescription")
    name: Optional[str] = None
    aggregation: Optional[str] = None
    unit: Optional[str] = None
    resource_type: Optional[str] = Field(None, alias="resourceType")


class TestServerMetricConfig(_Audited):
    __test__ = False

    test_id: Optional[str] = Field(None, alias="testId")
    # keyed by metric id, None deletes a metric in a merge patch
    metrics: Dict[str, Optional[ResourceMetric]]


class TestRunServerMetricConfig(_Audited):
    test_run_id: Optional[str] = Field(None, alias="testRunId")
    metrics: Optional[Dict[str, Optional[ResourceMetric]]] = None


# test runs


class ErrorDetails(AzureModel):
    message: Optional[str] = None


class TestRunStatistics(AzureModel):
    transaction: Optional[str] = None
    sample_count: Optional[float] = Field(None, alias="sampleCount")
    error_count: Optional[float] = Field(None, alias="errorCount")
    error_pct: Optional[float] = Field(None, alias="errorPct")
    mean_res_time: Optional[float] = Field(None, alias="meanResTime")
    median_res_time: Optional[float] = Field(None, alias="medianResTime")
    max_res_time: Optional[float] = Field(None, alias="maxResTime")
    min_res_time: Optional[float] = Field(None, alias="minResTime")
    pct1_res_time: Optional[float] = Field(None, alias="pct1ResTime")
    pct2_res_time: Optional[float] = Field(None, alias="pct2ResTime")
    pct3_res_time: Optional[float] = Field(None, alias="pct3ResTime")
    throughput: Optional[float] = None
    received_k_bytes_per_sec: Optional[float] = Field(
        None, alias="receivedKBytesPerSec"
    )
    sent_k_bytes_per_sec: Optional[float] = Field(None, alias="sentKBytesPerSec")


class TestRunFileInfo(AzureModel):
    file_name: str = Field(alias="fileName")
    url: Optional[str] = None
    file_type: Optional[OpenEnum[FileType]] = Field(None, alias="fileType")
    expire_date_time: Optional[datetime.datetime] = Field(
        None, alias="expireDateTime"
    )
    validation_status: Optional[OpenEnum[FileStatus]] = Field(
        None, alias="validationStatus"
    )
    validation_failure_details: Optional[str] = Field(
        None, alias="validationFailureDetails"
    )


class TestRunInputArtifacts(AzureModel):
    config_file_info: Optional[TestRunFileInfo] = Field(None, alias="configFileInfo")
    test_script_file_info: Optional[TestRunFileInfo] = Field(
        None, alias="testScriptFileInfo"
    )
    user_prop_file_info: Optional[TestRunFileInfo] = Field(
        None, alias="userPropFileInfo"
    )
    input_artifacts_zip_file_info: Optional[TestRunFileInfo] = Field(
        None, alias="inputArtifactsZipFileInfo"
    )
    additional_file_info: Optional[List[TestRunFileInfo]] = Field(
        None, alias="additionalFileInfo"
    )


class TestRunOutputArtifacts(AzureModel):
    result_file_info: Optional[TestRunFileInfo] = Field(None, alias="resultFileInfo")
    logs_file_info: Optional[TestRunFileInfo] = Field(None, alias="logsFileInfo")


class TestRunArtifacts(AzureModel):
    input_artifacts: Optional[TestRunInputArtifacts] = Field(
        None, alias="inputArtifacts"
    )
    output_artifacts: Optional[TestRunOutputArtifacts] = Field(
        None, alias="outputArtifacts"
    )


class TestRun(_Audited):
    __test__ = False

    test_run_id: Optional[str] = Field(None, alias="testRunId")
    pass_fail_criteria: Optional[PassFailCriteria] = Field(
        None, alias="passFailCriteria"
    )
    secrets: Optional[Dict[str, Secret]] = None
    certificate: Optional[CertificateMetadata] = None
    environment_variables: Optional[Dict[str, str]] = Field(
        None, alias="environmentVariables"
    )
    error_details: Optional[List[ErrorDetails]] = Field(None, alias="errorDetails")
    test_run_statistics: Optional[Dict[str, TestRunStatistics]] = Field(
        None, alias="testRunStatistics"
    )
    load_test_configuration: Optional[LoadTestConfiguration] = Field(
        None, alias="loadTestConfiguration"
    )
    test_artifacts: Optional[TestRunArtifacts] = Field(None, alias="testArtifacts")
    test_result: Optional[OpenEnum[PfTestResult]] = Field(None, alias="testResult")
    virtual_users: Optional[int] = Field(None, alias="virtualUsers")
    display_name: Optional[str] = Field(None, alias="displayName")
    test_id: Optional[str] = Field(None, alias="testId")
    description: Optional[str] = None
    status: Optional[OpenEnum[Status]] = None
    start_date_time: Optional[datetime.datetime] = Field(None, alias="startDateTime")
    end_date_time: Optional[datetime.datetime] = Field(None, alias="endDateTime")
    executed_date_time: Optional[datetime.datetime] = Field(
        None, alias="executedDateTime"
    )
    portal_url: Optional[str] = Field(None, alias="portalUrl")
    duration: Optional[int] = None
    subnet_id: Optional[str] = Field(None, alias="subnetId")


class PagedTestRun(AzureModel):
    value: List[TestRun]
    next_link: Optional[str] = Field(None, alias="nextLink")


# metrics


class MetricNamespace(AzureModel):
    description: Optional[str] = None
    name: Optional[str] = None


class MetricNamespaceCollection(AzureModel):
    value: List[MetricNamespace]


class NameAndDesc(AzureModel):
    description: Optional[str] = None
    name: Optional[str] = None


class MetricAvailability(AzureModel):
    time_grain: Optional[OpenEnum[TimeGrain]] = Field(None, alias="timeGrain")


class MetricDefinition(AzureModel):
    dimensions: Optional[List[NameAndDesc]] = None
    description: Optional[str] = None
    name: Optional[str] = None
    namespace: Optional[str] = None
    primary_aggregation_type: Optional[OpenEnum[AggregationType]] = Field(
        None, alias="primaryAggregationType"
    )
    supported_aggregation_types: Optional[List[str]] = Field(
        None, alias="supportedAggregationTypes"
    )
    unit: Optional[OpenEnum[MetricUnit]] = None
    metric_availabilities: Optional[List[MetricAvailability]] = Field(
        None, alias="metricAvailabilities"
    )


class MetricDefinitionCollection(AzureModel):
    value: List[MetricDefinition]


class DimensionFilter(AzureModel):
    name: Optional[str] = None
    values: Optional[List[str]] = None


class MetricRequestPayload(AzureModel):
    filters: Optional[List[DimensionFilter]] = None


class MetricValue(AzureModel):
    timestamp: Optional[datetime.datetime] = None
    value: Optional[float] = None


class DimensionValue(AzureModel):
    name: Optional[str] = None
    value: Optional[str] = None


class TimeSeriesElement(AzureModel):
    data: Optional[List[MetricValue]] = None
    dimension_values: Optional[List[DimensionValue]] = Field(
        None, alias="dimensionValues"
    )


class Metrics(AzureModel):
    value: Optional[List[TimeSeriesElement]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class DimensionValueList(AzureModel):
    value: Optional[List[str]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")
