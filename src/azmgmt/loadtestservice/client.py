from __future__ import annotations

import datetime
from typing import Optional, Union

from azmgmt.core.client import OperationGroup, ServiceClient
from azmgmt.core.operation import PageableRequestBuilder, RequestBuilder
from azmgmt.core.rest_api import (
    MERGE_PATCH_CONTENT_TYPE,
    OCTET_STREAM_CONTENT_TYPE,
    quote_path,
)

from .models import (
    DimensionValueList,
    FileType,
    MetricDefinitionCollection,
    MetricNamespaceCollection,
    MetricRequestPayload,
    Metrics,
    PagedTest,
    PagedTestFileInfo,
    PagedTestRun,
    Test,
    TestAppComponents,
    TestFileInfo,
    TestRun,
    TestRunAppComponents,
    TestRunFileInfo,
    TestRunServerMetricConfig,
    TestServerMetricConfig,
)

API_VERSION = "2022-11-01"

# the data plane scope is the same for every load testing resource regardless of the
# resource's own endpoint
LOAD_TESTING_SCOPE = "https://cnt-prod.loadtesting.azure.com/.default"


def _test_path(test_id: str, rest: str = "") -> str:
    path = f"tests/{quote_path(test_id)}"
    return f"{path}/{rest}" if rest else path


def _test_run_path(test_run_id: str, rest: str = "") -> str:
    path = f"test-runs/{quote_path(test_run_id)}"
    return f"{path}/{rest}" if rest else path


class AdministrationOperations(OperationGroup):
    """Tests, their input files, and the app components/server metrics they monitor"""

    API_VERSION = API_VERSION

    def create_or_update_test(self, test_id: str, body: Test) -> RequestBuilder:
        return self._request(
            "PATCH",
            _test_path(test_id),
            {200: Test, 201: Test},
            body=body,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def get_test(self, test_id: str) -> RequestBuilder:
        return self._request("GET", _test_path(test_id), {200: Test})

    def delete_test(self, test_id: str) -> RequestBuilder:
        return self._request("DELETE", _test_path(test_id), {204: None})

    def list_tests(
        self,
        *,
        orderby: Optional[str] = None,
        search: Optional[str] = None,
        last_modified_start_time: Optional[datetime.datetime] = None,
        last_modified_end_time: Optional[datetime.datetime] = None,
        maxpagesize: Optional[int] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            "tests",
            PagedTest,
            query_parameters={
                "orderby": orderby,
                "search": search,
                "lastModifiedStartTime": last_modified_start_time,
                "lastModifiedEndTime": last_modified_end_time,
                "maxpagesize": maxpagesize,
            },
        )

    def upload_test_file(
        self,
        test_id: str,
        file_name: str,
        body: bytes,
        *,
        file_type: Optional[Union[FileType, str]] = None,
    ) -> RequestBuilder:
        """Uploads the raw contents of a file, e.g. a JMeter script"""
        return self._request(
            "PUT",
            _test_path(test_id, f"files/{quote_path(file_name)}"),
            {201: TestFileInfo},
            query_parameters={"fileType": file_type},
            body=body,
            content_type=OCTET_STREAM_CONTENT_TYPE,
        )

    def get_test_file(self, test_id: str, file_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _test_path(test_id, f"files/{quote_path(file_name)}"),
            {200: TestFileInfo},
        )

    def delete_test_file(self, test_id: str, file_name: str) -> RequestBuilder:
        return self._request(
            "DELETE",
            _test_path(test_id, f"files/{quote_path(file_name)}"),
            {204: None},
        )

    def list_test_files(self, test_id: str) -> PageableRequestBuilder:
        return self._pageable("GET", _test_path(test_id, "files"), PagedTestFileInfo)

    def create_or_update_app_components(
        self, test_id: str, body: TestAppComponents
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _test_path(test_id, "app-components"),
            {200: TestAppComponents, 201: TestAppComponents},
            body=body,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def get_app_components(self, test_id: str) -> RequestBuilder:
        return self._request(
            "GET", _test_path(test_id, "app-components"), {200: TestAppComponents}
        )

    def create_or_update_server_metrics_config(
        self, test_id: str, body: TestServerMetricConfig
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _test_path(test_id, "server-metrics-config"),
            {200: TestServerMetricConfig, 201: TestServerMetricConfig},
            body=body,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def get_server_metrics_config(self, test_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _test_path(test_id, "server-metrics-config"),
            {200: TestServerMetricConfig},
        )


class TestRunOperations(OperationGroup):
    """Runs of a test, and the client and server side metrics they collected"""

    __test__ = False

    API_VERSION = API_VERSION

    def create_or_update_test_run(
        self,
        test_run_id: str,
        body: TestRun,
        *,
        old_test_run_id: Optional[str] = None,
    ) -> RequestBuilder:
        """
        Creating a test run starts it. old_test_run_id reruns an existing test run with
        the same configuration.
        """
        return self._request(
            "PATCH",
            _test_run_path(test_run_id),
            {200: TestRun, 201: TestRun},
            query_parameters={"oldTestRunId": old_test_run_id},
            body=body,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def get_test_run(self, test_run_id: str) -> RequestBuilder:
        return self._request("GET", _test_run_path(test_run_id), {200: TestRun})

    def delete_test_run(self, test_run_id: str) -> RequestBuilder:
        return self._request("DELETE", _test_run_path(test_run_id), {204: None})

    def list_test_runs(
        self,
        *,
        orderby: Optional[str] = None,
        search: Optional[str] = None,
        test_id: Optional[str] = None,
        execution_from: Optional[datetime.datetime] = None,
        execution_to: Optional[datetime.datetime] = None,
        status: Optional[str] = None,
        maxpagesize: Optional[int] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            "test-runs",
            PagedTestRun,
            query_parameters={
                "orderby": orderby,
                "search": search,
                "testId": test_id,
                "executionFrom": execution_from,
                "executionTo": execution_to,
                "status": status,
                "maxpagesize": maxpagesize,
            },
        )

    def stop_test_run(self, test_run_id: str) -> RequestBuilder:
        return self._request(
            "POST",
            f"{_test_run_path(test_run_id)}:stop",
            {200: TestRun},
            headers={"Content-Length": "0"},
        )

    def get_test_run_file(self, test_run_id: str, file_name: str) -> RequestBuilder:
        return self._request(
            "GET",
            _test_run_path(test_run_id, f"files/{quote_path(file_name)}"),
            {200: TestRunFileInfo},
        )

    def list_metric_namespaces(self, test_run_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _test_run_path(test_run_id, "metric-namespaces"),
            {200: MetricNamespaceCollection},
        )

    def list_metric_definitions(
        self, test_run_id: str, metric_namespace: str
    ) -> RequestBuilder:
        return self._request(
            "GET",
            _test_run_path(test_run_id, "metric-definitions"),
            {200: MetricDefinitionCollection},
            query_parameters={"metricNamespace": metric_namespace},
        )

    def list_metrics(
        self,
        test_run_id: str,
        metric_name: str,
        metric_namespace: str,
        timespan: str,
        *,
        body: Optional[MetricRequestPayload] = None,
        aggregation: Optional[str] = None,
        interval: Optional[str] = None,
    ) -> PageableRequestBuilder:
        """timespan is an ISO 8601 interval, e.g. 2023-01-01T00:00:00Z/PT1H"""
        return self._pageable(
            "POST",
            _test_run_path(test_run_id, "metrics"),
            Metrics,
            query_parameters={
                "metricname": metric_name,
                "metricNamespace": metric_namespace,
                "timespan": timespan,
                "aggregation": aggregation,
                "interval": interval,
            },
            body=body if body is not None else MetricRequestPayload(),
        )

    def list_metric_dimension_values(
        self,
        test_run_id: str,
        name: str,
        metric_name: str,
        metric_namespace: str,
        timespan: str,
        *,
        interval: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return self._pageable(
            "GET",
            _test_run_path(test_run_id, f"metric-dimensions/{quote_path(name)}/values"),
            DimensionValueList,
            query_parameters={
                "metricname": metric_name,
                "metricNamespace": metric_namespace,
                "timespan": timespan,
                "interval": interval,
            },
        )

    def create_or_update_app_components(
        self, test_run_id: str, body: TestRunAppComponents
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _test_run_path(test_run_id, "app-components"),
            {200: TestRunAppComponents, 201: TestRunAppComponents},
            body=body,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def get_app_components(self, test_run_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _test_run_path(test_run_id, "app-components"),
            {200: TestRunAppComponents},
        )

    def create_or_update_server_metrics_config(
        self, test_run_id: str, body: TestRunServerMetricConfig
    ) -> RequestBuilder:
        return self._request(
            "PATCH",
            _test_run_path(test_run_id, "server-metrics-config"),
            {200: TestRunServerMetricConfig, 201: TestRunServerMetricConfig},
            body=body,
            content_type=MERGE_PATCH_CONTENT_TYPE,
        )

    def get_server_metrics_config(self, test_run_id: str) -> RequestBuilder:
        return self._request(
            "GET",
            _test_run_path(test_run_id, "server-metrics-config"),
            {200: TestRunServerMetricConfig},
        )


class LoadTestingClient(ServiceClient):
    """
    The data plane of an Azure Load Testing resource. endpoint is required, it's the
    resource's dataPlaneURI, e.g. "{guid}.{region}.cnt-prod.loadtesting.azure.com".
    """

    API_VERSION = API_VERSION
    DEFAULT_ENDPOINT = None
    ENDPOINT_VARIABLE = None
    DEFAULT_SCOPE = LOAD_TESTING_SCOPE

    def administration(self) -> AdministrationOperations:
        return AdministrationOperations(self.config)

    def test_run(self) -> TestRunOperations:
        return TestRunOperations(self.config)
