from __future__ import annotations

from typing import Any, Callable

import pytest

from azmgmt.core import Created201, Ok200, ResourceNotFoundError
from azmgmt.loadtestservice import LoadTestingClient
from azmgmt.loadtestservice import models
from fakes import FakeCredential, RecordingTransport, json_response

_DATA_PLANE = "https://abc.eastus.cnt-prod.loadtesting.azure.com"
_API_VERSION = "api-version=2022-11-01"


@pytest.fixture
def client(make_client: Callable[..., Any]) -> LoadTestingClient:
    return make_client(
        LoadTestingClient, endpoint="abc.eastus.cnt-prod.loadtesting.azure.com"
    )


@pytest.mark.asyncio
async def test_create_or_update_test(
    client: LoadTestingClient,
    transport: RecordingTransport,
    credential: FakeCredential,
) -> None:
    transport.add(
        json_response(
            201,
            {
                "testId": "t1",
                "displayName": "checkout flow",
                "loadTestConfiguration": {"engineInstances": 2},
                "createdDateTime": "2023-01-01T00:00:00Z",
            },
        )
    )

    actual = await client.administration().create_or_update_test(
        "t1",
        models.Test(
            display_name="checkout flow",
            load_test_configuration=models.LoadTestConfiguration(engine_instances=2),
        ),
    )

    assert isinstance(actual, Created201)
    assert actual.value.test_id == "t1"
    assert actual.value.created_date_time.year == 2023
    request = transport.last_request
    assert request.method == "PATCH"
    assert request.url == f"{_DATA_PLANE}/tests/t1?{_API_VERSION}"
    assert request.headers["Content-Type"] == "application/merge-patch+json"
    assert request.json_content == {
        "displayName": "checkout flow",
        "loadTestConfiguration": {"engineInstances": 2},
    }, request.json_content
    assert credential.requested_scopes == [
        ("https://cnt-prod.loadtesting.azure.com/.default",)
    ]


@pytest.mark.asyncio
async def test_upload_test_file(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            201,
            {
                "fileName": "script.jmx",
                "fileType": "JMX_FILE",
                "validationStatus": "VALIDATION_INITIATED",
            },
        )
    )

    actual = await client.administration().upload_test_file(
        "t1", "script.jmx", b"<jmeterTestPlan/>", file_type=models.FileType.JMX_FILE
    )

    assert actual.file_name == "script.jmx"
    assert actual.file_type == models.FileType.JMX_FILE
    assert actual.validation_status == models.FileStatus.VALIDATION_INITIATED
    request = transport.last_request
    assert request.method == "PUT"
    assert request.url == (
        f"{_DATA_PLANE}/tests/t1/files/script.jmx?{_API_VERSION}&fileType=JMX_FILE"
    )
    assert request.headers["Content-Type"] == "application/octet-stream"
    assert request.data == b"<jmeterTestPlan/>"
    assert request.json_content is None


@pytest.mark.asyncio
async def test_get_test_not_found(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            404, {"error": {"code": "TestNotFound", "message": "Test t2 not found"}}
        )
    )

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await client.administration().get_test("t2")

    assert exc_info.value.code == "TestNotFound"


@pytest.mark.asyncio
async def test_list_tests(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    next_link = f"{_DATA_PLANE}/tests?{_API_VERSION}&maxpagesize=1&continuationToken=x"
    transport.add(
        json_response(200, {"value": [{"testId": "t1"}], "nextLink": next_link})
    )
    transport.add(json_response(200, {"value": [{"testId": "t2"}]}))

    test_ids = [
        test.test_id
        async for test in client.administration().list_tests(
            search="checkout", maxpagesize=1
        )
    ]

    assert test_ids == ["t1", "t2"]
    assert [r.url for r in transport.requests] == [
        f"{_DATA_PLANE}/tests?{_API_VERSION}&search=checkout&maxpagesize=1",
        next_link,
    ]


@pytest.mark.asyncio
async def test_delete_test(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(204))

    # single-status tables return the bare value, not a marker
    assert await client.administration().delete_test("t1") is None
    assert transport.last_request.method == "DELETE"


@pytest.mark.asyncio
async def test_create_test_run_from_old_run(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    transport.add(
        json_response(
            200, {"testRunId": "r2", "testId": "t1", "status": "SOMETHING_NEW"}
        )
    )

    actual = await client.test_run().create_or_update_test_run(
        "r2", models.TestRun(test_id="t1"), old_test_run_id="r1"
    )

    assert isinstance(actual, Ok200)
    assert actual.value.status == "SOMETHING_NEW"
    assert transport.last_request.url == (
        f"{_DATA_PLANE}/test-runs/r2?{_API_VERSION}&oldTestRunId=r1"
    )
    assert transport.last_request.json_content == {"testId": "t1"}


@pytest.mark.asyncio
async def test_stop_test_run(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(200, {"testRunId": "r1", "status": "CANCELLING"}))

    actual = await client.test_run().stop_test_run("r1")

    assert actual.status == models.Status.CANCELLING
    request = transport.last_request
    assert request.method == "POST"
    assert request.url == f"{_DATA_PLANE}/test-runs/r1:stop?{_API_VERSION}"
    assert request.headers["Content-Length"] == "0"
    assert request.json_content is None


@pytest.mark.asyncio
async def test_list_metrics(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    next_link = f"{_DATA_PLANE}/test-runs/r1/metrics?page=2"
    transport.add(
        json_response(
            200,
            {
                "value": [
                    {
                        "data": [
                            {"timestamp": "2023-01-01T00:00:00Z", "value": 1.5}
                        ],
                        "dimensionValues": [{"name": "RequestName", "value": "GET"}],
                    }
                ],
                "nextLink": next_link,
            },
        )
    )
    transport.add(json_response(200, {}))

    series = [
        element
        async for element in client.test_run().list_metrics(
            "r1",
            "VirtualUsers",
            "LoadTestRunMetrics",
            "2023-01-01T00:00:00Z/PT1H",
        )
    ]

    assert len(series) == 1
    assert series[0].data[0].value == 1.5
    assert series[0].dimension_values[0].value == "GET"
    first, second = transport.requests
    assert first.method == "POST"
    assert first.url == (
        f"{_DATA_PLANE}/test-runs/r1/metrics?{_API_VERSION}&metricname=VirtualUsers"
        "&metricNamespace=LoadTestRunMetrics"
        "&timespan=2023-01-01T00%3A00%3A00Z%2FPT1H"
    ), first.url
    assert first.json_content == {}
    assert second.method == "GET"
    assert second.url == f"{next_link}&{_API_VERSION}"
    assert second.json_content is None


@pytest.mark.asyncio
async def test_list_metric_dimension_values(
    client: LoadTestingClient, transport: RecordingTransport
) -> None:
    transport.add(json_response(200, {"value": ["GET /", "POST /cart"]}))

    values = [
        value
        async for value in client.test_run().list_metric_dimension_values(
            "r1", "RequestName", "VirtualUsers", "LoadTestRunMetrics", "PT1H"
        )
    ]

    assert values == ["GET /", "POST /cart"]
    assert transport.last_request.url.startswith(
        f"{_DATA_PLANE}/test-runs/r1/metric-dimensions/RequestName/values?"
    )
