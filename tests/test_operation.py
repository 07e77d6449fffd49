from __future__ import annotations

from typing import List, Optional

import pytest
from pydantic import Field

from azmgmt.core import (
    Accepted202,
    AzureModel,
    AzureRestApiError,
    Ok200,
    OperationGroup,
    PageableRequestBuilder,
    PagerState,
    RequestBuilder,
    ResourceNotFoundError,
)
from azmgmt.core.config import ClientConfig
from fakes import (
    ENDPOINT,
    FAKE_TOKEN,
    FakeCredential,
    RecordingTransport,
    json_response,
)


class Widget(AzureModel):
    name: str


class WidgetList(AzureModel):
    value: Optional[List[Widget]] = None
    next_link: Optional[str] = Field(None, alias="nextLink")


class WidgetOperations(OperationGroup):
    API_VERSION = "2023-01-01"

    def get(self, name: str) -> RequestBuilder:
        return self._request("GET", f"widgets/{name}", {200: Widget})

    def update(self, name: str, body: Widget) -> RequestBuilder:
        return self._request(
            "PATCH", f"widgets/{name}", {200: Widget, 202: None}, body=body
        )

    def list(self, *, top: Optional[int] = None) -> PageableRequestBuilder:
        return self._pageable(
            "GET", "widgets", WidgetList, query_parameters={"$top": top}
        )

    def search(self, body: Widget) -> PageableRequestBuilder:
        return self._pageable("POST", "widgets/search", WidgetList, body=body)


def _widgets(transport: RecordingTransport) -> WidgetOperations:
    return WidgetOperations(
        ClientConfig.create(FakeCredential(), ENDPOINT, transport=transport)
    )


@pytest.mark.asyncio
async def test_request_url_and_auth() -> None:
    transport = RecordingTransport(json_response(200, {"name": "foo"}))

    actual = await _widgets(transport).get("foo")

    assert actual == Widget(name="foo"), actual
    request = transport.last_request
    assert request.method == "GET"
    assert request.url == f"{ENDPOINT}/widgets/foo?api-version=2023-01-01"
    assert request.headers["Authorization"] == f"Bearer {FAKE_TOKEN}"
    assert "Content-Type" not in request.headers


@pytest.mark.asyncio
async def test_scopes_passed_to_credential() -> None:
    credential = FakeCredential()
    transport = RecordingTransport(json_response(200, {"name": "foo"}))
    widgets = WidgetOperations(
        ClientConfig.create(credential, ENDPOINT, transport=transport)
    )

    await widgets.get("foo")

    assert credential.requested_scopes == [(f"{ENDPOINT}/.default",)]


@pytest.mark.asyncio
async def test_optional_query_and_headers() -> None:
    transport = RecordingTransport(json_response(200, {"value": []}))

    builder = _widgets(transport).list().query("$skiptoken", "abc")
    builder.header("x-ms-client-request-id", "123").header("If-Match", None)
    await builder

    request = transport.last_request
    assert request.url == f"{ENDPOINT}/widgets?api-version=2023-01-01&$skiptoken=abc"
    assert request.headers["x-ms-client-request-id"] == "123"
    assert "If-Match" not in request.headers


@pytest.mark.asyncio
async def test_status_markers() -> None:
    transport = RecordingTransport(
        json_response(200, {"name": "foo"}), json_response(202)
    )
    widgets = _widgets(transport)

    actual = await widgets.update("foo", Widget(name="foo"))
    assert actual == Ok200(Widget(name="foo")), actual
    assert transport.last_request.json_content == {"name": "foo"}
    assert transport.last_request.headers["Content-Type"] == "application/json"

    actual = await widgets.update("foo", Widget(name="foo"))
    assert actual == Accepted202(), actual


@pytest.mark.asyncio
async def test_send_gives_raw_response() -> None:
    transport = RecordingTransport(
        json_response(
            202, headers={"azure-asyncoperation": "https://x/operations/1"}
        )
    )

    response = await _widgets(transport).update("foo", Widget(name="foo")).send()

    assert response.status == 202
    assert response.headers["azure-asyncoperation"] == "https://x/operations/1"
    assert response.into_result() == Accepted202()


@pytest.mark.asyncio
async def test_unexpected_status() -> None:
    transport = RecordingTransport(
        json_response(404, {"error": {"code": "ResourceNotFound", "message": "no"}}),
        json_response(500, {"error": {"code": "InternalError", "message": "oops"}}),
    )
    widgets = _widgets(transport)

    with pytest.raises(ResourceNotFoundError):
        await widgets.get("foo")

    with pytest.raises(AzureRestApiError) as exc_info:
        await widgets.get("foo")
    assert exc_info.value.status == 500
    assert exc_info.value.code == "InternalError"


@pytest.mark.asyncio
async def test_transport_errors_pass_through() -> None:
    class _BrokenTransport(RecordingTransport):
        async def send(self, request: object) -> object:  # type: ignore[override]
            raise ConnectionResetError("reset")

    with pytest.raises(ConnectionResetError):
        await _widgets(_BrokenTransport()).get("foo")


@pytest.mark.asyncio
async def test_await_pageable_returns_first_page() -> None:
    transport = RecordingTransport(
        json_response(200, {"value": [{"name": "a"}], "nextLink": "https://x/n"})
    )

    page = await _widgets(transport).list()

    assert isinstance(page, WidgetList)
    assert page.next_link == "https://x/n"
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_pageable_follows_next_link() -> None:
    next_link = f"{ENDPOINT}/widgets?api-version=2023-01-01&$top=1&$skiptoken=2"
    transport = RecordingTransport(
        json_response(200, {"value": [{"name": "a"}], "nextLink": next_link}),
        json_response(200, {"value": [{"name": "b"}], "nextLink": ""}),
    )

    actual = [widget.name async for widget in _widgets(transport).list(top=1)]

    assert actual == ["a", "b"], actual
    assert [r.url for r in transport.requests] == [
        f"{ENDPOINT}/widgets?api-version=2023-01-01&$top=1",
        next_link,
    ]
    assert transport.requests[1].headers["Authorization"] == f"Bearer {FAKE_TOKEN}"


@pytest.mark.asyncio
async def test_next_link_without_api_version() -> None:
    transport = RecordingTransport(
        json_response(200, {"value": [], "nextLink": f"{ENDPOINT}/widgets?page=2"}),
        json_response(200, {"value": []}),
    )

    pages = [page async for page in _widgets(transport).list().into_pages()]

    assert len(pages) == 2
    assert transport.requests[1].url == (
        f"{ENDPOINT}/widgets?page=2&api-version=2023-01-01"
    )


@pytest.mark.asyncio
async def test_post_pageable_continues_with_get() -> None:
    transport = RecordingTransport(
        json_response(200, {"value": [{"name": "a"}], "nextLink": "https://x/n"}),
        json_response(200, {"value": [{"name": "b"}]}),
    )

    actual = [w.name async for w in _widgets(transport).search(Widget(name="?"))]

    assert actual == ["a", "b"]
    first, second = transport.requests
    assert first.method == "POST"
    assert first.json_content == {"name": "?"}
    assert second.method == "GET"
    assert second.url == "https://x/n?api-version=2023-01-01"
    assert second.json_content is None


@pytest.mark.asyncio
async def test_pager_error_midway() -> None:
    transport = RecordingTransport(
        json_response(200, {"value": [{"name": "a"}], "nextLink": "https://x/n"}),
        json_response(503, {"error": {"code": "ServerBusy"}}),
    )
    pager = _widgets(transport).list().into_pages()

    with pytest.raises(AzureRestApiError):
        async for _ in pager:
            pass

    assert pager.state == PagerState.DONE
