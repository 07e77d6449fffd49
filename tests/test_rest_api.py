from __future__ import annotations

import datetime
import enum
from typing import List, Optional

import pytest

from azmgmt.core.exceptions import (
    AzureRestApiError,
    ResourceNotFoundError,
    ResponseDecodeError,
)
from azmgmt.core.models import AzureModel
from azmgmt.core.rest_api import (
    MERGE_PATCH_CONTENT_TYPE,
    OCTET_STREAM_CONTENT_TYPE,
    Accepted202,
    Created201,
    NoContent204,
    Ok200,
    build_url,
    format_query_value,
    interpret_response,
    prepare_request,
    quote_path,
    resolve_next_link,
)
from azmgmt.core.transport import HttpResponse
from fakes import ENDPOINT, json_response


class _Thing(AzureModel):
    name: str
    size: Optional[int] = None


class _Flavor(str, enum.Enum):
    VANILLA = "Vanilla"


def test_build_url() -> None:
    actual = build_url(
        ENDPOINT,
        "subscriptions/sub/providers/Microsoft.Capacity/catalogs",
        "2022-11-01",
        {"$filter": "a eq 'b c'", "$skip": None, "location": "westus"},
    )
    expected = (
        "https://management.azure.com/subscriptions/sub/providers/Microsoft.Capacity/"
        "catalogs?api-version=2022-11-01&$filter=a%20eq%20%27b%20c%27&location=westus"
    )
    assert actual == expected, actual


def test_format_query_value() -> None:
    assert format_query_value(True) == "true"
    assert format_query_value(False) == "false"
    assert format_query_value(3) == "3"
    assert format_query_value(_Flavor.VANILLA) == "Vanilla"
    assert (
        format_query_value(
            datetime.datetime(2023, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc)
        )
        == "2023-01-02T03:04:05+00:00"
    )


def test_quote_path() -> None:
    assert quote_path("my resource/1") == "my%20resource%2F1"


def test_resolve_next_link() -> None:
    # the server's api-version wins
    next_link = f"{ENDPOINT}/subscriptions/sub/things?api-version=2020-01-01&$skip=10"
    assert resolve_next_link(ENDPOINT, next_link, "2023-01-01") == next_link

    actual = resolve_next_link(
        ENDPOINT, f"{ENDPOINT}/subscriptions/sub/things?$skiptoken=abc", "2023-01-01"
    )
    expected = (
        f"{ENDPOINT}/subscriptions/sub/things?$skiptoken=abc&api-version=2023-01-01"
    )
    assert actual == expected, actual

    actual = resolve_next_link(ENDPOINT, "/subscriptions/sub/things", "2023-01-01")
    assert actual == f"{ENDPOINT}/subscriptions/sub/things?api-version=2023-01-01"

    # a relative link replaces the endpoint's own path
    actual = resolve_next_link("https://h/base", "p?t=2", "9")
    assert actual == "https://h/p?t=2&api-version=9", actual
    actual = resolve_next_link("https://h/base/", "/p", "9")
    assert actual == "https://h/p?api-version=9", actual


def test_prepare_request_json_body() -> None:
    request = prepare_request(
        "PUT",
        "https://x/y",
        {"Authorization": "Bearer t"},
        headers={"If-Match": "*", "If-None-Match": None},
        body=_Thing(name="a"),
    )

    assert request.method == "PUT"
    assert request.headers == {
        "Authorization": "Bearer t",
        "If-Match": "*",
        "Content-Type": "application/json",
    }, request.headers
    assert request.json_content == {"name": "a"}
    assert request.data is None


def test_prepare_request_other_bodies() -> None:
    request = prepare_request("GET", "https://x/y", {"Authorization": "Bearer t"})
    assert "Content-Type" not in request.headers
    assert request.json_content is None

    request = prepare_request(
        "PUT",
        "https://x/y",
        {},
        body=b"<jmeterTestPlan/>",
        content_type=OCTET_STREAM_CONTENT_TYPE,
    )
    assert request.data == b"<jmeterTestPlan/>"
    assert request.json_content is None
    assert request.headers["Content-Type"] == OCTET_STREAM_CONTENT_TYPE

    request = prepare_request(
        "PATCH",
        "https://x/y",
        {},
        body={"displayName": "z"},
        content_type=MERGE_PATCH_CONTENT_TYPE,
    )
    assert request.json_content == {"displayName": "z"}
    assert request.headers["Content-Type"] == MERGE_PATCH_CONTENT_TYPE


def test_interpret_single_status() -> None:
    actual = interpret_response(json_response(200, {"name": "foo"}), {200: _Thing})
    assert actual == _Thing(name="foo"), actual

    actual = interpret_response(json_response(204), {204: None})
    assert actual is None


def test_interpret_status_markers() -> None:
    table = {200: _Thing, 201: _Thing, 202: None, 204: None}

    assert interpret_response(json_response(200, {"name": "a"}), table) == Ok200(
        _Thing(name="a")
    )
    assert interpret_response(json_response(201, {"name": "b"}), table) == Created201(
        _Thing(name="b")
    )
    assert interpret_response(json_response(202), table) == Accepted202()
    assert interpret_response(json_response(204), table) == NoContent204()


def test_interpret_list_type() -> None:
    actual = interpret_response(
        json_response(200, [{"name": "a"}, {"name": "b"}]), {200: List[_Thing]}
    )
    assert [thing.name for thing in actual] == ["a", "b"]


def test_interpret_unexpected_status() -> None:
    response = json_response(
        404, {"error": {"code": "ResourceNotFound", "message": "gone"}}
    )
    with pytest.raises(ResourceNotFoundError) as exc_info:
        interpret_response(response, {200: _Thing})

    assert exc_info.value.status == 404
    assert exc_info.value.code == "ResourceNotFound"
    assert exc_info.value.message == "gone"

    # a status that's normally a success is still an error if it's not in the table
    with pytest.raises(AzureRestApiError) as exc_info:
        interpret_response(json_response(202), {200: _Thing})
    assert exc_info.value.status == 202


def test_interpret_decode_errors() -> None:
    with pytest.raises(ResponseDecodeError) as exc_info:
        interpret_response(json_response(200, {"size": 1}), {200: _Thing})
    assert exc_info.value.status == 200
    assert not isinstance(exc_info.value, AzureRestApiError)

    not_json = HttpResponse(200, {"content-type": "application/json"}, b"<html>")
    with pytest.raises(ResponseDecodeError) as exc_info:
        interpret_response(not_json, {200: _Thing})
    assert exc_info.value.body == b"<html>"


def test_interpret_ignored_body_is_not_parsed() -> None:
    response = HttpResponse(202, {"content-type": "text/plain"}, b"accepted")
    actual = interpret_response(response, {200: _Thing, 202: None})
    assert actual == Accepted202()
