"""
Turns one logical API operation into an HttpRequest, and interprets the HttpResponse
according to the operation's table of expected status codes.
"""

from __future__ import annotations

import dataclasses
import datetime
import enum
import logging
import urllib.parse
from typing import Any, Dict, Generic, Iterable, Mapping, Optional, Tuple, TypeVar

import pydantic

from .exceptions import ResponseDecodeError, error_from_response
from .models import decode, encode
from .transport import HttpRequest, HttpResponse

API_VERSION = "api-version"

JSON_CONTENT_TYPE = "application/json"
MERGE_PATCH_CONTENT_TYPE = "application/merge-patch+json"
OCTET_STREAM_CONTENT_TYPE = "application/octet-stream"

T = TypeVar("T")

# maps a status code to the type its body should be decoded as, None means the body is
# ignored
StatusTable = Mapping[int, Any]


@dataclasses.dataclass(frozen=True)
class Ok200(Generic[T]):
    value: T


@dataclasses.dataclass(frozen=True)
class Created201(Generic[T]):
    value: T


@dataclasses.dataclass(frozen=True)
class Accepted202:
    """
    The operation was accepted but has not necessarily completed. This library does not
    poll long-running operations. Use RequestBuilder.send() to get at the
    Azure-AsyncOperation/Location headers if you need to track completion.
    """


@dataclasses.dataclass(frozen=True)
class NoContent204:
    pass


def quote_path(value: str) -> str:
    """Quotes a single path parameter, e.g. a resource name"""
    return urllib.parse.quote(str(value), safe="")


def format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime.datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    return str(value)


def _encode_query(query_parameters: Iterable[Tuple[str, str]]) -> str:
    # $ is left alone so that OData parameters like $filter look the way the docs show
    return urllib.parse.urlencode(
        list(query_parameters), safe="$", quote_via=urllib.parse.quote
    )


def build_url(
    endpoint: str,
    url_path: str,
    api_version: str,
    query_parameters: Optional[Mapping[str, Any]] = None,
) -> str:
    parameters = [(API_VERSION, api_version)]
    if query_parameters:
        parameters.extend(
            (key, format_query_value(value))
            for key, value in query_parameters.items()
            if value is not None
        )
    return f"{endpoint}/{url_path}?{_encode_query(parameters)}"


def resolve_next_link(endpoint: str, next_link: str, api_version: str) -> str:
    """
    Next links are opaque and are normally absolute, in which case they're used as is. A
    relative next link replaces the path of the endpoint, i.e. it's resolved against the
    endpoint's scheme and host. api-version is only added if the server didn't include
    one.
    """
    scheme, netloc, _, _, _ = urllib.parse.urlsplit(endpoint)
    url = urllib.parse.urljoin(f"{scheme}://{netloc}/", next_link)
    query = urllib.parse.urlsplit(url).query
    if any(
        key == API_VERSION
        for key, _ in urllib.parse.parse_qsl(query, keep_blank_values=True)
    ):
        return url
    separator = "&" if query else ("" if url.endswith("?") else "?")
    return f"{url}{separator}{_encode_query([(API_VERSION, api_version)])}"


def prepare_request(
    method: str,
    url: str,
    authorization: Mapping[str, str],
    *,
    headers: Optional[Mapping[str, Optional[str]]] = None,
    body: Any = None,
    content_type: str = JSON_CONTENT_TYPE,
) -> HttpRequest:
    """
    body can be a model (which will be encoded as json), raw bytes, or any other
    json-serializable value
    """
    request_headers: Dict[str, str] = dict(authorization)
    if headers:
        request_headers.update(
            (key, value) for key, value in headers.items() if value is not None
        )

    request = HttpRequest(method, url, request_headers)
    if body is not None:
        request_headers["Content-Type"] = content_type
        if isinstance(body, bytes):
            request.data = body
        elif isinstance(body, pydantic.BaseModel):
            request.json_content = encode(body)
        else:
            request.json_content = body

    return request


def _decode_body(type_: Any, response: HttpResponse) -> Any:
    if type_ is bytes:
        return response.body
    try:
        body = response.json()
    except ValueError as e:
        raise ResponseDecodeError(
            response.status, f"Body is not valid json: {e}", response.body
        ) from e

    try:
        return decode(type_, body)
    except pydantic.ValidationError as e:
        raise ResponseDecodeError(response.status, str(e), response.body) from e


def interpret_response(response: HttpResponse, expected: StatusTable) -> Any:
    """
    If there's only one expected status code, returns the decoded body directly (None if
    the table maps that status to None, e.g. {204: None}). Otherwise returns a status
    marker, e.g. Ok200(value) or Accepted202(), so the caller can tell which of the
    expected outcomes happened.
    """
    if response.status not in expected:
        raise error_from_response(response)

    type_ = expected[response.status]
    value = _decode_body(type_, response) if type_ is not None else None

    if len(expected) == 1:
        return value

    if response.status == 200:
        return Ok200(value)
    elif response.status == 201:
        return Created201(value)
    elif response.status == 202:
        logging.info(
            "Operation was accepted (202), it may still be running. Completion is not "
            "polled for"
        )
        return Accepted202()
    elif response.status == 204:
        return NoContent204()
    else:
        raise ValueError(f"Unexpected status code in status table {response.status}")
