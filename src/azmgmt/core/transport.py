"""
The seam between the operation builders and the network. Everything above this module
deals in HttpRequest/HttpResponse; everything network-related (connection pooling, TLS,
timeouts) is left to aiohttp.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, Dict, Optional

import aiohttp
from typing_extensions import Protocol


@dataclasses.dataclass
class HttpRequest:
    """
    url is complete, i.e. it already has the api-version and any other query
    parameters. At most one of json_content and data should be set.
    """

    method: str
    url: str
    headers: Dict[str, str] = dataclasses.field(default_factory=dict)
    json_content: Any = None
    data: Optional[bytes] = None


@dataclasses.dataclass
class HttpResponse:
    """headers keys are lower-cased"""

    status: int
    headers: Dict[str, str]
    body: bytes

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "").lower()

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.body)


class HttpTransport(Protocol):
    async def send(self, request: HttpRequest) -> HttpResponse:
        ...

    async def close(self) -> None:
        ...


async def _read_response(response: aiohttp.ClientResponse) -> HttpResponse:
    return HttpResponse(
        response.status,
        {key.lower(): value for key, value in response.headers.items()},
        await response.read(),
    )


class AiohttpTransport:
    """
    Sends requests with aiohttp. If session is not provided, every request uses a
    one-off aiohttp.request, which is the simplest thing that works but does not reuse
    connections. Pass in a session (which this class will not close) to pool
    connections.
    """

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session

    async def send(self, request: HttpRequest) -> HttpResponse:
        request_args: Dict[str, Any] = {
            "method": request.method,
            "url": request.url,
            "headers": request.headers,
        }
        if request.json_content is not None:
            request_args["json"] = request.json_content
        elif request.data is not None:
            request_args["data"] = request.data

        if self._session is None:
            async with aiohttp.request(**request_args) as response:
                http_response = await _read_response(response)
        else:
            async with self._session.request(**request_args) as response:
                http_response = await _read_response(response)

        logging.debug(
            f"{request.method} {request.url} returned {http_response.status}"
        )
        return http_response

    async def close(self) -> None:
        # the session, if any, belongs to the caller
        pass
