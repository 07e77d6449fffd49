"""
RequestBuilder is what every client method returns. It accumulates optional parameters,
and then either:
- `await builder` sends the request and returns the result interpreted according to the
  operation's status table, or
- `await builder.send()` sends the request and returns a Response, which gives access to
  the status code, headers and raw body.

PageableRequestBuilder additionally has into_pages() and supports `async for`.
"""

from __future__ import annotations

import logging
from typing import (
    TYPE_CHECKING,
    Any,
    AsyncIterator,
    Dict,
    Generator,
    Mapping,
    Optional,
)

from .credentials import get_authorization_header
from .pager import Pager, PagerResult, next_link_of
from .rest_api import (
    JSON_CONTENT_TYPE,
    StatusTable,
    build_url,
    interpret_response,
    prepare_request,
    resolve_next_link,
)

if TYPE_CHECKING:
    from .config import ClientConfig
    from .transport import HttpRequest, HttpResponse


class Response:
    """The raw response to a request, before the status code has been checked"""

    def __init__(self, http_response: HttpResponse, expected: StatusTable):
        self.http_response = http_response
        self._expected = expected

    @property
    def status(self) -> int:
        return self.http_response.status

    @property
    def headers(self) -> Dict[str, str]:
        return self.http_response.headers

    @property
    def body(self) -> bytes:
        return self.http_response.body

    def json(self) -> Any:
        return self.http_response.json()

    def into_result(self) -> Any:
        """
        Raises AzureRestApiError if the status code is not expected, ResponseDecodeError
        if the body can't be decoded
        """
        return interpret_response(self.http_response, self._expected)


class RequestBuilder:
    def __init__(
        self,
        config: ClientConfig,
        method: str,
        url_path: str,
        api_version: str,
        expected: StatusTable,
        *,
        query_parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        body: Any = None,
        content_type: str = JSON_CONTENT_TYPE,
    ):
        self._config = config
        self._method = method
        self._url_path = url_path
        self._api_version = api_version
        self._expected = expected
        self._query_parameters: Dict[str, Any] = dict(query_parameters or {})
        self._headers: Dict[str, Optional[str]] = dict(headers or {})
        self._body = body
        self._content_type = content_type

    def query(self, name: str, value: Any) -> RequestBuilder:
        """Sets an optional query parameter, None removes it"""
        self._query_parameters[name] = value
        return self

    def header(self, name: str, value: Optional[str]) -> RequestBuilder:
        """Sets an optional header, None removes it"""
        self._headers[name] = value
        return self

    @property
    def url(self) -> str:
        return build_url(
            self._config.endpoint,
            self._url_path,
            self._api_version,
            self._query_parameters,
        )

    async def _prepare(self) -> HttpRequest:
        return prepare_request(
            self._method,
            self.url,
            await get_authorization_header(
                self._config.credential, self._config.scopes
            ),
            headers=self._headers,
            body=self._body,
            content_type=self._content_type,
        )

    async def _send_request(self, request: HttpRequest) -> Response:
        logging.debug(f"Sending {request.method} {request.url}")
        return Response(await self._config.transport.send(request), self._expected)

    async def send(self) -> Response:
        return await self._send_request(await self._prepare())

    async def _execute(self) -> Any:
        return (await self.send()).into_result()

    def __await__(self) -> Generator[Any, None, Any]:
        return self._execute().__await__()


class PageableRequestBuilder(RequestBuilder):
    """
    Awaiting this builder directly returns just the first page. Use into_pages() or
    `async for` to follow the next links.
    """

    async def _fetch_page(self, continuation: Optional[str]) -> PagerResult:
        if continuation is None:
            request = await self._prepare()
        else:
            # the next link replaces the url (including the optional query parameters
            # which the server has already folded into it), and is always a GET
            authorization = await get_authorization_header(
                self._config.credential, self._config.scopes
            )
            request = prepare_request(
                "GET",
                resolve_next_link(
                    self._config.endpoint, continuation, self._api_version
                ),
                authorization,
                headers=self._headers,
            )

        page = (await self._send_request(request)).into_result()
        return PagerResult(page, next_link_of(page))

    def into_pages(self) -> Pager:
        return Pager(self._fetch_page)

    def __aiter__(self) -> AsyncIterator[Any]:
        """Iterates over the items in all of the pages"""
        return self.into_pages().items()
