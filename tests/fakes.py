"""Stand-ins for the credential and the network, shared by the tests"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, List, Optional

from azure.core.credentials import AccessToken

from azmgmt.core.transport import HttpRequest, HttpResponse

ENDPOINT = "https://management.azure.com"
FAKE_TOKEN = "fake-token"


class FakeCredential:
    """An AsyncTokenCredential that hands out the same token for any scopes"""

    def __init__(self) -> None:
        self.requested_scopes: List[tuple] = []
        self.closed = False

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        self.requested_scopes.append(scopes)
        return AccessToken(FAKE_TOKEN, int(time.time()) + 3600)

    async def close(self) -> None:
        self.closed = True

    async def __aenter__(self) -> FakeCredential:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()


def json_response(
    status: int, body: Any = None, headers: Optional[Dict[str, str]] = None
) -> HttpResponse:
    all_headers = {"content-type": "application/json; charset=utf-8"}
    if headers:
        all_headers.update(headers)
    return HttpResponse(
        status, all_headers, b"" if body is None else json.dumps(body).encode("utf-8")
    )


class RecordingTransport:
    """
    Returns canned responses in order and records every request it was asked to send
    """

    def __init__(self, *responses: HttpResponse):
        self.responses: List[HttpResponse] = list(responses)
        self.requests: List[HttpRequest] = []
        self.closed = False

    def add(self, response: HttpResponse) -> RecordingTransport:
        self.responses.append(response)
        return self

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request {request.method} {request.url}")
        return self.responses.pop(0)

    async def close(self) -> None:
        self.closed = True

    @property
    def last_request(self) -> HttpRequest:
        return self.requests[-1]


