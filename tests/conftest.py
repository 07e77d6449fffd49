from __future__ import annotations

from typing import Any, Callable, Type, TypeVar

import pytest

from azmgmt.core import ServiceClient
from fakes import ENDPOINT, FakeCredential, RecordingTransport

_TClient = TypeVar("_TClient", bound=ServiceClient)


@pytest.fixture
def credential() -> FakeCredential:
    return FakeCredential()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_client(
    credential: FakeCredential, transport: RecordingTransport
) -> Callable[..., Any]:
    """make_client(SomeClient) or make_client(SomeClient, endpoint="...")"""

    def make(client_type: Type[_TClient], endpoint: str = ENDPOINT) -> _TClient:
        return client_type.create(
            credential, endpoint, transport=transport  # type: ignore[arg-type]
        )

    return make
