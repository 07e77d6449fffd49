from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from azmgmt.core.config import ClientConfig, EnvironmentVariables
from azmgmt.core.transport import AiohttpTransport
from azmgmt.edgeorder import EdgeOrderClient
from azmgmt.loadtestservice import LoadTestingClient
from fakes import FakeCredential, RecordingTransport

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.fixture(autouse=True)
def _no_endpoint_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(EnvironmentVariables.AZURE_RESOURCE_MANAGER_ENDPOINT, False)


def test_default_endpoint() -> None:
    config = ClientConfig.create(FakeCredential(), transport=RecordingTransport())
    assert config.endpoint == "https://management.azure.com"
    assert config.scopes == ("https://management.azure.com/.default",)


def test_endpoint_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(
        EnvironmentVariables.AZURE_RESOURCE_MANAGER_ENDPOINT,
        "https://management.chinacloudapi.cn/",
    )
    config = ClientConfig.create(FakeCredential(), transport=RecordingTransport())
    assert config.endpoint == "https://management.chinacloudapi.cn"
    assert config.scopes == ("https://management.chinacloudapi.cn/.default",)

    # an explicit endpoint beats the environment variable
    config = ClientConfig.create(
        FakeCredential(), "https://localhost:8443", transport=RecordingTransport()
    )
    assert config.endpoint == "https://localhost:8443"


def test_endpoint_normalization() -> None:
    config = ClientConfig.create(
        FakeCredential(), "abc.eastus.cnt-prod.loadtesting.azure.com/"
    )
    assert config.endpoint == "https://abc.eastus.cnt-prod.loadtesting.azure.com"


def test_explicit_scopes() -> None:
    config = ClientConfig.create(FakeCredential(), scopes=["https://x/.default"])
    assert config.scopes == ("https://x/.default",)


def test_data_plane_client_requires_endpoint() -> None:
    with pytest.raises(ValueError):
        LoadTestingClient.create(FakeCredential())

    client = LoadTestingClient.create(
        FakeCredential(), "abc.eastus.cnt-prod.loadtesting.azure.com"
    )
    assert client.config.scopes == (
        "https://cnt-prod.loadtesting.azure.com/.default",
    )


def test_data_plane_client_ignores_resource_manager_variable(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv(
        EnvironmentVariables.AZURE_RESOURCE_MANAGER_ENDPOINT, "https://arm.example"
    )
    with pytest.raises(ValueError):
        LoadTestingClient.create(FakeCredential())


def test_default_credential_and_transport(mocker: MockerFixture) -> None:
    credential = FakeCredential()
    get_credential = mocker.patch(
        "azmgmt.core.config.get_credential_aio", return_value=credential
    )

    config = ClientConfig.create()

    get_credential.assert_called_once_with()
    assert config.credential is credential
    assert config.owns_credential
    assert isinstance(config.transport, AiohttpTransport)
    assert config.owns_transport


@pytest.mark.asyncio
async def test_close_only_closes_owned(mocker: MockerFixture) -> None:
    credential = FakeCredential()
    transport = RecordingTransport()
    async with EdgeOrderClient.create(credential, transport=transport):
        pass
    assert not credential.closed
    assert not transport.closed

    owned_credential = FakeCredential()
    mocker.patch(
        "azmgmt.core.config.get_credential_aio", return_value=owned_credential
    )
    async with EdgeOrderClient.create(transport=transport) as client:
        assert client.config.owns_credential
    assert owned_credential.closed
    assert not transport.closed
