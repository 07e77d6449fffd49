from __future__ import annotations

import dataclasses
import os
from typing import Optional, Sequence, Tuple

from azure.core.credentials_async import AsyncTokenCredential

from .credentials import default_scopes, get_credential_aio
from .transport import AiohttpTransport, HttpTransport


DEFAULT_ENDPOINT = "https://management.azure.com"


class EnvironmentVariables:
    # overrides DEFAULT_ENDPOINT for resource manager clients, e.g. for sovereign clouds
    AZURE_RESOURCE_MANAGER_ENDPOINT = "AZURE_RESOURCE_MANAGER_ENDPOINT"


def _normalize_endpoint(endpoint: str) -> str:
    endpoint = endpoint.rstrip("/")
    if "://" not in endpoint:
        endpoint = "https://" + endpoint
    return endpoint


@dataclasses.dataclass(frozen=True)
class ClientConfig:
    """
    Everything an operation needs besides its own parameters. owns_credential is True if
    we created the credential and so are responsible for closing it, likewise
    owns_transport.
    """

    endpoint: str
    credential: AsyncTokenCredential
    scopes: Tuple[str, ...]
    transport: HttpTransport
    owns_credential: bool = False
    owns_transport: bool = False

    @classmethod
    def create(
        cls,
        credential: Optional[AsyncTokenCredential] = None,
        endpoint: Optional[str] = None,
        scopes: Optional[Sequence[str]] = None,
        transport: Optional[HttpTransport] = None,
        *,
        default_endpoint: Optional[str] = DEFAULT_ENDPOINT,
        endpoint_variable: Optional[str] = (
            EnvironmentVariables.AZURE_RESOURCE_MANAGER_ENDPOINT
        ),
        default_scope: Optional[str] = None,
    ) -> ClientConfig:
        """
        endpoint is resolved as: the endpoint argument, then the endpoint_variable
        environment variable, then default_endpoint. Data plane clients pass
        default_endpoint=None and endpoint_variable=None, making endpoint required.
        """
        if endpoint is None and endpoint_variable is not None:
            endpoint = os.environ.get(endpoint_variable) or None
        if endpoint is None:
            endpoint = default_endpoint
        if endpoint is None:
            raise ValueError("An endpoint must be provided for this client")
        endpoint = _normalize_endpoint(endpoint)

        if scopes is None:
            if default_scope is not None:
                scopes = [default_scope]
            else:
                scopes = default_scopes(endpoint)

        owns_credential = credential is None
        if credential is None:
            credential = get_credential_aio()

        owns_transport = transport is None
        if transport is None:
            transport = AiohttpTransport()

        return cls(
            endpoint,
            credential,
            tuple(scopes),
            transport,
            owns_credential,
            owns_transport,
        )

    async def close(self) -> None:
        if self.owns_credential:
            await self.credential.close()
        if self.owns_transport:
            await self.transport.close()
