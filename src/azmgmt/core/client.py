from __future__ import annotations

from types import TracebackType
from typing import Any, Mapping, Optional, Sequence, Type, TypeVar

from azure.core.credentials_async import AsyncTokenCredential

from .config import DEFAULT_ENDPOINT, ClientConfig, EnvironmentVariables
from .operation import PageableRequestBuilder, RequestBuilder
from .rest_api import JSON_CONTENT_TYPE, StatusTable
from .transport import HttpTransport

_TClient = TypeVar("_TClient", bound="ServiceClient")


class OperationGroup:
    """
    A set of related operations sharing a ClientConfig. Subclasses set API_VERSION and
    define one method per operation, each returning a RequestBuilder.
    """

    API_VERSION: str

    def __init__(self, config: ClientConfig):
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def _request(
        self,
        method: str,
        url_path: str,
        expected: StatusTable,
        *,
        query_parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        body: Any = None,
        content_type: str = JSON_CONTENT_TYPE,
        api_version: Optional[str] = None,
    ) -> RequestBuilder:
        return RequestBuilder(
            self._config,
            method,
            url_path,
            api_version or self.API_VERSION,
            expected,
            query_parameters=query_parameters,
            headers=headers,
            body=body,
            content_type=content_type,
        )

    def _pageable(
        self,
        method: str,
        url_path: str,
        page_type: Any,
        *,
        query_parameters: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, Optional[str]]] = None,
        body: Any = None,
        api_version: Optional[str] = None,
    ) -> PageableRequestBuilder:
        return PageableRequestBuilder(
            self._config,
            method,
            url_path,
            api_version or self.API_VERSION,
            {200: page_type},
            query_parameters=query_parameters,
            headers=headers,
            body=body,
        )


class ServiceClient(OperationGroup):
    """
    The entry point for a service. Operation groups are created from the client and
    share its config, closing the client closes the credential and transport if the
    client created them.
    """

    # data plane clients set DEFAULT_ENDPOINT and ENDPOINT_VARIABLE to None, which makes
    # endpoint a required argument to create
    DEFAULT_ENDPOINT: Optional[str] = DEFAULT_ENDPOINT
    ENDPOINT_VARIABLE: Optional[str] = (
        EnvironmentVariables.AZURE_RESOURCE_MANAGER_ENDPOINT
    )
    DEFAULT_SCOPE: Optional[str] = None

    @classmethod
    def create(
        cls: Type[_TClient],
        credential: Optional[AsyncTokenCredential] = None,
        endpoint: Optional[str] = None,
        scopes: Optional[Sequence[str]] = None,
        transport: Optional[HttpTransport] = None,
    ) -> _TClient:
        """See ClientConfig.create for how the defaults are chosen"""
        return cls(
            ClientConfig.create(
                credential,
                endpoint,
                scopes,
                transport,
                default_endpoint=cls.DEFAULT_ENDPOINT,
                endpoint_variable=cls.ENDPOINT_VARIABLE,
                default_scope=cls.DEFAULT_SCOPE,
            )
        )

    async def close(self) -> None:
        await self._config.close()

    async def __aenter__(self: _TClient) -> _TClient:
        return self

    async def __aexit__(
        self,
        exc_typ: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self.close()
