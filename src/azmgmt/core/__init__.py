"""
A small, hand-written take on the Azure SDK's core: models, request building, status
handling and paging. This should contain no service-specific code.
"""

from .client import OperationGroup, ServiceClient
from .config import ClientConfig, EnvironmentVariables
from .exceptions import (
    AzureRestApiError,
    ResourceExistsError,
    ResourceModifiedError,
    ResourceNotFoundError,
    ResponseDecodeError,
)
from .models import AzureModel, OpenEnum, decode, encode
from .operation import PageableRequestBuilder, RequestBuilder, Response
from .pager import Pager, PagerState
from .rest_api import Accepted202, Created201, NoContent204, Ok200

__all__ = [
    "Accepted202",
    "AzureModel",
    "AzureRestApiError",
    "ClientConfig",
    "Created201",
    "EnvironmentVariables",
    "NoContent204",
    "Ok200",
    "OpenEnum",
    "OperationGroup",
    "PageableRequestBuilder",
    "Pager",
    "PagerState",
    "RequestBuilder",
    "ResourceExistsError",
    "ResourceModifiedError",
    "ResourceNotFoundError",
    "Response",
    "ResponseDecodeError",
    "ServiceClient",
    "decode",
    "encode",
]
