"""
Async clients for a handful of Azure services. Each client method returns a request
builder, awaiting it sends the request:

    async with ReservationsClient.create() as client:
        async for order in client.reservation_order().list():
            ...
"""

from azmgmt.core import (
    Accepted202,
    AzureRestApiError,
    ClientConfig,
    Created201,
    NoContent204,
    Ok200,
    ResourceExistsError,
    ResourceModifiedError,
    ResourceNotFoundError,
    ResponseDecodeError,
)
from azmgmt.edgeorder import EdgeOrderClient
from azmgmt.loadtestservice import LoadTestingClient
from azmgmt.migrateprojects import MigrateProjectsClient
from azmgmt.reservations import ReservationsClient
from azmgmt.scvmm import ScVmmClient
from azmgmt.storagesync import StorageSyncClient

__all__ = [
    "Accepted202",
    "AzureRestApiError",
    "ClientConfig",
    "Created201",
    "EdgeOrderClient",
    "LoadTestingClient",
    "MigrateProjectsClient",
    "NoContent204",
    "Ok200",
    "ReservationsClient",
    "ResourceExistsError",
    "ResourceModifiedError",
    "ResourceNotFoundError",
    "ResponseDecodeError",
    "ScVmmClient",
    "StorageSyncClient",
]
