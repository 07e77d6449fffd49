from .client import StorageSyncClient

__all__ = ["StorageSyncClient"]
