from .client import LoadTestingClient

__all__ = ["LoadTestingClient"]
