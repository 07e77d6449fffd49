from .client import EdgeOrderClient

__all__ = ["EdgeOrderClient"]
