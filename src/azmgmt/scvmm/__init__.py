from .client import ScVmmClient

__all__ = ["ScVmmClient"]
