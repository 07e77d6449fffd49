from .client import MigrateProjectsClient

__all__ = ["MigrateProjectsClient"]
