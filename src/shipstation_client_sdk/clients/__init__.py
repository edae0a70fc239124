from .base import BaseClient, RequestExecutor
from .stores_client import StoresClient

__all__ = [
    "BaseClient",
    "RequestExecutor",
    "StoresClient",
]
