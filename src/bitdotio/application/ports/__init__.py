"""Application ports - interfaces for external adapters."""

from bitdotio.application.ports.api_client import APIClient, FileParts
from bitdotio.application.ports.pool_factory import PoolFactory

__all__ = [
    "APIClient",
    "FileParts",
    "PoolFactory",
]
