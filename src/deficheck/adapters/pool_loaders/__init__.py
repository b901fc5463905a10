from __future__ import annotations

from .base import BasePoolLoader
from .catalog import CatalogPoolLoader
from .legacy_rpc import LegacyRPCPoolLoader
from .mock import MockPoolLoader
from .onchain import OnchainPoolLoader

__all__ = [
    "BasePoolLoader",
    "CatalogPoolLoader",
    "LegacyRPCPoolLoader",
    "MockPoolLoader",
    "OnchainPoolLoader",
]
