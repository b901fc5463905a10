from __future__ import annotations

from .pool_loaders import (
    BasePoolLoader,
    CatalogPoolLoader,
    LegacyRPCPoolLoader,
    MockPoolLoader,
    OnchainPoolLoader,
)
from .pool_locators import (
    BasePoolLocator,
    CatalogPoolLocator,
    HardcodedPoolLocator,
    MockPoolLocator,
)

__all__ = [
    "BasePoolLoader",
    "BasePoolLocator",
    "CatalogPoolLoader",
    "CatalogPoolLocator",
    "HardcodedPoolLocator",
    "LegacyRPCPoolLoader",
    "MockPoolLoader",
    "MockPoolLocator",
    "OnchainPoolLoader",
]
