from __future__ import annotations

from .base import BasePoolLocator
from .catalog import CatalogPoolLocator
from .hardcoded import HardcodedPoolLocator
from .mock import MockPoolLocator

__all__ = [
    "BasePoolLocator",
    "CatalogPoolLocator",
    "HardcodedPoolLocator",
    "MockPoolLocator",
]
