from __future__ import annotations

from abc import ABC, abstractmethod

from ...domain import PoolDescriptor, PoolLocation


class BasePoolLoader(ABC):
    """Abstract base class for pool loaders.

    A loader turns a located pool into a :class:`PoolDescriptor` with
    integer reserves.
    """

    @property
    @abstractmethod
    def loader_name(self) -> str:
        """Return the name of this loader."""
        ...

    @abstractmethod
    def load(self, location: PoolLocation) -> PoolDescriptor:
        """Load reserves and decimals for the pool at ``location``."""
        ...
