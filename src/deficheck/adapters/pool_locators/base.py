from __future__ import annotations

from abc import ABC, abstractmethod

from ...domain import PoolLocation


class BasePoolLocator(ABC):
    """Abstract base class for pool locators.

    A locator maps a token mint to the address of the pool it trades in.
    """

    @property
    @abstractmethod
    def locator_name(self) -> str:
        """Return the name of this locator."""
        ...

    @abstractmethod
    def locate(self, token_address: str) -> PoolLocation:
        """Return the pool location for ``token_address``."""
        ...
