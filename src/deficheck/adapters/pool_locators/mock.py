from __future__ import annotations

from ...constants import MOCK_POOLS
from ...domain import PoolLocation
from ...errors import UnknownPoolError
from .base import BasePoolLocator


class MockPoolLocator(BasePoolLocator):
    """Maps the two mock mints to their in-memory pools."""

    @property
    def locator_name(self) -> str:
        return "mock"

    def locate(self, token_address: str) -> PoolLocation:
        pool = MOCK_POOLS.get(token_address.lower())
        if pool is None:
            raise UnknownPoolError(f"no mock pool available for token {token_address}")
        return PoolLocation(pool_address=pool["pool_address"])
