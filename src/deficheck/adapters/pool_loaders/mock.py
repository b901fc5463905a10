from __future__ import annotations

from ...constants import MOCK_POOLS
from ...domain import PoolDescriptor, PoolLocation
from ...errors import UnknownPoolError
from .base import BasePoolLoader


class MockPoolLoader(BasePoolLoader):
    """Serves the static in-memory pools; never touches the network."""

    def __init__(self) -> None:
        self._pools = {
            pool["pool_address"]: PoolDescriptor(**pool) for pool in MOCK_POOLS.values()
        }

    @property
    def loader_name(self) -> str:
        return "mock"

    def load(self, location: PoolLocation) -> PoolDescriptor:
        try:
            return self._pools[location.pool_address]
        except KeyError:
            raise UnknownPoolError(
                f"no mock pool available at {location.pool_address}"
            ) from None
