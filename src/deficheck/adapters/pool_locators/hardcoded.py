from __future__ import annotations

import logging

from ...constants import KNOWN_POOLS
from ...domain import PoolLocation
from ...errors import UnknownPoolError
from .base import BasePoolLocator

logger = logging.getLogger(__name__)


class HardcodedPoolLocator(BasePoolLocator):
    """Looks pools up in the built-in mint -> pool map."""

    def __init__(self, known_pools: dict[str, str] | None = None):
        pools = KNOWN_POOLS if known_pools is None else known_pools
        self._pools = {mint.lower(): address for mint, address in pools.items()}

    @property
    def locator_name(self) -> str:
        return "hardcoded"

    def locate(self, token_address: str) -> PoolLocation:
        pool_address = self._pools.get(token_address.lower())
        if pool_address is None:
            raise UnknownPoolError(f"no known pool for token {token_address}")

        logger.info(
            "Using hardcoded pool address: %s for token %s", pool_address, token_address
        )
        return PoolLocation(pool_address=pool_address)
