from __future__ import annotations

import logging

from ...clients.catalog import RaydiumCatalogClient
from ...domain import PoolLocation
from .base import BasePoolLocator

logger = logging.getLogger(__name__)


class CatalogPoolLocator(BasePoolLocator):
    """Searches the REST catalog for the deepest SOL-paired pool."""

    def __init__(self, catalog: RaydiumCatalogClient):
        self.catalog = catalog

    @property
    def locator_name(self) -> str:
        return "catalog"

    def locate(self, token_address: str) -> PoolLocation:
        logger.info("Searching for pool via Raydium API for token: %s", token_address)
        pool = self.catalog.find_pool_by_token(token_address)
        logger.info(
            "Found pool via v3 API: %s (%s-%s) with TVL $%.2f",
            pool.id,
            pool.mint_a.symbol,
            pool.mint_b.symbol,
            pool.tvl,
        )
        return PoolLocation(pool_address=pool.id, catalog_pool=pool)
