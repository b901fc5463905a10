from __future__ import annotations

import logging

from ...clients.catalog import CatalogPool, RaydiumCatalogClient
from ...domain import PoolDescriptor, PoolLocation
from ...errors import DecodeError
from ...units import to_indivisible
from .base import BasePoolLoader

logger = logging.getLogger(__name__)


def catalog_pool_to_descriptor(pool: CatalogPool) -> PoolDescriptor:
    """Convert a catalog record to integer reserves; mintA is base, mintB quote.

    Catalog amounts are floats, so reserves carry float precision at best.
    The orientation is taken as listed and never swapped.

    Raises:
        DecodeError: If the amounts cannot form valid reserves.
    """
    try:
        return PoolDescriptor(
            pool_address=pool.id,
            base_mint=pool.mint_a.address,
            quote_mint=pool.mint_b.address,
            base_reserve=to_indivisible(pool.mint_amount_a, pool.mint_a.decimals),
            quote_reserve=to_indivisible(pool.mint_amount_b, pool.mint_b.decimals),
            base_decimals=pool.mint_a.decimals,
            quote_decimals=pool.mint_b.decimals,
        )
    except (ArithmeticError, ValueError) as e:
        raise DecodeError(f"pool {pool.id}: invalid catalog reserves: {e}") from e


class CatalogPoolLoader(BasePoolLoader):
    """Loads reserves from the catalog-reported decimal amounts."""

    def __init__(self, catalog: RaydiumCatalogClient):
        self.catalog = catalog

    @property
    def loader_name(self) -> str:
        return "catalog"

    def load(self, location: PoolLocation) -> PoolDescriptor:
        pool = location.catalog_pool
        if pool is None or pool.id != location.pool_address:
            pool = self.catalog.get_pool_by_id(location.pool_address)
        return catalog_pool_to_descriptor(pool)
