from __future__ import annotations

from .catalog import CatalogPool, CatalogToken, RaydiumCatalogClient, select_sol_pool
from .rpc import SolanaRPCClient

__all__ = [
    "CatalogPool",
    "CatalogToken",
    "RaydiumCatalogClient",
    "SolanaRPCClient",
    "select_sol_pool",
]
