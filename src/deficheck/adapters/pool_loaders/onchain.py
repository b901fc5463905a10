from __future__ import annotations

import logging

from ...clients.rpc import SolanaRPCClient
from ...domain import PoolDescriptor, PoolLocation
from ...errors import DecodeError
from .base import BasePoolLoader
from .layout import parse_token_amount, read_pool_account

logger = logging.getLogger(__name__)


class OnchainPoolLoader(BasePoolLoader):
    """Loads a pool from its AMM v4 account and the balances of its vaults."""

    def __init__(self, rpc: SolanaRPCClient):
        self.rpc = rpc

    @property
    def loader_name(self) -> str:
        return "onchain"

    def load(self, location: PoolLocation) -> PoolDescriptor:
        pool_address = location.pool_address
        logger.info("Using onchain data for pool %s", pool_address)
        layout = read_pool_account(self.rpc, pool_address)

        reserves: list[int] = []
        for label, vault in (("base", layout.base_vault), ("quote", layout.quote_vault)):
            balance = self.rpc.get_token_account_balance(vault)
            try:
                reserves.append(parse_token_amount(balance))
            except DecodeError as e:
                raise DecodeError(
                    f"pool {pool_address}: failed to extract {label} reserve "
                    f"from vault {vault}: {e}"
                ) from e

        base_reserve, quote_reserve = reserves
        logger.debug(
            "Pool %s vault balances: base=%s quote=%s",
            pool_address,
            base_reserve,
            quote_reserve,
        )
        return PoolDescriptor(
            pool_address=pool_address,
            base_mint=layout.base_mint,
            quote_mint=layout.quote_mint,
            base_reserve=base_reserve,
            quote_reserve=quote_reserve,
            base_decimals=layout.base_decimals,
            quote_decimals=layout.quote_decimals,
        )
