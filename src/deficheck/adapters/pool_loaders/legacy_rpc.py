from __future__ import annotations

import logging

from ...clients.rpc import SolanaRPCClient
from ...domain import PoolDescriptor, PoolLocation
from ...errors import DecodeError
from .base import BasePoolLoader
from .layout import decode_token_account_amount, read_pool_account

logger = logging.getLogger(__name__)


class LegacyRPCPoolLoader(BasePoolLoader):
    """Loads a pool with one getMultipleAccounts call for both vaults.

    Vault amounts are read straight from the SPL token account data.
    """

    def __init__(self, rpc: SolanaRPCClient):
        self.rpc = rpc

    @property
    def loader_name(self) -> str:
        return "legacy_rpc"

    def load(self, location: PoolLocation) -> PoolDescriptor:
        pool_address = location.pool_address
        layout = read_pool_account(self.rpc, pool_address)

        vaults = self.rpc.get_multiple_accounts([layout.base_vault, layout.quote_vault])
        if len(vaults) != 2:
            raise DecodeError(
                f"pool {pool_address}: expected 2 vault accounts, got {len(vaults)}"
            )

        try:
            base_reserve = decode_token_account_amount(vaults[0])
            quote_reserve = decode_token_account_amount(vaults[1])
        except DecodeError as e:
            raise DecodeError(f"pool {pool_address}: failed to read vaults: {e}") from e

        return PoolDescriptor(
            pool_address=pool_address,
            base_mint=layout.base_mint,
            quote_mint=layout.quote_mint,
            base_reserve=base_reserve,
            quote_reserve=quote_reserve,
            base_decimals=layout.base_decimals,
            quote_decimals=layout.quote_decimals,
        )
