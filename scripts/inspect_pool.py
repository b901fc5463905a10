#!/usr/bin/env python3
"""Standalone script comparing the legacy and onchain reserve reads of a pool."""

from __future__ import annotations

import sys
from argparse import ArgumentParser

from deficheck.adapters.pool_loaders import LegacyRPCPoolLoader, OnchainPoolLoader
from deficheck.adapters.pool_loaders.layout import read_pool_account
from deficheck.clients.rpc import SolanaRPCClient
from deficheck.constants import DEFAULT_RPC_URL
from deficheck.domain import PoolLocation
from deficheck.errors import QuoteError
from deficheck.logger import get_logger, setup_logging
from deficheck.processors.amm_pricing import marginal_price

setup_logging()
logger = get_logger(__name__)


def inspect_pool(pool_address: str, rpc_url: str, timeout: float) -> int:
    """Decode a pool account and load its reserves with both RPC loaders.

    Args:
        pool_address: Raydium AMM v4 pool account
        rpc_url: Solana JSON-RPC endpoint
        timeout: Per-request deadline in seconds

    Returns:
        0 when both loaders agree on the reserves, 1 otherwise.
    """
    rpc = SolanaRPCClient(rpc_url, timeout=timeout)
    location = PoolLocation(pool_address)

    layout = read_pool_account(rpc, pool_address)
    logger.info("=== Pool %s ===", pool_address)
    logger.info("Base mint:   %s (%d decimals)", layout.base_mint, layout.base_decimals)
    logger.info("Quote mint:  %s (%d decimals)", layout.quote_mint, layout.quote_decimals)
    logger.info("Base vault:  %s", layout.base_vault)
    logger.info("Quote vault: %s", layout.quote_vault)
    logger.info("=" * 60)

    legacy = LegacyRPCPoolLoader(rpc).load(location)
    onchain = OnchainPoolLoader(rpc).load(location)

    for name, pool in (("legacy_rpc", legacy), ("onchain", onchain)):
        logger.info(
            "%-10s base=%d quote=%d spot=%s",
            name,
            pool.base_reserve,
            pool.quote_reserve,
            marginal_price(pool),
        )

    agree = (legacy.base_reserve, legacy.quote_reserve) == (
        onchain.base_reserve,
        onchain.quote_reserve,
    )
    logger.info("Reserves agree: %s", agree)
    return 0 if agree else 1


def main() -> int:
    """Parse arguments and run the inspection."""
    parser = ArgumentParser(
        description="Compare getMultipleAccounts and getTokenAccountBalance reserve reads"
    )
    parser.add_argument("pool_address", help="Raydium AMM v4 pool address")
    parser.add_argument("--rpc", default=DEFAULT_RPC_URL, help="Solana RPC URL")
    parser.add_argument(
        "--timeout", type=float, default=30.0, help="Per-request timeout in seconds"
    )
    args = parser.parse_args()

    try:
        return inspect_pool(args.pool_address, args.rpc, args.timeout)
    except KeyboardInterrupt:
        logger.info("\nInspection interrupted by user")
        return 130
    except QuoteError as e:
        logger.error("Inspection failed: %s", e, exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
