"""Raydium AMM v4 and SPL token account layouts."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any

from ...clients.rpc import SolanaRPCClient
from ...codec import b58encode, b64decode_account_data
from ...constants import (
    AMM_V4_BASE_DECIMALS_OFFSET,
    AMM_V4_BASE_MINT_OFFSET,
    AMM_V4_BASE_VAULT_OFFSET,
    AMM_V4_MIN_LENGTH,
    AMM_V4_QUOTE_DECIMALS_OFFSET,
    AMM_V4_QUOTE_MINT_OFFSET,
    AMM_V4_QUOTE_VAULT_OFFSET,
    MAX_TOKEN_DECIMALS,
    PUBKEY_LENGTH,
    TOKEN_ACCOUNT_AMOUNT_OFFSET,
)
from ...errors import DecodeError, PoolNotFoundError

U64 = struct.Struct("<Q")


@dataclass(frozen=True)
class AmmV4Layout:
    """The fields of an AMM v4 liquidity state needed for pricing."""

    base_decimals: int
    quote_decimals: int
    base_mint: str
    quote_mint: str
    base_vault: str
    quote_vault: str


def _pubkey(data: bytes, offset: int) -> str:
    return b58encode(data[offset : offset + PUBKEY_LENGTH])


def _decimals(data: bytes, offset: int, name: str) -> int:
    (value,) = U64.unpack_from(data, offset)
    if value > MAX_TOKEN_DECIMALS:
        raise DecodeError(f"{name} {value} outside [0, {MAX_TOKEN_DECIMALS}]")
    return value


def decode_amm_v4(data: bytes) -> AmmV4Layout:
    """Decode the pricing fields of a Raydium AMM v4 pool account.

    Args:
        data: Raw account data.

    Raises:
        DecodeError: If the data is shorter than the layout or the decimals
            are out of range.
    """
    if len(data) < AMM_V4_MIN_LENGTH:
        raise DecodeError(
            f"pool data too short: {len(data)} bytes (expected at least {AMM_V4_MIN_LENGTH})"
        )

    return AmmV4Layout(
        base_decimals=_decimals(data, AMM_V4_BASE_DECIMALS_OFFSET, "base_decimals"),
        quote_decimals=_decimals(data, AMM_V4_QUOTE_DECIMALS_OFFSET, "quote_decimals"),
        base_mint=_pubkey(data, AMM_V4_BASE_MINT_OFFSET),
        quote_mint=_pubkey(data, AMM_V4_QUOTE_MINT_OFFSET),
        base_vault=_pubkey(data, AMM_V4_BASE_VAULT_OFFSET),
        quote_vault=_pubkey(data, AMM_V4_QUOTE_VAULT_OFFSET),
    )


def read_pool_account(rpc: SolanaRPCClient, pool_address: str) -> AmmV4Layout:
    """Fetch a pool account over RPC and decode its layout.

    Raises:
        PoolNotFoundError: If the node has no account at ``pool_address``.
        DecodeError: If the account data is missing or malformed.
    """
    result = rpc.get_account_info(pool_address)
    value = result.get("value") if isinstance(result, dict) else None
    if value is None:
        raise PoolNotFoundError(pool_address)
    if not isinstance(value, dict) or "data" not in value:
        raise DecodeError(f"pool {pool_address}: account has no data field")

    data = b64decode_account_data(value["data"])
    try:
        return decode_amm_v4(data)
    except DecodeError as e:
        raise DecodeError(f"pool {pool_address}: {e}") from e


def parse_token_amount(balance: Any) -> int:
    """Extract ``value.amount`` from a getTokenAccountBalance result.

    Raises:
        DecodeError: If the amount is missing or not a decimal integer string.
    """
    value = balance.get("value") if isinstance(balance, dict) else None
    if not isinstance(value, dict):
        raise DecodeError(f"invalid balance response format: {balance!r}")

    amount = value.get("amount")
    if not isinstance(amount, str):
        raise DecodeError("amount field not found or not a string")
    if not amount.isascii() or not amount.isdigit():
        raise DecodeError(f"failed to parse amount: {amount!r}")
    return int(amount)


def decode_token_account_amount(account: Any) -> int:
    """Read the u64 amount from raw SPL token account data.

    Raises:
        DecodeError: If the account is missing or too short for the layout.
    """
    if not isinstance(account, dict):
        raise DecodeError("token account not found")

    data = b64decode_account_data(account.get("data"))
    if len(data) < TOKEN_ACCOUNT_AMOUNT_OFFSET + U64.size:
        raise DecodeError(
            f"token account data too short: {len(data)} bytes "
            f"(expected at least {TOKEN_ACCOUNT_AMOUNT_OFFSET + U64.size})"
        )
    (amount,) = U64.unpack_from(data, TOKEN_ACCOUNT_AMOUNT_OFFSET)
    return amount
