from __future__ import annotations

import base64
import os
import struct
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from deficheck.codec import b58decode, b58encode
from deficheck.constants import (
    AMM_V4_BASE_DECIMALS_OFFSET,
    AMM_V4_BASE_MINT_OFFSET,
    AMM_V4_BASE_VAULT_OFFSET,
    AMM_V4_QUOTE_DECIMALS_OFFSET,
    AMM_V4_QUOTE_MINT_OFFSET,
    AMM_V4_QUOTE_VAULT_OFFSET,
    USDC_MINT,
    WSOL_MINT,
)

BASE_VAULT = b58encode(bytes(range(1, 33)))
QUOTE_VAULT = b58encode(bytes(range(101, 133)))


def make_response(
    json_data: Any = None,
    *,
    status_code: int = 200,
    json_error: Exception | None = None,
) -> MagicMock:
    """Build a requests.Response stand-in usable as a context manager."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.__enter__.return_value = response
    response.__exit__.return_value = False
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


def build_pool_account(
    *,
    base_decimals: int = 6,
    quote_decimals: int = 9,
    base_mint: str = USDC_MINT,
    quote_mint: str = WSOL_MINT,
    base_vault: str = BASE_VAULT,
    quote_vault: str = QUOTE_VAULT,
    length: int = 752,
) -> bytes:
    """Serialize the pricing fields of an AMM v4 pool account."""
    data = bytearray(length)
    struct.pack_into("<Q", data, AMM_V4_BASE_DECIMALS_OFFSET, base_decimals)
    struct.pack_into("<Q", data, AMM_V4_QUOTE_DECIMALS_OFFSET, quote_decimals)
    data[AMM_V4_BASE_VAULT_OFFSET : AMM_V4_BASE_VAULT_OFFSET + 32] = b58decode(base_vault)
    data[AMM_V4_QUOTE_VAULT_OFFSET : AMM_V4_QUOTE_VAULT_OFFSET + 32] = b58decode(quote_vault)
    data[AMM_V4_BASE_MINT_OFFSET : AMM_V4_BASE_MINT_OFFSET + 32] = b58decode(base_mint)
    data[AMM_V4_QUOTE_MINT_OFFSET : AMM_V4_QUOTE_MINT_OFFSET + 32] = b58decode(quote_mint)
    return bytes(data)


def account_info_result(data: bytes | None) -> dict[str, Any]:
    """Wrap raw bytes the way getAccountInfo returns them."""
    if data is None:
        return {"context": {"slot": 1}, "value": None}
    return {
        "context": {"slot": 1},
        "value": {
            "data": [base64.b64encode(data).decode("ascii"), "base64"],
            "executable": False,
            "lamports": 6124800,
            "owner": "675kPX9MHTjS2zt1qfr1NYHuzeLXfQM9H24wFSUt1Mp8",
            "rentEpoch": 0,
        },
    }


def token_account(amount: int) -> dict[str, Any]:
    """SPL token account (mint, owner, amount, ...) as getMultipleAccounts returns it."""
    data = bytes(32) + bytes(32) + struct.pack("<Q", amount) + bytes(165 - 72)
    return {"data": [base64.b64encode(data).decode("ascii"), "base64"]}


def token_balance(amount: str, decimals: int = 6) -> dict[str, Any]:
    """getTokenAccountBalance result for ``amount`` indivisible units."""
    return {
        "context": {"slot": 1},
        "value": {"amount": amount, "decimals": decimals, "uiAmountString": amount},
    }


@pytest.fixture
def pool_account() -> bytes:
    return build_pool_account()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep real env vars, .env and config files out of every test."""
    for name in list(os.environ):
        if name.startswith("DEFICHECK_") or name == "LOG_LEVEL":
            monkeypatch.delenv(name)
    workdir = tmp_path_factory.mktemp("cwd")
    monkeypatch.chdir(workdir)
    monkeypatch.setenv("HOME", str(workdir))
    return workdir
