"""Solana mint, pool and endpoint constants."""

from typing import TypedDict


class MockPool(TypedDict):
    """Static reserves for an in-memory pool."""

    pool_address: str
    base_mint: str
    quote_mint: str
    base_reserve: int
    quote_reserve: int
    base_decimals: int
    quote_decimals: int


PROTOCOL_NAME = "Raydium"

WSOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
USDT_MINT = "Es9vMFrzaCERmJfrF4H2FYD4KCoNkY11McCe8BenwNYB"

DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
DEFAULT_CATALOG_URL = "https://api-v3.raydium.io"

CATALOG_TIMEOUT_SECONDS = 10.0
CATALOG_PAGE_SIZE = 20

# Keys are lower-cased mints
KNOWN_TOKENS: dict[str, str] = {
    USDC_MINT.lower(): "USDC",
    USDT_MINT.lower(): "USDT",
    WSOL_MINT.lower(): "SOL",
}

# Hardcoded Raydium AMM v4 pools paired with SOL
KNOWN_POOLS: dict[str, str] = {
    USDC_MINT.lower(): "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2",
    USDT_MINT.lower(): "7XawhbbxtsRcQA8KTkHT9f9nc6d69UwqCDh6U5EEbEmX",
}

MOCK_POOLS: dict[str, MockPool] = {
    USDC_MINT.lower(): {
        "pool_address": "6UmmUiYoBjSrhakAobJw8BvkmJtDVxaeBtbt7rxWo1mg",
        "base_mint": USDC_MINT,
        "quote_mint": WSOL_MINT,
        "base_reserve": 50_000_000_000_000,
        "quote_reserve": 1_000_000_000_000,
        "base_decimals": 6,
        "quote_decimals": 9,
    },
    USDT_MINT.lower(): {
        "pool_address": "7XawhbbxtsRcQA8KTkHT9f9nc6d69UwqCDh6U5EEbEmX",
        "base_mint": USDT_MINT,
        "quote_mint": WSOL_MINT,
        "base_reserve": 30_000_000_000_000,
        "quote_reserve": 600_000_000_000,
        "base_decimals": 6,
        "quote_decimals": 9,
    },
}

# Raydium AMM v4 liquidity state layout (little-endian)
AMM_V4_MIN_LENGTH = 600
AMM_V4_BASE_DECIMALS_OFFSET = 32
AMM_V4_QUOTE_DECIMALS_OFFSET = 40
AMM_V4_BASE_VAULT_OFFSET = 336
AMM_V4_QUOTE_VAULT_OFFSET = 368
AMM_V4_BASE_MINT_OFFSET = 400
AMM_V4_QUOTE_MINT_OFFSET = 432

PUBKEY_LENGTH = 32
MAX_TOKEN_DECIMALS = 18

# SPL token account: mint(32) owner(32) amount(u64)
TOKEN_ACCOUNT_AMOUNT_OFFSET = 64
