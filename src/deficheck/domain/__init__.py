"""Domain models for the quote engine."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from ..constants import MAX_TOKEN_DECIMALS
from ..errors import InvalidInputError

if TYPE_CHECKING:
    from ..clients.catalog import CatalogPool


class Side(str, Enum):
    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: str | Side) -> Side:
        """Normalize a case-insensitive side string."""
        if isinstance(value, Side):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidInputError(
                f"invalid side: {value} (must be 'buy' or 'sell')"
            ) from None


@dataclass(frozen=True)
class QuoteRequest:
    """A request to price ``quantity`` units of the quote asset."""

    token_address: str
    quantity: Decimal
    side: Side | str


@dataclass(frozen=True)
class PoolDescriptor:
    """Reserves of one AMM pool, in indivisible units."""

    pool_address: str
    base_mint: str
    quote_mint: str
    base_reserve: int
    quote_reserve: int
    base_decimals: int
    quote_decimals: int

    def __post_init__(self) -> None:
        if self.base_reserve < 0 or self.quote_reserve < 0:
            raise ValueError(
                f"Pool {self.pool_address} has a negative reserve: "
                f"{self.base_reserve}/{self.quote_reserve}"
            )
        for decimals in (self.base_decimals, self.quote_decimals):
            if not 0 <= decimals <= MAX_TOKEN_DECIMALS:
                raise ValueError(
                    f"Pool {self.pool_address} decimals {decimals} outside "
                    f"[0, {MAX_TOKEN_DECIMALS}]"
                )


@dataclass(frozen=True)
class QuoteResponse:
    """A priced and formatted quote."""

    price: Decimal
    price_formatted: str
    token_symbol: str
    decimals: int
    protocol: str


@dataclass(frozen=True)
class PoolLocation:
    """Where a token's pool lives, plus the catalog record if one was fetched."""

    pool_address: str
    catalog_pool: CatalogPool | None = None
