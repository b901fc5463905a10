"""Constant-product (x * y = k) pricing without fees."""

from __future__ import annotations

from decimal import Context, Decimal, localcontext

from ..domain import PoolDescriptor, Side
from ..errors import EmptyPoolError, InsufficientDepthError, InvalidInputError
from ..units import normalize_amount

PRICING_PRECISION = 50


def _normalized_reserves(pool: PoolDescriptor) -> tuple[Decimal, Decimal]:
    if pool.base_reserve == 0 or pool.quote_reserve == 0:
        raise EmptyPoolError(
            f"pool {pool.pool_address} has zero reserves - "
            "pool may be inactive or not initialized"
        )

    base = normalize_amount(pool.base_reserve, pool.base_decimals)
    quote = normalize_amount(pool.quote_reserve, pool.quote_decimals)
    if base <= 0 or quote <= 0:
        raise EmptyPoolError(
            f"pool {pool.pool_address} reserves are too small after decimal conversion"
        )
    return base, quote


def marginal_price(pool: PoolDescriptor) -> Decimal:
    """Base units per quote unit for an infinitesimal trade."""
    base, quote = _normalized_reserves(pool)
    with localcontext(Context(prec=PRICING_PRECISION)):
        return base / quote


def calculate_price(
    pool: PoolDescriptor, quantity: Decimal, side: Side | str
) -> Decimal:
    """Price ``quantity`` units of the quote asset against ``pool``.

    Args:
        pool: Pool with integer reserves.
        quantity: Quote-asset amount, strictly positive.
        side: ``buy`` removes ``quantity`` quote from the pool and returns
            the base paid; ``sell`` adds it and returns the base received.

    Returns:
        The base-asset amount, slippage included.

    Raises:
        InvalidInputError: On an unknown side or non-positive quantity.
        EmptyPoolError: If either reserve is zero.
        InsufficientDepthError: If a buy would drain the quote reserve.
    """
    side = Side.parse(side)
    quantity = Decimal(quantity)
    if not quantity.is_finite() or quantity <= 0:
        raise InvalidInputError(f"quantity must be positive, got {quantity}")

    base, quote = _normalized_reserves(pool)

    with localcontext(Context(prec=PRICING_PRECISION)):
        k = base * quote
        if side is Side.BUY:
            new_quote = quote - quantity
            if new_quote <= 0:
                raise InsufficientDepthError(
                    f"insufficient pool depth in {pool.pool_address}: "
                    f"buying {quantity} exceeds quote reserve {quote}"
                )
            return k / new_quote - base

        new_quote = quote + quantity
        return base - k / new_quote
