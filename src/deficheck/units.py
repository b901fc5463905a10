from __future__ import annotations

from decimal import Decimal


def normalize_amount(raw: int, decimals: int) -> Decimal:
    """Convert an integer amount in indivisible units to whole tokens.

    Args:
        raw: Amount in the token's smallest unit.
        decimals: The token's decimal exponent.

    Returns:
        ``raw * 10**-decimals`` as an exact Decimal.
    """
    return Decimal(raw).scaleb(-decimals)


def to_indivisible(amount: float | Decimal | str, decimals: int) -> int:
    """Scale a whole-token amount to indivisible units.

    Args:
        amount: Decimal-denominated amount, e.g. a catalog ``mintAmountA``.
        decimals: The token's decimal exponent.

    Returns:
        The integer part of ``amount * 10**decimals``.

    Notes:
        - Floats are converted through their shortest repr, so the result is
          only as precise as the float the catalog reported.
        - Truncates toward zero.
    """
    return int(Decimal(str(amount)).scaleb(decimals))
