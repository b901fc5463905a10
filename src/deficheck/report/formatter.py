"""Display precision, token symbols and console rendering for quotes."""

from __future__ import annotations

from decimal import Decimal

from rich.console import Console

from ..constants import KNOWN_TOKENS
from ..domain import QuoteRequest, QuoteResponse, Side

BANNER = "===== QUOTE RESULT ====="
FOOTER = "======================="


def display_decimals(price: Decimal) -> int:
    """Choose fractional digits from the price magnitude."""
    if price < Decimal("0.01"):
        return 8
    if price < 1:
        return 6
    if price < 100:
        return 4
    return 2


def format_price(price: Decimal, decimals: int) -> str:
    """Render ``price`` as fixed-point with ``decimals`` fractional digits."""
    return f"{Decimal(price):.{decimals}f}"


def token_symbol(address: str) -> str:
    """Get symbol for a mint, or truncated address if unknown."""
    symbol = KNOWN_TOKENS.get(address.lower())
    if symbol is not None:
        return symbol
    if len(address) > 8:
        return f"{address[:4]}...{address[-4:]}"
    return address


def render_quote(
    response: QuoteResponse,
    request: QuoteRequest,
    console: Console | None = None,
) -> None:
    """Print the quote as a banner followed by key/value lines.

    Args:
        response: The priced quote
        request: The request it answers, for side and quantity
        console: Optional console; defaults to stdout
    """
    console = console or Console(highlight=False, soft_wrap=True, markup=False)
    side = Side.parse(request.side).value

    console.print()
    console.print(BANNER, style="bold")
    console.print(f"Protocol: {response.protocol}")
    console.print(f"Token: {response.token_symbol}")
    console.print(f"Side: {side}")
    console.print(f"Quantity: {request.quantity}")
    console.print(f"Price: {response.price_formatted} SOL", style="green")
    console.print(f"Decimals: {response.decimals}")
    console.print(FOOTER, style="bold")
