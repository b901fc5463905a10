from __future__ import annotations

from .formatter import display_decimals, format_price, render_quote, token_symbol

__all__ = [
    "display_decimals",
    "format_price",
    "render_quote",
    "token_symbol",
]
