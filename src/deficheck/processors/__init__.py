from __future__ import annotations

from .amm_pricing import calculate_price, marginal_price

__all__ = [
    "calculate_price",
    "marginal_price",
]
