"""Raydium constant-product quote engine and number-padding utility."""

from __future__ import annotations

from .domain import PoolDescriptor, QuoteRequest, QuoteResponse, Side
from .padding import pad_numbers
from .service import QuoteService

__all__ = [
    "PoolDescriptor",
    "QuoteRequest",
    "QuoteResponse",
    "QuoteService",
    "Side",
    "pad_numbers",
]
