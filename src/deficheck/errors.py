"""Error kinds raised by the quote engine."""

from __future__ import annotations


class QuoteError(Exception):
    """Base class for every error the quote engine raises."""


class InvalidInputError(QuoteError):
    """Raised when a quote request or CLI argument is invalid."""


class UnknownPoolError(QuoteError):
    """Raised when no pool can be located for a token."""


class PoolNotFoundError(UnknownPoolError):
    """Raised when the RPC node reports no account at a pool address."""

    def __init__(self, pool_address: str):
        super().__init__(f"pool account not found: {pool_address}")
        self.pool_address = pool_address


class TransportError(QuoteError):
    """Raised on connectivity failures, non-2xx responses or malformed JSON."""

    def __init__(self, message: str, *, url: str, status_code: int | None = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code


class RPCError(QuoteError):
    """Raised when a JSON-RPC response carries an ``error`` object."""

    def __init__(self, code: int, message: str, *, method: str | None = None):
        prefix = f"{method}: " if method else ""
        super().__init__(f"{prefix}RPC error: {message} (code: {code})")
        self.code = code
        self.rpc_message = message
        self.method = method


class DecodeError(QuoteError):
    """Raised when account data or a remote payload cannot be decoded."""


class EmptyPoolError(QuoteError):
    """Raised when a pool has a zero reserve."""


class InsufficientDepthError(QuoteError):
    """Raised when a buy would drain the pool's quote reserve."""
