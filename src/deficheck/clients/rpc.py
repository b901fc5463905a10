"""Solana JSON-RPC client.

Single-shot JSON-RPC 2.0 over HTTP POST. Exposes the three account
methods the pool loaders need; there is no retry or backoff.
"""

from __future__ import annotations

import itertools
from typing import Any, TypedDict

import requests

from ..constants import DEFAULT_RPC_URL
from ..errors import DecodeError, RPCError, TransportError
from ..logger import get_logger

logger = get_logger(__name__)


class RPCAccount(TypedDict, total=False):
    """Account object returned with ``encoding: base64``."""

    data: list[str]
    executable: bool
    lamports: int
    owner: str
    rentEpoch: int
    space: int


class RPCContextResult(TypedDict, total=False):
    """Result wrapper shared by getAccountInfo and getTokenAccountBalance."""

    context: dict[str, Any]
    value: Any


class SolanaRPCClient:
    """Client for the Solana JSON-RPC API using the requests library."""

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        *,
        timeout: float | None = 30.0,
        session: requests.Session | None = None,
    ):
        """Initialize the RPC client.

        Args:
            rpc_url: JSON-RPC endpoint URL
            timeout: Per-request deadline in seconds
            session: Optional requests session for connection reuse
        """
        self.rpc_url = rpc_url or DEFAULT_RPC_URL
        self._timeout = timeout
        self._session = session or requests.Session()
        self._ids = itertools.count(1)

    def get_account_info(self, address: str) -> RPCContextResult:
        """Fetch a single account with base64-encoded data.

        Returns:
            The ``result`` object; its ``value`` is ``None`` when the
            account does not exist.
        """
        return self._call("getAccountInfo", [address, {"encoding": "base64"}])

    def get_multiple_accounts(
        self, addresses: list[str]
    ) -> list[RPCAccount | None]:
        """Fetch several accounts in one call.

        Returns:
            ``result.value``, one entry per address, ``None`` for missing
            accounts.

        Raises:
            DecodeError: If ``result.value`` is not a list.
        """
        result = self._call(
            "getMultipleAccounts", [list(addresses), {"encoding": "base64"}]
        )
        value = result.get("value") if isinstance(result, dict) else None
        if not isinstance(value, list):
            raise DecodeError(
                f"getMultipleAccounts returned no account list: {result!r}"
            )
        return value

    def get_token_account_balance(self, address: str) -> RPCContextResult:
        """Fetch the balance of an SPL token account.

        Returns:
            The ``result`` object; ``value.amount`` is a decimal string.
        """
        return self._call("getTokenAccountBalance", [address])

    def _call(self, method: str, params: list[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        logger.debug("RPC %s -> %s", method, self.rpc_url)

        try:
            with self._session.post(
                self.rpc_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            ) as response:
                response.raise_for_status()
                body = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(
                f"{method} failed with HTTP {status}",
                url=self.rpc_url,
                status_code=status,
            ) from e
        except requests.JSONDecodeError as e:
            raise TransportError(
                f"{method} returned malformed JSON", url=self.rpc_url
            ) from e
        except requests.RequestException as e:
            raise TransportError(
                f"{method} request failed: {e}", url=self.rpc_url
            ) from e

        if not isinstance(body, dict):
            raise DecodeError(f"{method}: unexpected RPC response: {body!r}")

        error = body.get("error")
        if error is not None:
            if not isinstance(error, dict):
                raise RPCError(-1, str(error), method=method)
            code = error.get("code")
            raise RPCError(
                code if isinstance(code, int) and not isinstance(code, bool) else -1,
                str(error.get("message", "")),
                method=method,
            )

        if "result" not in body:
            raise DecodeError(f"{method}: RPC response has no result: {body!r}")

        return body["result"]
