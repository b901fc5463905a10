"""Raydium v3 REST catalog client for pool discovery."""

from __future__ import annotations

from typing import Any, Iterable

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..constants import (
    CATALOG_PAGE_SIZE,
    CATALOG_TIMEOUT_SECONDS,
    DEFAULT_CATALOG_URL,
    WSOL_MINT,
)
from ..errors import DecodeError, TransportError, UnknownPoolError
from ..logger import get_logger

logger = get_logger(__name__)


class CatalogToken(BaseModel):
    """One side of a catalog pool."""

    address: str
    symbol: str = ""
    name: str = ""
    decimals: int = Field(ge=0, le=18)

    model_config = ConfigDict(extra="ignore")


class CatalogPool(BaseModel):
    """Pool record as reported by the catalog; amounts are decimal floats."""

    id: str
    type: str = ""
    program_id: str = Field(default="", alias="programId")
    mint_a: CatalogToken = Field(alias="mintA")
    mint_b: CatalogToken = Field(alias="mintB")
    price: float = 0.0
    mint_amount_a: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, alias="mintAmountA"
    )
    mint_amount_b: float = Field(
        default=0.0, ge=0, allow_inf_nan=False, alias="mintAmountB"
    )
    fee_rate: float = Field(default=0.0, alias="feeRate")
    tvl: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    liquidity: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @property
    def liquidity_key(self) -> float:
        """Ranking key: reported liquidity, or TVL when liquidity is zero."""
        return self.liquidity if self.liquidity > 0 else self.tvl

    def is_paired_with(self, mint: str) -> bool:
        mint = mint.lower()
        return self.mint_a.address.lower() == mint or self.mint_b.address.lower() == mint


def select_sol_pool(pools: Iterable[CatalogPool]) -> CatalogPool | None:
    """Pick the SOL-paired pool with the largest liquidity key.

    Ties keep the first pool seen; a zero key never wins.
    """
    best: CatalogPool | None = None
    best_key = 0.0
    for pool in pools:
        if not pool.is_paired_with(WSOL_MINT):
            continue
        key = pool.liquidity_key
        if key > best_key:
            best, best_key = pool, key
    return best


class RaydiumCatalogClient:
    """Client for the Raydium v3 pool catalog using the requests library."""

    def __init__(
        self,
        base_url: str = DEFAULT_CATALOG_URL,
        *,
        timeout: float = CATALOG_TIMEOUT_SECONDS,
        page_size: int = CATALOG_PAGE_SIZE,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._page_size = page_size
        self._session = session or requests.Session()

    def get_pool_by_id(self, pool_id: str) -> CatalogPool:
        """Fetch the full catalog record for one pool.

        Raises:
            UnknownPoolError: If the catalog has no record for ``pool_id``.
            TransportError: If the request fails.
            DecodeError: If the record does not match the expected shape.
        """
        url = f"{self.base_url}/pools/info/ids"
        body = self._get(url, {"ids": pool_id})

        data = body.get("data")
        if not body.get("success") or not isinstance(data, list) or not data:
            raise UnknownPoolError(f"no pool data found for ID: {pool_id}")
        if data[0] is None:
            raise UnknownPoolError(f"pool not found for ID: {pool_id}")

        try:
            return CatalogPool.model_validate(data[0])
        except ValidationError as e:
            raise DecodeError(f"invalid catalog record for pool {pool_id}: {e}") from e

    def find_pool_by_token(self, mint: str) -> CatalogPool:
        """Find the deepest SOL-paired pool for ``mint``.

        The search listing is ranked locally, then the winner is re-fetched
        with :meth:`get_pool_by_id` so callers always get the full record.

        Raises:
            UnknownPoolError: If no SOL-paired pool is listed.
        """
        url = f"{self.base_url}/pools/info/mint"
        params = {
            "mint1": mint,
            "poolType": "all",
            "poolSortField": "liquidity",
            "sortType": "desc",
            "pageSize": self._page_size,
            "page": 1,
        }
        body = self._get(url, params)

        listing = body.get("data")
        entries = listing.get("data") if isinstance(listing, dict) else None
        if not body.get("success") or not entries:
            raise UnknownPoolError(f"no pools found for token {mint}")

        pools: list[CatalogPool] = []
        for entry in entries:
            try:
                pools.append(CatalogPool.model_validate(entry))
            except ValidationError as e:
                logger.debug("Skipping malformed catalog entry for %s: %s", mint, e)

        best = select_sol_pool(pools)
        if best is None:
            raise UnknownPoolError(f"no pool found for token {mint} paired with SOL")

        logger.debug(
            "Best SOL pool for %s: %s (key %.2f) out of %d candidates",
            mint,
            best.id,
            best.liquidity_key,
            len(pools),
        )
        return self.get_pool_by_id(best.id)

    def _get(self, url: str, params: dict[str, Any]) -> dict[str, Any]:
        logger.debug("Calling %s with %s", url, params)
        try:
            with self._session.get(url, params=params, timeout=self._timeout) as response:
                response.raise_for_status()
                body = response.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise TransportError(
                f"API request failed with status {status}", url=url, status_code=status
            ) from e
        except requests.JSONDecodeError as e:
            raise TransportError("Invalid JSON from catalog API", url=url) from e
        except requests.RequestException as e:
            raise TransportError(f"Catalog request failed: {e}", url=url) from e

        if not isinstance(body, dict):
            raise DecodeError(f"Invalid response structure from {url}: {body!r}")
        return body
