"""Quote service: locate a pool, load it once, price and format a request."""

from __future__ import annotations

import logging
import threading
from decimal import Decimal, InvalidOperation
from types import MappingProxyType
from typing import Mapping

from .adapters.pool_loaders import (
    BasePoolLoader,
    CatalogPoolLoader,
    LegacyRPCPoolLoader,
    MockPoolLoader,
    OnchainPoolLoader,
)
from .adapters.pool_locators import (
    BasePoolLocator,
    CatalogPoolLocator,
    HardcodedPoolLocator,
    MockPoolLocator,
)
from .clients.catalog import RaydiumCatalogClient
from .clients.rpc import SolanaRPCClient
from .constants import PROTOCOL_NAME
from .domain import PoolDescriptor, QuoteRequest, QuoteResponse, Side
from .errors import InvalidInputError
from .processors.amm_pricing import calculate_price
from .report.formatter import display_decimals, format_price, token_symbol
from .settings import QuoteSettings

logger = logging.getLogger(__name__)


def validate_request(request: QuoteRequest) -> tuple[str, Decimal, Side]:
    """Check a request and return its normalized token, quantity and side.

    Raises:
        InvalidInputError: On an empty token, non-positive quantity or bad side.
    """
    token = (request.token_address or "").strip()
    if not token:
        raise InvalidInputError("token address is required")

    try:
        quantity = Decimal(request.quantity)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInputError(f"invalid quantity: {request.quantity!r}") from None
    if not quantity.is_finite() or quantity <= 0:
        raise InvalidInputError("quantity must be positive")

    return token, quantity, Side.parse(request.side)


class QuoteService:
    """Composes a pool locator with a pool loader and caches loaded pools.

    Pools are cached by address for the lifetime of the service. The cache is
    guarded by a lock, but loading happens outside it; two threads missing on
    the same pool both load it and the last write wins.
    """

    def __init__(self, locator: BasePoolLocator, loader: BasePoolLoader):
        self.locator = locator
        self.loader = loader
        self._pool_cache: dict[str, PoolDescriptor] = {}
        self._cache_lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: QuoteSettings,
        *,
        rpc: SolanaRPCClient | None = None,
        catalog: RaydiumCatalogClient | None = None,
    ) -> QuoteService:
        """Build a service whose pool source follows the strategy flags.

        ``mock`` wins over everything; otherwise ``use_api`` picks the
        catalog locator and ``use_onchain`` picks the vault-balance loader.
        """
        if settings.mock:
            return cls(MockPoolLocator(), MockPoolLoader())

        rpc = rpc or SolanaRPCClient(settings.rpc_url, timeout=settings.rpc_timeout)

        if not settings.use_api:
            if settings.use_onchain:
                return cls(HardcodedPoolLocator(), OnchainPoolLoader(rpc))
            return cls(HardcodedPoolLocator(), LegacyRPCPoolLoader(rpc))

        catalog = catalog or RaydiumCatalogClient(
            settings.catalog_url,
            timeout=settings.catalog_timeout,
            page_size=settings.catalog_page_size,
        )
        loader: BasePoolLoader
        if settings.use_onchain:
            loader = OnchainPoolLoader(rpc)
        else:
            loader = CatalogPoolLoader(catalog)
        return cls(CatalogPoolLocator(catalog), loader)

    @property
    def cached_pools(self) -> Mapping[str, PoolDescriptor]:
        """Read-only view of the pool cache."""
        return MappingProxyType(self._pool_cache)

    def find_pool(self, token_address: str) -> PoolDescriptor:
        location = self.locator.locate(token_address)

        with self._cache_lock:
            cached = self._pool_cache.get(location.pool_address)
        if cached is not None:
            logger.debug("Pool cache hit for %s", location.pool_address)
            return cached

        pool = self.loader.load(location)
        logger.debug(
            "Loaded pool %s via %s: base=%s (%d dec) quote=%s (%d dec)",
            pool.pool_address,
            self.loader.loader_name,
            pool.base_reserve,
            pool.base_decimals,
            pool.quote_reserve,
            pool.quote_decimals,
        )

        with self._cache_lock:
            self._pool_cache[location.pool_address] = pool
        return pool

    def get_quote(self, request: QuoteRequest) -> QuoteResponse:
        """Price a request against its token's pool.

        Raises:
            QuoteError: Any engine error, with the failing pool or endpoint
                in its message.
        """
        token, quantity, side = validate_request(request)

        pool = self.find_pool(token)
        price = calculate_price(pool, quantity, side)

        decimals = display_decimals(price)
        return QuoteResponse(
            price=price,
            price_formatted=format_price(price, decimals),
            token_symbol=token_symbol(token),
            decimals=decimals,
            protocol=PROTOCOL_NAME,
        )
