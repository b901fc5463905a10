"""Application state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .service import QuoteService
from .settings import QuoteSettings


@dataclass
class AppState:
    """Settings, logger and the quote service wired from them.

    The service is built on first use, so ``--show-config`` and argument
    errors never construct HTTP clients.
    """

    settings: QuoteSettings
    logger: logging.Logger
    _service: QuoteService | None = field(default=None, init=False, repr=False)

    @property
    def service(self) -> QuoteService:
        if self._service is None:
            self._service = QuoteService.from_settings(self.settings)
        return self._service

    def log_pool_source(self) -> None:
        """Announce which pool source the service will use."""
        if self.settings.mock:
            self.logger.info("Using mock data...")
        else:
            if self.settings.use_api:
                self.logger.info("API mode enabled - will search for pools dynamically")
            if self.settings.use_onchain:
                self.logger.info("Onchain mode enabled - will fetch all data from blockchain")
        self.logger.debug("Pool source strategy: %s", self.settings.strategy_name)
