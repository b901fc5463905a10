import logging
from unittest.mock import patch

from deficheck.adapters.pool_locators import CatalogPoolLocator, MockPoolLocator
from deficheck.settings import QuoteSettings
from deficheck.state import AppState


def _state(**flags):
    return AppState(settings=QuoteSettings(**flags), logger=logging.getLogger("deficheck"))


def test_service_is_built_once_from_settings():
    state = _state(mock=True)

    service = state.service

    assert isinstance(service.locator, MockPoolLocator)
    assert state.service is service


def test_service_is_not_built_until_used():
    with patch("deficheck.service.QuoteService.from_settings") as from_settings:
        state = _state(use_api=True)
        from_settings.assert_not_called()

        state.service

    from_settings.assert_called_once_with(state.settings)


def test_catalog_strategy_wiring():
    assert isinstance(_state(use_api=True).service.locator, CatalogPoolLocator)


def test_log_pool_source_mock(caplog):
    with caplog.at_level("DEBUG", logger="deficheck"):
        _state(mock=True, use_api=True).log_pool_source()

    assert "Using mock data..." in caplog.text
    assert "API mode enabled" not in caplog.text
    assert "Pool source strategy: mock" in caplog.text


def test_log_pool_source_network_modes(caplog):
    with caplog.at_level("DEBUG", logger="deficheck"):
        _state(use_api=True, use_onchain=True).log_pool_source()

    assert "API mode enabled - will search for pools dynamically" in caplog.text
    assert "Onchain mode enabled - will fetch all data from blockchain" in caplog.text
    assert "Pool source strategy: catalog/onchain" in caplog.text
