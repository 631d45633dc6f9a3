# tests/test_rates_service.py
"""
Rates Service Tests - Unit Tests for the Date-based Lookup Facade

This module contains unit tests for the RatesService class.
It tests date conversion, provider delegation, and error propagation.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xrate.application.rates_service (RatesService)
- xrate.domain.errors (FeedFetchError for propagation tests)
- unittest.mock (Mock for provider mocking)
- pytest (testing framework)
"""
from datetime import date

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock, patch  # Mock objects and patching for testing without real dependencies

from xrate.application.rates_service import RatesService  # Service class to test
from xrate.domain.errors import FeedFetchError


class TestRatesService:
    def test_init(self):
        mock_provider = Mock()
        service = RatesService(provider=mock_provider)
        assert service.provider == mock_provider

    @patch('xrate.application.rates_service.ExchangeRateReader')
    def test_init_default_provider(self, mock_reader_class):
        service = RatesService()
        assert service.provider is mock_reader_class.return_value
        mock_reader_class.assert_called_once_with()

    def test_rate_on(self):
        mock_provider = Mock()
        mock_provider.get_exchange_rate.return_value = 1.234

        service = RatesService(provider=mock_provider)
        result = service.rate_on("USD", date(2010, 6, 25))

        assert result == 1.234
        mock_provider.get_exchange_rate.assert_called_once_with("USD", 2010, 6, 25)

    def test_cross_rate_on(self):
        mock_provider = Mock()
        mock_provider.get_cross_rate.return_value = 1.5

        service = RatesService(provider=mock_provider)
        result = service.cross_rate_on("USD", "GBP", date(2010, 11, 3))

        assert result == 1.5
        mock_provider.get_cross_rate.assert_called_once_with("USD", "GBP", 2010, 11, 3)

    def test_errors_propagate(self):
        mock_provider = Mock()
        mock_provider.get_exchange_rate.side_effect = FeedFetchError("unreachable")

        service = RatesService(provider=mock_provider)
        with pytest.raises(FeedFetchError, match="unreachable"):
            service.rate_on("USD", date(2010, 6, 25))
