"""
Base Provider Interface for Historical Exchange Rate Providers

This module defines the abstract base class for all historical rate providers.
It establishes the contract that all provider implementations must follow.

Files that USE this module:
- xrate.adapters.providers.xml_feed (ExchangeRateReader implements HistoricalRateProvider)
- xrate.application.rates_service (RatesService depends on HistoricalRateProvider)

Files that this module USES:
- None (pure interface definition)
"""
from abc import ABC, abstractmethod


class HistoricalRateProvider(ABC):
    @abstractmethod
    def get_exchange_rate(self, currency_code: str, year: int, month: int, day: int) -> float:
        """Return units of `currency_code` per 1 unit of the base currency on that day."""
        raise NotImplementedError

    @abstractmethod
    def get_cross_rate(
        self, from_currency: str, to_currency: str, year: int, month: int, day: int
    ) -> float:
        """Return the rate of `from_currency` against `to_currency` on that day."""
        raise NotImplementedError
