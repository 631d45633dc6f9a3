# src/xrate/application/rates_service.py
"""
Rates Service - Business Logic for Historical Exchange Rate Lookups

This module provides a small facade over a historical rate provider that
accepts datetime.date objects instead of separate year/month/day integers.

Files that USE this module:
- tests.test_rates_service (unit tests)

Files that this module USES:
- xrate.adapters.providers.base (HistoricalRateProvider interface)
- xrate.adapters.providers.xml_feed (ExchangeRateReader as the default provider)
- xrate.domain.models (DateKey)
"""
from __future__ import annotations  # Enable postponed evaluation of annotations

import logging
from datetime import date  # Calendar dates accepted by the service
from typing import Optional

from xrate.adapters.providers.base import HistoricalRateProvider
from xrate.adapters.providers.xml_feed import ExchangeRateReader
from xrate.domain.models import DateKey

log = logging.getLogger(__name__)


class RatesService:
    """
    High-level service for looking up historical rates by date.
    Provider errors are not caught here; they reach the caller unchanged.
    """
    def __init__(self, provider: Optional[HistoricalRateProvider] = None):
        """
        Initialize rates service with a provider.

        Args:
            provider: HistoricalRateProvider instance (defaults to an
                ExchangeRateReader built from settings)
        """
        self.provider = provider if provider is not None else ExchangeRateReader()

    def rate_on(self, currency_code: str, on: date) -> float:
        """
        Get units of `currency_code` per 1 unit of the base currency on a date.

        Args:
            currency_code: Currency code as published by the feed
            on: Day to look up

        Returns:
            Rate as float (1.0 if the feed does not list the currency)
        """
        key = DateKey.from_date(on)
        log.debug("Looking up %s on %s", currency_code, on)
        return self.provider.get_exchange_rate(currency_code, key.year, key.month, key.day)

    def cross_rate_on(self, from_currency: str, to_currency: str, on: date) -> float:
        """
        Get the rate of `from_currency` against `to_currency` on a date.

        Returns:
            rate(from_currency) / rate(to_currency) as float
        """
        key = DateKey.from_date(on)
        log.debug("Looking up %s/%s on %s", from_currency, to_currency, on)
        return self.provider.get_cross_rate(
            from_currency, to_currency, key.year, key.month, key.day
        )
