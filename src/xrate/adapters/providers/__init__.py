"""
Provider Adapters - External Feed Clients

This package contains adapters for external exchange rate feeds.
All providers implement the HistoricalRateProvider interface.
"""

from xrate.adapters.providers.base import HistoricalRateProvider
from xrate.adapters.providers.xml_feed import ExchangeRateReader

__all__ = [
    "HistoricalRateProvider",
    "ExchangeRateReader",
]
