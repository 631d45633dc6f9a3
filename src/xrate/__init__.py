# src/xrate/__init__.py
"""
XRate - Historical Exchange Rate Reader

Reads per-day XML exchange rate feeds and computes the rate of a currency
against the feed's base currency, or between two currencies, on a given day.
"""

from xrate.adapters.providers.xml_feed import ExchangeRateReader
from xrate.application.rates_service import RatesService
from xrate.domain import (
    DateKey,
    ExchangeRateNode,
    FeedFetchError,
    FeedParseError,
    FeedSchemaError,
    RateFeedError,
)

__version__ = "2.0.0"
__author__ = "Masih Sadri"

__all__ = [
    "ExchangeRateReader",
    "RatesService",
    "DateKey",
    "ExchangeRateNode",
    "RateFeedError",
    "FeedFetchError",
    "FeedParseError",
    "FeedSchemaError",
]
