"""
Domain Models - Pure Business Objects

This module contains domain models representing core business concepts:
- Feed dates
- Exchange rate records read from a feed

Files that USE this module:
- xrate.adapters.providers.xml_feed (builds URLs from DateKey, yields ExchangeRateNode)
- xrate.application.rates_service (converts dates to DateKey)
- tests.* (tests use domain models for test data)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from dataclasses import dataclass  # Decorator for creating data classes
from datetime import date  # Calendar dates for the convenience constructor

# Rate of the feed's implicit base currency, also returned for unknown codes
DEFAULT_RATE = 1.0


def _pad2(value: int) -> str:
    """Left-pad single-character numbers with a zero; anything longer is kept as-is."""
    text = str(value)
    if len(text) == 1:
        text = "0" + text
    return text


@dataclass(frozen=True)
class DateKey:
    """
    Calendar day identifying one feed document.

    No calendar validation is performed: impossible dates are rendered
    verbatim and will fail when the remote resource does not exist.

    Attributes:
        year: Four digit year
        month: Month number (1=Jan, 12=Dec)
        day: Day of the month
    """
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: date) -> DateKey:
        return cls(value.year, value.month, value.day)

    def feed_path(self) -> str:
        """
        Relative path of the feed document for this day.

        Returns:
            Path like '2010/06/25.xml'
        """
        return f"{self.year}/{_pad2(self.month)}/{_pad2(self.day)}.xml"


@dataclass(frozen=True)
class ExchangeRateNode:
    """
    One fx record from the feed.

    Attributes:
        code: Currency code as written in the feed (e.g. 'USD')
        rate: Units of this currency per 1 unit of the base currency
    """
    code: str
    rate: float
