# tests/test_models.py
"""
Domain Model Tests - Unit Tests for DateKey and ExchangeRateNode

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- xrate.domain.models (domain models to test)
- pytest (testing framework)
"""
from dataclasses import FrozenInstanceError
from datetime import date

import pytest  # Testing framework for writing and running tests

from xrate.domain.models import DEFAULT_RATE, DateKey, ExchangeRateNode


class TestDateKey:
    def test_feed_path_pads_month_and_day_independently(self):
        assert DateKey(2010, 6, 25).feed_path() == "2010/06/25.xml"
        assert DateKey(2010, 11, 3).feed_path() == "2010/11/03.xml"
        assert DateKey(2010, 12, 31).feed_path() == "2010/12/31.xml"

    def test_feed_path_has_no_calendar_validation(self):
        assert DateKey(2010, 13, 45).feed_path() == "2010/13/45.xml"
        assert DateKey(2010, -1, 5).feed_path() == "2010/-1/05.xml"

    def test_from_date(self):
        key = DateKey.from_date(date(2010, 6, 25))
        assert key == DateKey(2010, 6, 25)

    def test_frozen(self):
        key = DateKey(2010, 6, 25)
        with pytest.raises(FrozenInstanceError):
            key.year = 2011


class TestExchangeRateNode:
    def test_creation(self):
        node = ExchangeRateNode(code="USD", rate=1.234)
        assert node.code == "USD"
        assert node.rate == 1.234

    def test_default_rate(self):
        assert DEFAULT_RATE == 1.0
