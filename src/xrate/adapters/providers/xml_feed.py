"""
Dated XML Feed Provider for Historical Exchange Rates

This module implements the client for feeds that publish one XML document
per calendar day (e.g. Xavier Finance, http://api.finance.xaviermedia.com/api/).
The URL for 25 June 2010 is built as {base_url}2010/06/25.xml.

Each document holds zero or more <fx> elements. By default the fields are
read by position: the 2nd child element is the currency code and the 4th
child element is the rate against the feed's base currency (the Euro).
Feeds that label their fields can be read by tag name instead.

Documents are fetched fresh on every call; nothing is cached.

Files that USE this module:
- xrate.application.rates_service (RatesService wraps a HistoricalRateProvider)
- tests.test_providers (unit tests)

Files that this module USES:
- xrate.adapters.providers.base (HistoricalRateProvider interface)
- xrate.config (settings for default feed URL and HTTP timeout)
- xrate.domain (DateKey, ExchangeRateNode, feed errors)
"""
import logging
from typing import Iterator, Optional
from xml.etree import ElementTree

import requests

from xrate.adapters.providers.base import HistoricalRateProvider
from xrate.config import settings
from xrate.domain.errors import FeedFetchError, FeedParseError, FeedSchemaError
from xrate.domain.models import DEFAULT_RATE, DateKey, ExchangeRateNode

log = logging.getLogger(__name__)

FX_TAG = "fx"
CODE_INDEX = 1
RATE_INDEX = 3


def _text_content(element: ElementTree.Element) -> str:
    """Concatenate all text beneath an element, like DOM textContent."""
    return "".join(element.itertext())


class ExchangeRateReader(HistoricalRateProvider):
    """
    Reader for a date-organized XML exchange rate feed.

    Holds only the base URL and request options; every lookup performs one
    blocking GET, so a single instance can be shared between threads.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        code_tag: Optional[str] = None,
        rate_tag: Optional[str] = None,
    ):
        """
        Initialize the feed reader. No network activity happens here.

        Args:
            base_url: Prefix for every request, used verbatim
                (defaults to settings.rate_feed_base_url)
            timeout: Optional HTTP timeout in seconds
                (defaults to settings.http_timeout_seconds; None waits indefinitely)
            code_tag: Tag of the currency code child; enables lookup by name
            rate_tag: Tag of the rate child; enables lookup by name

        Raises:
            ValueError: If only one of code_tag/rate_tag is given
        """
        if (code_tag is None) != (rate_tag is None):
            raise ValueError("code_tag and rate_tag must be given together")
        self.base_url = base_url if base_url is not None else settings.rate_feed_base_url
        self.timeout = timeout if timeout is not None else settings.http_timeout_seconds
        self.code_tag = code_tag
        self.rate_tag = rate_tag

    def build_url(self, year: int, month: int, day: int) -> str:
        """
        Build the feed URL for a day.

        Args:
            year: The year as a four digit integer
            month: The month as an integer (1=Jan, 12=Dec)
            day: The day of the month as an integer

        Returns:
            URL like '{base_url}2010/06/25.xml'
        """
        return self.base_url + DateKey(year, month, day).feed_path()

    def _fetch_document(self, year: int, month: int, day: int) -> ElementTree.Element:
        """
        Download and parse the feed document for a day.

        Returns:
            Root element of the feed

        Raises:
            FeedFetchError: If the request fails, times out, or returns an error status
            FeedParseError: If the body is not well-formed XML
        """
        url = self.build_url(year, month, day)
        try:
            log.info("Fetching rate feed %s", url)
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            body = resp.content
        except requests.exceptions.Timeout as e:
            raise FeedFetchError(f"Rate feed timeout after {self.timeout}s for {url}") from e
        except requests.exceptions.RequestException as e:
            raise FeedFetchError(f"Rate feed request failed for {url}: {e}") from e

        try:
            return ElementTree.fromstring(body)
        except ElementTree.ParseError as e:
            raise FeedParseError(f"Rate feed at {url} is not well-formed XML: {e}") from e

    def _field(self, node: ElementTree.Element, index: int, tag: Optional[str]) -> str:
        if tag is not None:
            child = node.find(tag)
            if child is None:
                raise FeedSchemaError(f"<{node.tag}> node has no <{tag}> child")
            return _text_content(child)

        children = list(node)
        if len(children) <= index:
            raise FeedSchemaError(
                f"<{node.tag}> node has {len(children)} child elements, expected at least {index + 1}"
            )
        return _text_content(children[index])

    def _read_node(self, node: ElementTree.Element) -> ExchangeRateNode:
        """
        Extract the currency code and rate from one fx element.

        Raises:
            FeedSchemaError: If a field is missing or the rate is not a number
        """
        code = self._field(node, CODE_INDEX, self.code_tag)
        rate_text = self._field(node, RATE_INDEX, self.rate_tag)
        try:
            rate = float(rate_text)
        except ValueError as e:
            raise FeedSchemaError(f"Rate {rate_text!r} for {code!r} is not a number") from e
        return ExchangeRateNode(code=code, rate=rate)

    def _iter_nodes(self, root: ElementTree.Element) -> Iterator[ExchangeRateNode]:
        """Yield fx records in document order."""
        for node in root.iter(FX_TAG):
            yield self._read_node(node)

    def _find_rate(self, root: ElementTree.Element, currency_code: str) -> float:
        """
        Return the rate of the first node whose code equals `currency_code`.

        Codes are compared exactly as written. An unknown code yields
        DEFAULT_RATE (1.0), the implicit rate of the base currency.
        """
        scanned = 0
        for node in self._iter_nodes(root):
            scanned += 1
            if node.code == currency_code:
                log.debug("Found %s=%s after %d fx nodes", currency_code, node.rate, scanned)
                return node.rate
        log.warning(
            "Currency %r not found among %d fx nodes, using default rate %s",
            currency_code, scanned, DEFAULT_RATE,
        )
        return DEFAULT_RATE

    def get_exchange_rate(self, currency_code: str, year: int, month: int, day: int) -> float:
        """
        Get the exchange rate for a currency against the base currency on a date.

        Args:
            currency_code: The currency code for the desired currency
            year: The year as a four digit integer
            month: The month as an integer (1=Jan, 12=Dec)
            day: The day of the month as an integer

        Returns:
            Units of the currency per 1 unit of base currency; 1.0 if the code is absent

        Raises:
            FeedFetchError: If the feed cannot be retrieved
            FeedParseError: If the feed is not XML
            FeedSchemaError: If an fx node is malformed
        """
        root = self._fetch_document(year, month, day)
        return self._find_rate(root, currency_code)

    def get_cross_rate(
        self, from_currency: str, to_currency: str, year: int, month: int, day: int
    ) -> float:
        """
        Get the exchange rate of the first currency against the second on a date.

        The feed is fetched once and both codes are looked up in the same document.
        A zero rate for `to_currency` is not special-cased and raises ZeroDivisionError.

        Args:
            from_currency: Code of the currency being priced
            to_currency: Code of the currency it is priced against
            year: The year as a four digit integer
            month: The month as an integer (1=Jan, 12=Dec)
            day: The day of the month as an integer

        Returns:
            rate(from_currency) / rate(to_currency)

        Raises:
            FeedFetchError: If the feed cannot be retrieved
            FeedParseError: If the feed is not XML
            FeedSchemaError: If an fx node is malformed
        """
        root = self._fetch_document(year, month, day)
        from_rate = self._find_rate(root, from_currency)
        to_rate = self._find_rate(root, to_currency)
        rate = from_rate / to_rate
        log.debug("%s/%s = %s / %s = %s", from_currency, to_currency, from_rate, to_rate, rate)
        return rate
