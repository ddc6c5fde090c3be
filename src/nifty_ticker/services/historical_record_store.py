"""Last-session record lookup with a degrading fallback chain."""

import logging
from typing import Callable, Optional, Union

from nifty_ticker.domain.models import CachedRecord, Failure, FailureKind, QuoteOrigin, is_failure
from nifty_ticker.providers.market_data_provider import HistoricalQuoteSource
from nifty_ticker.repositories.protocols import KeyValueRepository

logger = logging.getLogger(__name__)

DEFAULT_CACHE_KEY = "lastTradingDayData"

# Shown when neither the local cache nor the remote lookup yields anything
DEFAULT_LAST_SESSION = CachedRecord(
    price=24280.50,
    change=150.25,
    change_percent=0.62,
    high=24450.75,
    low=23950.00,
    open=24100.00,
    previous_close=24280.50,
    is_last_trading_day=True,
)

TierResult = Union[CachedRecord, Failure]


class HistoricalRecordStore:
    """
    Resolves the last trading session's quote. Never fails.

    Tiers, tried in order until one succeeds:
      1. the single cached record in the local key-value store
         (trusted indefinitely, no age check);
      2. a remote historical lookup, whose result overwrites the cache;
      3. the constant DEFAULT_LAST_SESSION (not persisted).
    """

    def __init__(
        self,
        repository: KeyValueRepository,
        remote: HistoricalQuoteSource,
        cache_key: str = DEFAULT_CACHE_KEY,
        default: CachedRecord = DEFAULT_LAST_SESSION,
    ):
        self._repository = repository
        self._remote = remote
        self._cache_key = cache_key
        self._default = default
        self._tiers: list[tuple[QuoteOrigin, Callable[[], TierResult]]] = [
            (QuoteOrigin.CACHE, self._read_cache),
            (QuoteOrigin.REMOTE_HISTORICAL, self._fetch_remote),
        ]

    def get_last_session(self) -> CachedRecord:
        record, _ = self.resolve()
        return record

    def resolve(self) -> tuple[CachedRecord, QuoteOrigin]:
        """Return the last-session record and the tier that produced it."""
        for origin, attempt in self._tiers:
            try:
                result = attempt()
            except Exception as exc:
                # A broken tier must not break the chain
                logger.exception("Last-session tier %s raised", origin.value)
                result = Failure(FailureKind.TRANSPORT, repr(exc), origin.value)

            if not is_failure(result):
                logger.debug("Last-session record served from %s", origin.value)
                return result, origin
            logger.warning("Last-session tier %s unavailable: %s", origin.value, result)

        logger.warning("Falling back to built-in last-session record")
        return self._default, QuoteOrigin.DEFAULT

    def cached_record(self) -> Optional[CachedRecord]:
        """The currently cached record, or None if absent or unreadable."""
        result = self._read_cache()
        return None if is_failure(result) else result

    def _read_cache(self) -> TierResult:
        stored = self._repository.get(self._cache_key)
        if stored is None:
            return Failure(FailureKind.CACHE_READ, "no cached record", "cache")
        try:
            return CachedRecord.from_json(stored)
        except ValueError as exc:
            # json.JSONDecodeError is a ValueError too
            return Failure(FailureKind.CACHE_READ, f"unreadable cached record: {exc}", "cache")

    def _fetch_remote(self) -> TierResult:
        result = self._remote.fetch_last_session()
        if is_failure(result):
            return result
        self._persist(result)
        return result

    def _persist(self, record: CachedRecord) -> None:
        try:
            self._repository.set(self._cache_key, record.to_json())
        except Exception:
            # The fetched record is still good for this tick
            logger.exception("Could not persist last-session record under %r", self._cache_key)
