"""
Pytest configuration and fixtures for the ticker tests.

This module provides:
- Market-local (IST) time helpers
- In-memory SQLite key-value repository fixtures
- Deterministic, failing and raising quote sources
- A recording presenter
- Pipeline fixtures wired from the pieces above
"""

import random
from datetime import datetime
from typing import Optional

import pytest
from sqlalchemy import create_engine, StaticPool

from nifty_ticker.config.settings import reset_settings
from nifty_ticker.core.timezone import resolve_timezone
from nifty_ticker.domain.models import (
    CachedRecord,
    Failure,
    FailureKind,
    Quote,
    QuoteOrigin,
)
from nifty_ticker.providers.stub_provider import MockQuoteGenerator
from nifty_ticker.repositories.sqlalchemy import (
    Base,
    SqlAlchemyKeyValueRepository,
    create_session_factory,
    init_db,
)
from nifty_ticker.services import (
    HistoricalRecordStore,
    MarketCalendar,
    PriceHistoryBuffer,
    QuotePipeline,
)


# =============================================================================
# TIMEZONE HELPERS
# =============================================================================

IST_TZ = resolve_timezone("Asia/Kolkata")


def ist_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    """Create a localized datetime in Asia/Kolkata."""
    return IST_TZ.localize(datetime(year, month, day, hour, minute, second))


# 2024-06-18 is a Tuesday, 2024-06-15/16 a weekend
OPEN_NOW = ist_datetime(2024, 6, 18, 10, 0)
CLOSED_NOW = ist_datetime(2024, 6, 18, 18, 0)
WEEKEND_NOW = ist_datetime(2024, 6, 15, 11, 0)


class FixedClock:
    """Callable clock whose time tests can move."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


# =============================================================================
# QUOTE SOURCES
# =============================================================================


def make_quote(
    price: float = 24500.0,
    previous_close: float = 24300.0,
    observed_at: Optional[datetime] = None,
    is_stale: bool = False,
    origin: QuoteOrigin = QuoteOrigin.LIVE,
) -> Quote:
    change = price - previous_close
    return Quote(
        price=price,
        change=change,
        change_percent=change / previous_close * 100,
        day_high=price + 80,
        day_low=price - 120,
        open=previous_close + 10,
        previous_close=previous_close,
        observed_at=observed_at or OPEN_NOW,
        is_stale=is_stale,
        origin=origin,
    )


SAMPLE_RECORD = CachedRecord(
    price=24110.0,
    change=-55.5,
    change_percent=-0.23,
    high=24210.0,
    low=24020.0,
    open=24160.0,
    previous_close=24165.5,
)


class DeterministicLiveSource:
    """Returns the given quotes (or Failures) in order, repeating the last one."""

    def __init__(self, *quotes):
        self._quotes = list(quotes) or [make_quote()]
        self.calls = 0

    def fetch_live(self):
        quote = self._quotes[min(self.calls, len(self._quotes) - 1)]
        self.calls += 1
        return quote


class FailingLiveSource:
    """Live source that always reports a transport failure."""

    def __init__(self):
        self.calls = 0

    def fetch_live(self):
        self.calls += 1
        return Failure(FailureKind.TRANSPORT, "Network unavailable", "test-live")


class RaisingLiveSource:
    """Live source that breaks its contract and raises."""

    def fetch_live(self):
        raise RuntimeError("unexpected upstream bug")


class StaticHistoricalSource:
    """Historical source returning a fixed record."""

    def __init__(self, record: CachedRecord = SAMPLE_RECORD):
        self.record = record
        self.calls = 0

    def fetch_last_session(self):
        self.calls += 1
        return self.record


class FailingHistoricalSource:
    """Historical source that always fails."""

    def __init__(self):
        self.calls = 0

    def fetch_last_session(self):
        self.calls += 1
        return Failure(FailureKind.TRANSPORT, "Network unavailable", "test-historical")


class RaisingHistoricalSource:
    def fetch_last_session(self):
        raise ConnectionError("socket closed")


class InMemoryKeyValueRepository:
    """Dict-backed repository for tests that do not need SQLite."""

    def __init__(self, initial: Optional[dict] = None):
        self.data: dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes += 1
        self.data[key] = value


class RecordingPresenter:
    """Presenter that records every call in order."""

    def __init__(self):
        self.calls: list[tuple[str, object]] = []

    def render(self, quote: Quote) -> None:
        self.calls.append(("render", quote))

    def render_history(self, prices) -> None:
        self.calls.append(("render_history", tuple(prices)))

    def render_market_status(self, is_open: bool) -> None:
        self.calls.append(("render_market_status", is_open))

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def _reset_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def kv_repo(test_engine) -> SqlAlchemyKeyValueRepository:
    """Provide test KeyValueRepository."""
    return SqlAlchemyKeyValueRepository(create_session_factory(test_engine))


# =============================================================================
# PIPELINE FIXTURES
# =============================================================================


@pytest.fixture
def calendar() -> MarketCalendar:
    return MarketCalendar("Asia/Kolkata", 555, 930)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def mock_generator() -> MockQuoteGenerator:
    return MockQuoteGenerator(rng=random.Random(7))


@pytest.fixture
def make_pipeline(calendar, kv_repo, mock_generator, presenter):
    """Factory building a QuotePipeline with overridable collaborators."""

    def _make(
        now: datetime,
        live_source=None,
        historical_source=None,
        repository=None,
        capacity: int = 20,
        clock: Optional[FixedClock] = None,
    ) -> tuple[QuotePipeline, FixedClock]:
        clock = clock or FixedClock(now)
        store = HistoricalRecordStore(
            repository=repository if repository is not None else kv_repo,
            remote=historical_source or FailingHistoricalSource(),
        )
        pipeline = QuotePipeline(
            calendar=calendar,
            live_source=live_source or FailingLiveSource(),
            record_store=store,
            history=PriceHistoryBuffer(capacity),
            mock_generator=mock_generator,
            presenter=presenter,
            clock=clock,
        )
        return pipeline, clock

    return _make
