"""Application context wiring the pipeline and its collaborators.

One object owns every piece of mutable state (history buffer, cache
repository, timer) and is shared explicitly with the HTTP app and the
desktop UI. initialize() builds everything, close() stops the timer and
releases connections.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from sqlalchemy import Engine

from nifty_ticker.config.settings import Settings, get_settings
from nifty_ticker.providers import (
    HistoricalQuoteSource,
    LiveQuoteSource,
    MockQuoteGenerator,
    YahooHistoricalSource,
    YahooLiveQuoteSource,
)
from nifty_ticker.repositories.sqlalchemy import (
    SqlAlchemyKeyValueRepository,
    create_db_engine,
    create_session_factory,
    init_db,
)
from nifty_ticker.services import (
    HistoricalRecordStore,
    MarketCalendar,
    PriceHistoryBuffer,
    QuotePipeline,
    TickScheduler,
)
from nifty_ticker.ui.presenter import CompositePresenter, LoggingPresenter, Presenter, SnapshotPresenter

logger = logging.getLogger(__name__)


class AppContext:
    """
    Application context providing in-process access to the pipeline.

    Sources and clock can be injected (tests, offline runs); by default
    the Yahoo sources are used.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        live_source: Optional[LiveQuoteSource] = None,
        historical_source: Optional[HistoricalQuoteSource] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._settings = settings
        self._live_source = live_source
        self._historical_source = historical_source
        self._clock = clock
        self._initialized = False

        self._engine: Optional[Engine] = None
        self._owned_sources: list = []
        self._calendar: Optional[MarketCalendar] = None
        self._record_store: Optional[HistoricalRecordStore] = None
        self._pipeline: Optional[QuotePipeline] = None
        self._scheduler: Optional[TickScheduler] = None
        self._snapshot = SnapshotPresenter()
        self._presenter = CompositePresenter(self._snapshot)

    def initialize(self) -> None:
        """
        Build the pipeline from settings.

        Raises ConfigurationError when the market timezone cannot be
        resolved; startup must not continue with a wrong calendar.
        """
        settings = self._settings or get_settings()
        self._settings = settings

        self._calendar = MarketCalendar(
            timezone_name=settings.market_timezone,
            open_minute=settings.market_open_minute,
            close_minute=settings.market_close_minute,
        )

        self._engine = create_db_engine(settings.get_database_url())
        init_db(self._engine)
        repository = SqlAlchemyKeyValueRepository(create_session_factory(self._engine))

        live_source = self._live_source
        if live_source is None:
            live_source = YahooLiveQuoteSource(
                settings.live_url(),
                timeout_seconds=settings.request_timeout_seconds,
                clock=self._calendar.now,
            )
            self._owned_sources.append(live_source)
        historical_source = self._historical_source
        if historical_source is None:
            historical_source = YahooHistoricalSource(
                settings.historical_url(),
                timeout_seconds=settings.request_timeout_seconds,
            )
            self._owned_sources.append(historical_source)

        self._record_store = HistoricalRecordStore(
            repository=repository,
            remote=historical_source,
            cache_key=settings.cache_key,
        )
        self._pipeline = QuotePipeline(
            calendar=self._calendar,
            live_source=live_source,
            record_store=self._record_store,
            history=PriceHistoryBuffer(settings.history_capacity),
            mock_generator=MockQuoteGenerator(seed=settings.mock_seed),
            presenter=self._presenter,
            clock=self._clock,
        )
        self._scheduler = TickScheduler(
            self._pipeline,
            interval_seconds=settings.refresh_interval_seconds,
            after_hours_interval_seconds=settings.after_hours_interval_seconds,
        )
        self._initialized = True
        logger.info("Initialized %s for %s", settings.app_name, settings.symbol)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def settings(self) -> Settings:
        return self._settings or get_settings()

    @property
    def calendar(self) -> MarketCalendar:
        self._require_initialized()
        return self._calendar

    @property
    def record_store(self) -> HistoricalRecordStore:
        self._require_initialized()
        return self._record_store

    @property
    def pipeline(self) -> QuotePipeline:
        self._require_initialized()
        return self._pipeline

    @property
    def scheduler(self) -> TickScheduler:
        self._require_initialized()
        return self._scheduler

    @property
    def snapshot(self) -> SnapshotPresenter:
        """Latest rendered state, readable from any thread."""
        return self._snapshot

    def add_presenter(self, presenter: Presenter) -> None:
        self._presenter.add(presenter)

    def enable_log_output(self) -> None:
        self.add_presenter(LoggingPresenter(self.settings.display_name))

    def start(self) -> None:
        self.scheduler.start()

    def close(self) -> None:
        """Stop the timer and release resources."""
        if self._scheduler is not None:
            self._scheduler.stop()
        for source in self._owned_sources:
            source.close()
        self._owned_sources = []
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        self._initialized = False

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("AppContext.initialize() has not been called")
