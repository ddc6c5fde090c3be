"""Quote and cached last-session record models."""

import json
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from nifty_ticker.domain.models.enums import QuoteOrigin


@dataclass(frozen=True)
class Quote:
    """
    One normalized snapshot of price/change/range fields for the index.

    change and change_percent are carried as supplied by the source; they
    are only guaranteed consistent with price/previous_close for quotes
    built by the mock generator.
    """

    price: float
    change: float
    change_percent: float
    day_high: float
    day_low: float
    open: float
    previous_close: float
    observed_at: datetime
    is_stale: bool = False
    origin: QuoteOrigin = QuoteOrigin.LIVE

    @property
    def close(self) -> Optional[float]:
        """Session close: known only once the session is over."""
        return self.price if self.is_stale else None

    @property
    def is_mock(self) -> bool:
        return self.origin is QuoteOrigin.MOCK


# Wire names used by the persisted JSON record
_FIELD_KEYS = {
    "price": "price",
    "change": "change",
    "change_percent": "changePercent",
    "high": "high",
    "low": "low",
    "open": "open",
    "previous_close": "close",
}


@dataclass(frozen=True)
class CachedRecord:
    """A last-session quote as stored in the single-slot cache."""

    price: float
    change: float
    change_percent: float
    high: float
    low: float
    open: float
    previous_close: float
    is_last_trading_day: bool = field(default=True)

    def to_quote(
        self,
        observed_at: datetime,
        origin: QuoteOrigin = QuoteOrigin.CACHE,
    ) -> Quote:
        return Quote(
            price=self.price,
            change=self.change,
            change_percent=self.change_percent,
            day_high=self.high,
            day_low=self.low,
            open=self.open,
            previous_close=self.previous_close,
            observed_at=observed_at,
            is_stale=True,
            origin=origin,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {key: getattr(self, attr) for attr, key in _FIELD_KEYS.items()}
        data["isLastTradingDay"] = self.is_last_trading_day
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls, data: Any) -> "CachedRecord":
        """
        Build a record from its JSON form.

        Raises ValueError when the payload is not an object or a numeric
        field is missing or non-numeric.
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected an object, got {type(data).__name__}")
        values: dict[str, float] = {}
        for attr, key in _FIELD_KEYS.items():
            raw = data.get(key)
            if raw is None and attr == "previous_close":
                raw = data.get("previousClose")
            values[attr] = _as_number(raw, key)
        return cls(**values, is_last_trading_day=True)

    @classmethod
    def from_json(cls, payload: str) -> "CachedRecord":
        return cls.from_dict(json.loads(payload))


def _as_number(raw: Any, key: str) -> float:
    # bool is an int subclass but never a valid price field
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ValueError(f"field {key!r} is not a number: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"field {key!r} is not finite: {raw!r}")
    return value
