"""Explicit failure value returned by data sources instead of raising."""

from dataclasses import dataclass
from typing import Any

from nifty_ticker.domain.models.enums import FailureKind


@dataclass(frozen=True)
class Failure:
    """A data source attempt that produced nothing usable."""

    kind: FailureKind
    reason: str
    source: str = ""

    def __str__(self) -> str:
        where = f"{self.source}: " if self.source else ""
        return f"{where}{self.kind.value} ({self.reason})"


def is_failure(value: Any) -> bool:
    return isinstance(value, Failure)
