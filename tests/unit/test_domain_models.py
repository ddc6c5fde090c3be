"""Unit tests for Quote and CachedRecord."""

import json

import pytest

from nifty_ticker.domain.models import CachedRecord, Failure, FailureKind, QuoteOrigin, is_failure

from tests.conftest import CLOSED_NOW, SAMPLE_RECORD


class TestCachedRecord:

    def test_json_uses_stored_field_names(self):
        data = json.loads(SAMPLE_RECORD.to_json())

        assert data == {
            "price": 24110.0,
            "change": -55.5,
            "changePercent": -0.23,
            "high": 24210.0,
            "low": 24020.0,
            "open": 24160.0,
            "close": 24165.5,
            "isLastTradingDay": True,
        }

    def test_previous_close_alias_accepted(self):
        data = SAMPLE_RECORD.to_dict()
        data["previousClose"] = data.pop("close")

        assert CachedRecord.from_dict(data) == SAMPLE_RECORD

    @pytest.mark.parametrize("bad", [True, "1", None, float("nan")])
    def test_rejects_non_numeric(self, bad):
        data = SAMPLE_RECORD.to_dict()
        data["high"] = bad

        with pytest.raises(ValueError):
            CachedRecord.from_dict(data)

    def test_to_quote_is_stale(self):
        quote = SAMPLE_RECORD.to_quote(CLOSED_NOW, origin=QuoteOrigin.REMOTE_HISTORICAL)

        assert quote.is_stale is True
        assert quote.origin is QuoteOrigin.REMOTE_HISTORICAL
        assert quote.day_high == SAMPLE_RECORD.high
        assert quote.day_low == SAMPLE_RECORD.low
        assert quote.previous_close == SAMPLE_RECORD.previous_close
        assert quote.observed_at == CLOSED_NOW


class TestFailure:

    def test_is_failure(self):
        failure = Failure(FailureKind.TRANSPORT, "timeout", "yahoo-live")

        assert is_failure(failure)
        assert not is_failure(SAMPLE_RECORD)
        assert str(failure) == "yahoo-live: TRANSPORT (timeout)"
