# tests/test_recency.py
from datetime import datetime, timedelta, UTC

from presentation.recency import days_since, parse_timestamp

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def test_parse_timestamp_variants():
    assert parse_timestamp("2024-06-01T00:00:00Z") == datetime(2024, 6, 1, tzinfo=UTC)
    assert parse_timestamp("2024-06-01") == datetime(2024, 6, 1, tzinfo=UTC)
    assert parse_timestamp("Jun 1, 2024") == datetime(2024, 6, 1, tzinfo=UTC)
    assert parse_timestamp("garbage") is None
    assert parse_timestamp("   ") is None
    assert parse_timestamp(12345) is None


def test_days_since_floors_whole_days():
    assert days_since("2024-06-14T12:00:00Z", now=NOW) == 1
    assert days_since("2024-06-14T12:00:01Z", now=NOW) == 0
    assert days_since("2024-06-05T11:59:59Z", now=NOW) == 10


def test_days_since_respects_offsets():
    # 2024-06-14T20:00-08:00 == 2024-06-15T04:00Z
    assert days_since("2024-06-14T20:00:00-08:00", now=NOW) == 0


def test_days_since_unparseable_is_zero():
    assert days_since("yesterday", now=NOW) == 0
    assert days_since("", now=NOW) == 0
    assert days_since(None, now=NOW) == 0


def test_future_timestamps_clamp_to_zero():
    assert days_since("2024-07-01T00:00:00Z", now=NOW) == 0


def test_default_now_is_current_time():
    stamp = (datetime.now(UTC) - timedelta(days=3, hours=1)).isoformat()
    assert days_since(stamp) == 3


def test_naive_now_is_taken_as_utc():
    assert days_since("2024-06-13T12:00:00Z", now=datetime(2024, 6, 15, 12, 0)) == 2
