"""
Tests for the trailing window and record composition
"""

from datetime import datetime, timedelta, timezone

from segment_sync.utils.metrics import build_output_record, round_half_up
from segment_sync.utils.windows import to_iso_timestamp, trailing_window


def test_window_spans_89_days_back(fixed_now):
    start, end = trailing_window(fixed_now)
    assert end == fixed_now
    assert end - start == timedelta(days=89)


def test_naive_now_is_treated_as_utc():
    start, end = trailing_window(datetime(2026, 1, 31, 12, 0))
    assert end.tzinfo == timezone.utc
    assert start == datetime(2025, 11, 3, 12, 0, tzinfo=timezone.utc)


def test_iso_timestamp_format(fixed_now):
    assert to_iso_timestamp(fixed_now) == "2026-10-18T06:00:00.000Z"


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(199.996, 2) == 200.0
    assert round_half_up(0.125, 2) == 0.13


def test_build_output_record():
    record = build_output_record(
        {"orders": 10, "sales": 199.996},
        {"sessions": 500.4, "conversionRate": 0.03333},
    )
    assert record == {
        "sessions": 500,
        "orders": 10,
        "sales": 200.0,
        "conversionRate": 3.33,
        "sessionsDelta": None,
        "ordersDelta": None,
        "salesDelta": None,
        "conversionRateDelta": None,
        "labels": None,
        "series": None,
    }
    assert isinstance(record["sessions"], int)


def test_output_record_key_order():
    record = build_output_record(
        {"orders": 0, "sales": 0.0},
        {"sessions": 0.0, "conversionRate": 0.0},
    )
    assert list(record)[:4] == ["sessions", "orders", "sales", "conversionRate"]
