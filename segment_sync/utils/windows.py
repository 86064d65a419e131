from __future__ import annotations
"""
Trailing window logic shared by the sync sources.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple
from segment_sync.config.sync_windows import WINDOW_OFFSET_DAYS


def trailing_window(now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """
    Return (start, end) for the trailing window ending at `now`.
    Naive datetimes are treated as UTC.
    """
    end = now or datetime.now(timezone.utc)
    if end.tzinfo is None:
        end = end.replace(tzinfo=timezone.utc)
    start = end - timedelta(days=WINDOW_OFFSET_DAYS)
    return start, end


def to_iso_timestamp(value: datetime) -> str:
    """UTC ISO-8601 with millisecond precision and a Z suffix."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
