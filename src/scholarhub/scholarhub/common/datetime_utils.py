from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def to_iso_date(value) -> str:
    """Normalize a date/datetime/str coming from a driver into YYYY-MM-DD."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value)[:10]


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def now_iso() -> str:
    return now_local().replace(microsecond=0).isoformat()


def trailing_window(today: date, days: int) -> tuple[str, str]:
    """Inclusive (start, end) ISO dates for the ``days`` days ending at ``today``."""
    start = today - timedelta(days=max(int(days), 1) - 1)
    return start.isoformat(), today.isoformat()
