from __future__ import annotations

import calendar
from datetime import date, datetime

from ..core.exceptions import MalformedRecord


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def coerce_date(value) -> date:
    """Accept a ``date``/``datetime`` or an ISO string as stored by the backend.

    Timestamps such as ``2026-01-05T07:00:00`` are cut to their date part.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return parse_iso_date(value.strip()[:10])
        except ValueError as exc:
            raise MalformedRecord(f"Tanggal tidak valid: {value!r}") from exc
    raise MalformedRecord(f"Tanggal tidak valid: {value!r}")


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def month_start(value: date) -> date:
    return value.replace(day=1)


def month_end(value: date) -> date:
    return value.replace(day=calendar.monthrange(value.year, value.month)[1])


def month_index(value: date) -> int:
    """Months since year 0, handy for month differences."""
    return value.year * 12 + value.month


def add_months(value: date, months: int) -> date:
    """Return a new date a number of months after ``value``.

    The day of the month is clamped to the last valid day if needed (e.g.,
    adding one month to Jan 31 yields Feb 28 or 29).
    """
    year = value.year + (value.month - 1 + months) // 12
    month = (value.month - 1 + months) % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def iter_months(start: date, end: date):
    """Yield the first day of every month from ``start`` to ``end`` inclusive."""
    current = month_start(start)
    last = month_start(end)
    while current <= last:
        yield current
        current = add_months(current, 1)
