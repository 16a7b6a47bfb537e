from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..cadence.labels import DEFAULT_FORMATTER, PeriodLabelFormatter
from ..cadence.model import CadenceConfig
from ..cadence.rules import daily_epoch, is_month_granular, occurs_on
from ..common.datetime_utils import add_months, iter_months, month_end, today_local
from ..core.constants import DEFAULT_DAILY_EPOCH, DEFAULT_LABEL_OPTION_MONTHS, SEMESTER_SPLIT_MONTH
from ..core.enums import CadenceKind
from .model import PeriodLabel

logger = logging.getLogger(__name__)


def semester_window(today: date) -> tuple[date, date]:
    """Jan 1 - Jun 30 up to June, Jul 1 - Dec 31 from July on."""
    if today.month >= SEMESTER_SPLIT_MONTH:
        return date(today.year, 7, 1), date(today.year, 12, 31)
    return date(today.year, 1, 1), date(today.year, 6, 30)


def generate(
    cadence: CadenceConfig,
    window_start: date,
    window_end: date,
    *,
    today: Optional[date] = None,
    formatter: Optional[PeriodLabelFormatter] = None,
    epoch: date = DEFAULT_DAILY_EPOCH,
) -> list[PeriodLabel]:
    """Billing periods of ``cadence`` inside the window, oldest first.

    The window is cut at ``today``: no period starting after today is ever
    returned. An empty window yields an empty list. Raises ``InvalidCadence``
    when the cadence is inactive or malformed.
    """
    cadence.require_active()
    formatter = formatter or DEFAULT_FORMATTER
    today = today or today_local()

    end = min(window_end, today)
    if window_start > end:
        logger.debug("Empty period window %s..%s (today=%s)", window_start, window_end, today)
        return []

    if cadence.kind == CadenceKind.DAILY:
        periods = _daily_periods(cadence, window_start, end, formatter, epoch)
    else:
        periods = _monthly_periods(cadence, window_start, end, formatter, epoch)

    logger.debug("Generated %d %s periods for %s..%s", len(periods), cadence.kind.value, window_start, end)
    return periods


def semester_periods(
    cadence: CadenceConfig,
    *,
    today: Optional[date] = None,
    formatter: Optional[PeriodLabelFormatter] = None,
    epoch: date = DEFAULT_DAILY_EPOCH,
) -> list[PeriodLabel]:
    today = today or today_local()
    start, end = semester_window(today)
    return generate(cadence, start, end, today=today, formatter=formatter, epoch=epoch)


def _daily_periods(cadence, start: date, end: date, formatter, epoch: date) -> list[PeriodLabel]:
    step = 1 if cadence.every_day else cadence.interval_days
    offset = (start - daily_epoch(cadence, epoch)).days % step
    current = start + timedelta(days=(step - offset) % step)

    out: list[PeriodLabel] = []
    while current <= end:
        out.append(PeriodLabel(start=current, text=formatter.day_label(current)))
        current += timedelta(days=step)
    return out


def _monthly_periods(cadence, start: date, end: date, formatter, epoch: date) -> list[PeriodLabel]:
    by_text: dict[str, PeriodLabel] = {}
    for first in iter_months(start, end):
        lo = max(first, start)
        hi = min(month_end(first), end)

        if cadence.kind == CadenceKind.WEEKLY:
            period_start = _first_occurrence(cadence, lo, hi, epoch)
            if period_start is None:
                continue
        else:
            period_start = lo

        text = formatter.month_label(first.year, first.month)
        by_text.setdefault(text, PeriodLabel(start=period_start, text=text))
    return sorted(by_text.values())


def _first_occurrence(cadence, lo: date, hi: date, epoch: date) -> Optional[date]:
    current = lo
    while current <= hi:
        if occurs_on(current, cadence, epoch=epoch):
            return current
        current += timedelta(days=1)
    return None


def label_options(
    today: Optional[date] = None,
    *,
    before: int = DEFAULT_LABEL_OPTION_MONTHS,
    after: int = DEFAULT_LABEL_OPTION_MONTHS,
    formatter: Optional[PeriodLabelFormatter] = None,
) -> list[str]:
    """Month labels offered when recording a payment (past, current, ahead)."""
    formatter = formatter or DEFAULT_FORMATTER
    first = (today or today_local()).replace(day=1)
    out = []
    for i in range(-before, after + 1):
        d = add_months(first, i)
        out.append(formatter.month_label(d.year, d.month))
    return out


def successor_labels(
    cadence: CadenceConfig,
    label: str,
    count: int,
    *,
    formatter: Optional[PeriodLabelFormatter] = None,
) -> list[str]:
    """``count`` consecutive period labels starting at ``label``.

    Labels the formatter cannot read only cover themselves.
    """
    formatter = formatter or DEFAULT_FORMATTER
    count = max(int(count or 1), 1)
    start = formatter.parse(label)
    if start is None:
        return [label]

    if is_month_granular(cadence):
        months = (add_months(start, k) for k in range(count))
        return [formatter.month_label(d.year, d.month) for d in months]

    step = 1 if cadence.every_day else cadence.interval_days
    return [formatter.day_label(start + timedelta(days=k * step)) for k in range(count)]
