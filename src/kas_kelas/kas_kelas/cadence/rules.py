"""Occurrence rules for cadences.

A cadence fires on concrete dates (``occurs_on``) but is billed per period
(``canonical_label``). Weekly cadences fire several times a week yet are
billed per calendar month, so weekly arrears are counted in months.
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from ..core.constants import DEFAULT_DAILY_EPOCH
from ..core.enums import CadenceKind, Weekday
from .labels import DEFAULT_FORMATTER, PeriodLabelFormatter
from .model import CadenceConfig


def daily_epoch(cadence: CadenceConfig, default: date = DEFAULT_DAILY_EPOCH) -> date:
    """Reference date "every N days" cycles are counted from."""
    return cadence.anchor or default


def occurs_on(value: date, cadence: CadenceConfig, *, epoch: date = DEFAULT_DAILY_EPOCH) -> bool:
    if cadence.kind == CadenceKind.DAILY:
        if cadence.every_day:
            return True
        return (value - daily_epoch(cadence, epoch)).days % cadence.interval_days == 0

    if cadence.kind == CadenceKind.WEEKLY:
        return Weekday.from_date(value) in cadence.weekdays

    # Monthly: due dates are informational; without them the 1st is the due date.
    if not cadence.month_days:
        return value.day == 1
    last_day = calendar.monthrange(value.year, value.month)[1]
    return value.day in {min(d, last_day) for d in cadence.month_days}


def canonical_label(
    value: date,
    cadence: CadenceConfig,
    formatter: Optional[PeriodLabelFormatter] = None,
) -> str:
    formatter = formatter or DEFAULT_FORMATTER
    if cadence.kind == CadenceKind.DAILY:
        return formatter.day_label(value)
    return formatter.month_label(value.year, value.month)


def is_month_granular(cadence: CadenceConfig) -> bool:
    return cadence.kind in (CadenceKind.WEEKLY, CadenceKind.MONTHLY)
