"""Income/expense aggregation over all transaction sources of a class.

Balances are never stored: every call recomputes them from the full history,
so edits and deletions of any record are reflected immediately. Cost is
linear in the number of records, which is fine at class scale (tens to a few
hundred rows) but should be revisited before reusing this for whole schools.

One malformed record never blanks a report: it is skipped and logged.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from itertools import chain
from typing import Iterable, Mapping, Optional

from ..cadence.labels import DEFAULT_FORMATTER, PeriodLabelFormatter
from ..common.datetime_utils import add_months, coerce_date, iter_months, month_start, today_local
from ..common.money import ZERO, to_money
from ..core.constants import DEFAULT_SERIES_MONTHS, KAS_CATEGORY
from ..core.enums import SavingsKind, TransactionKind, TransactionSource
from ..core.exceptions import MalformedRecord
from .model import LedgerSnapshot, MonthlyBucket, Transaction

logger = logging.getLogger(__name__)


def read_record(record) -> tuple[date, Decimal]:
    """Date and amount of a payment/expense record, validated."""
    d = coerce_date(getattr(record, "date", None))
    amount = to_money(getattr(record, "amount", None))
    if amount < 0:
        raise MalformedRecord(f"Nominal negatif: {amount}")
    return d, amount


def readable_records(records: Iterable, kind: str) -> Iterable[tuple[object, date, Decimal]]:
    for r in records:
        try:
            d, amount = read_record(r)
        except MalformedRecord as exc:
            logger.warning("Skipping malformed %s record %r: %s", kind, r, exc)
            continue
        yield r, d, amount


def series_window(
    window: Optional[tuple[date, date]],
    *,
    today: date,
    months: int = DEFAULT_SERIES_MONTHS,
) -> tuple[date, date]:
    """First and last month of the series; trailing ``months`` by default."""
    if window is not None:
        return month_start(window[0]), month_start(window[1])
    last = month_start(today)
    return add_months(last, -(max(months, 1) - 1)), last


def aggregate(
    payments: Iterable,
    savings_payments: Iterable,
    expenses: Iterable,
    window: Optional[tuple[date, date]] = None,
    *,
    today: Optional[date] = None,
    months: int = DEFAULT_SERIES_MONTHS,
    formatter: Optional[PeriodLabelFormatter] = None,
) -> LedgerSnapshot:
    formatter = formatter or DEFAULT_FORMATTER
    first, last = series_window(window, today=today or today_local(), months=months)

    buckets: dict[date, list[Decimal]] = {m: [ZERO, ZERO] for m in iter_months(first, last)}
    income = ZERO
    expense = ZERO
    used = 0

    income_records = list(chain(payments, savings_payments))
    expense_records = list(expenses)
    seen = len(income_records) + len(expense_records)

    for _, d, amount in readable_records(income_records, "income"):
        income += amount
        used += 1
        bucket = buckets.get(month_start(d))
        if bucket is not None:
            bucket[0] += amount

    for _, d, amount in readable_records(expense_records, "expense"):
        expense += amount
        used += 1
        bucket = buckets.get(month_start(d))
        if bucket is not None:
            bucket[1] += amount

    series = tuple(
        MonthlyBucket(month=m, label=formatter.short_month(m.month), income=v[0], expense=v[1])
        for m, v in buckets.items()
    )
    return LedgerSnapshot(
        total_income=income,
        total_expense=expense,
        balance=income - expense,
        monthly_series=series,
        skipped=seen - used,
    )


def build_transactions(
    payments: Iterable,
    savings_payments: Iterable,
    expenses: Iterable,
    *,
    schemes: Optional[Mapping[str, object]] = None,
    student_names: Optional[Mapping[str, str]] = None,
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[Transaction]:
    """Report rows from every source, newest first.

    ``schemes`` maps a savings scope id to its ``SavingsScheme`` so savings
    payments can be labelled Tabungan or Iuran.
    """
    schemes = schemes or {}
    student_names = student_names or {}
    rows: list[Transaction] = []

    def in_range(d: date) -> bool:
        return (start is None or d >= start) and (end is None or d <= end)

    for p, d, amount in readable_records(payments, "kas payment"):
        if in_range(d):
            name = student_names.get(p.student_id, "Unknown")
            rows.append(
                Transaction(
                    date=d,
                    kind=TransactionKind.INCOME,
                    category=KAS_CATEGORY,
                    description=f"Kas - {name}",
                    amount=amount,
                    source=TransactionSource.KAS,
                )
            )

    for p, d, amount in readable_records(savings_payments, "savings payment"):
        if not in_range(d):
            continue
        scheme = schemes.get(p.scope_id)
        kind = getattr(scheme, "kind", SavingsKind.TABUNGAN)
        scheme_name = getattr(scheme, "name", None) or kind.value.capitalize()
        name = student_names.get(p.student_id, "Unknown")
        rows.append(
            Transaction(
                date=d,
                kind=TransactionKind.INCOME,
                category="Tabungan" if kind == SavingsKind.TABUNGAN else "Iuran",
                description=f"{scheme_name} - {name}",
                amount=amount,
                source=TransactionSource(kind.value),
            )
        )

    for e, d, amount in readable_records(expenses, "expense"):
        if in_range(d):
            rows.append(
                Transaction(
                    date=d,
                    kind=TransactionKind.EXPENSE,
                    category=e.category,
                    description=e.note or "",
                    amount=amount,
                    source=TransactionSource.EXPENSE,
                )
            )

    rows.sort(key=lambda t: t.date, reverse=True)
    return rows
