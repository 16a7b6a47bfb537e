from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..common.datetime_utils import add_months
from ..common.money import ZERO
from .aggregator import readable_records
from .model import MonthToDate


def _percent(count: int, total: int) -> int:
    if not total:
        return 0
    return int((Decimal(count * 100) / Decimal(total)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def month_to_date(payments: Iterable, expenses: Iterable, *, today: date, total_students: int) -> MonthToDate:
    """Treasurer dashboard figures: this month's flows and who has paid.

    "Semester" here means the last six months counted back from today.
    """
    first_of_month = today.replace(day=1)
    semester_start = add_months(today, -6)

    income = ZERO
    paid_month: set[str] = set()
    paid_semester: set[str] = set()
    for p, d, amount in readable_records(payments, "kas payment"):
        if d >= first_of_month:
            income += amount
            paid_month.add(p.student_id)
        if d >= semester_start:
            paid_semester.add(p.student_id)

    expense = sum((amount for _, d, amount in readable_records(expenses, "expense") if d >= first_of_month), ZERO)

    return MonthToDate(
        income=income,
        expense=expense,
        students_paid_month=len(paid_month),
        students_paid_semester=len(paid_semester),
        total_students=total_students,
        percent_paid_month=_percent(len(paid_month), total_students),
        percent_paid_semester=_percent(len(paid_semester), total_students),
    )
