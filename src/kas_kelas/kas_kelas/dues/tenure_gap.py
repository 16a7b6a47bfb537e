"""Coarse "months since last payment" arrears estimate.

Powers the treasurer's most-overdue ranking. It is deliberately independent
of the per-period ``Reconciler`` and the two may disagree, e.g. for students
who pay ahead under a later label.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Mapping, Optional

from ..common.datetime_utils import month_index
from ..core.constants import DEFAULT_OVERDUE_TOP_N


@dataclass(frozen=True)
class OverdueStudent:
    student_id: str
    months_unpaid: int
    last_payment: Optional[date] = None


def estimate_gap_months(last_payment: Optional[date], today: date) -> int:
    """Months owed since the last payment; the payment month itself is not owed.

    Without any payment the student owes since January of the current year.
    """
    if last_payment is None:
        return today.month
    return max(month_index(today) - month_index(last_payment) - 1, 0)


def rank_overdue(
    last_payments: Mapping[str, Optional[date]],
    today: date,
    *,
    limit: Optional[int] = DEFAULT_OVERDUE_TOP_N,
) -> list[OverdueStudent]:
    """Students with a gap, most overdue first (ties by student id).

    ``limit=None`` returns every overdue student.
    """
    rows = []
    for student_id, last in last_payments.items():
        months = estimate_gap_months(last, today)
        if months > 0:
            rows.append(OverdueStudent(student_id=student_id, months_unpaid=months, last_payment=last))
    rows.sort(key=lambda r: (-r.months_unpaid, r.student_id))
    return rows if limit is None else rows[:max(limit, 0)]
