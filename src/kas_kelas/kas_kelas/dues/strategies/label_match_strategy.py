from __future__ import annotations

from typing import Sequence

from ...periods.model import PeriodLabel
from ..model import PaymentRecord
from .base import SettlementStrategy


class LabelMatchStrategy(SettlementStrategy):
    """A period is settled by any payment recorded under its label.

    ``periods_covered`` only affects the amount paid, never later periods.
    The earliest payment is reported when several share a label.
    """

    def settle(self, *, periods: Sequence[PeriodLabel], payments: Sequence[PaymentRecord]) -> dict[str, PaymentRecord]:
        settled: dict[str, PaymentRecord] = {}
        for p in sorted(payments, key=lambda p: p.date):
            if p.period_label:
                settled.setdefault(p.period_label, p)
        return settled
