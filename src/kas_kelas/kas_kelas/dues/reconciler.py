from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..cadence.model import CadenceConfig
from ..common.money import ZERO
from ..periods.model import PeriodLabel
from .model import PaymentDefaults, PaymentRecord, PeriodStatus, ReconciliationResult
from .strategies.base import SettlementStrategy
from .strategies.label_match_strategy import LabelMatchStrategy


class Reconciler:
    """Match one student's payments against a period sequence.

    Pure and stateless apart from the injected cadence and strategy, so one
    instance can serve many students (and threads) at once.
    """

    def __init__(self, cadence: CadenceConfig, *, strategy: Optional[SettlementStrategy] = None):
        self._cadence = cadence.validate()
        self._strategy = strategy or LabelMatchStrategy()

    def reconcile(
        self,
        student_id: str,
        scope_id: str,
        periods: Sequence[PeriodLabel],
        payments: Iterable[PaymentRecord],
    ) -> ReconciliationResult:
        own = [p for p in payments if p.student_id == student_id and p.scope_id == scope_id]
        settled_by = self._strategy.settle(periods=periods, payments=own)

        due = self._cadence.amount_per_period
        statuses = []
        total = ZERO
        for label in sorted(periods):
            payment = settled_by.get(label.text)
            if payment is None:
                statuses.append(PeriodStatus(label=label, settled=False, amount_due=due))
                total += due
            else:
                statuses.append(
                    PeriodStatus(
                        label=label,
                        settled=True,
                        amount_due=due,
                        amount_paid=payment.amount,
                        paid_on=payment.date,
                    )
                )

        return ReconciliationResult(
            student_id=student_id,
            scope_id=scope_id,
            periods=tuple(statuses),
            total_outstanding=total,
        )


def reconcile(
    student_id: str,
    scope_id: str,
    periods: Sequence[PeriodLabel],
    payments: Iterable[PaymentRecord],
    *,
    cadence: CadenceConfig,
    strategy: Optional[SettlementStrategy] = None,
) -> ReconciliationResult:
    return Reconciler(cadence, strategy=strategy).reconcile(student_id, scope_id, periods, payments)


def default_payment(cadence: CadenceConfig, periods_covered: int = 1) -> PaymentDefaults:
    """Amount and method prefilled in automatic mode: N periods x nominal."""
    periods_covered = max(int(periods_covered), 1)
    return PaymentDefaults(
        amount=cadence.amount_per_period * periods_covered,
        method=cadence.default_method,
        periods_covered=periods_covered,
    )
