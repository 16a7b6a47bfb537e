from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..cadence.labels import PeriodLabelFormatter
from ..cadence.model import CadenceConfig
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_DAILY_EPOCH, DEFAULT_OVERDUE_TOP_N
from ..core.exceptions import InvalidCadence
from ..periods.sequencer import semester_periods
from .factory import SettlementStrategyFactory
from .model import PaymentDefaults, ReconciliationResult
from .reconciler import Reconciler, default_payment
from .repository import DuesRepository
from .tenure_gap import OverdueStudent, rank_overdue

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "Pengaturan kas belum dikonfigurasi"


class DuesService:
    def __init__(
        self,
        dues: DuesRepository,
        *,
        strategy_factory: Optional[SettlementStrategyFactory] = None,
        formatter: Optional[PeriodLabelFormatter] = None,
        epoch: date = DEFAULT_DAILY_EPOCH,
    ):
        self._dues = dues
        self._formatter = formatter
        self._factory = strategy_factory or SettlementStrategyFactory(formatter=formatter)
        self._epoch = epoch

    def cadence_for(self, scope_id: str) -> CadenceConfig:
        cadence = self._dues.get_active_cadence(scope_id)
        if cadence is None:
            raise InvalidCadence(NOT_CONFIGURED)
        return cadence.require_active()

    def student_status(self, student_id: str, scope_id: str, *, today: Optional[date] = None) -> ReconciliationResult:
        """Semester status of one student (the student-facing kas page)."""
        today = today or today_local()
        cadence = self.cadence_for(scope_id)
        periods = semester_periods(cadence, today=today, formatter=self._formatter, epoch=self._epoch)
        payments = self._dues.list_payments(scope_id, student_id=student_id)

        reconciler = Reconciler(cadence, strategy=self._factory.for_cadence(cadence))
        return reconciler.reconcile(student_id, scope_id, periods, payments)

    def class_status(self, scope_id: str, *, today: Optional[date] = None) -> list[ReconciliationResult]:
        """Semester status of every student in the class, in roster order."""
        today = today or today_local()
        cadence = self.cadence_for(scope_id)
        periods = semester_periods(cadence, today=today, formatter=self._formatter, epoch=self._epoch)
        payments = self._dues.list_payments(scope_id)

        reconciler = Reconciler(cadence, strategy=self._factory.for_cadence(cadence))
        results = [
            reconciler.reconcile(s.student_id, scope_id, periods, payments)
            for s in self._dues.list_students(scope_id)
        ]
        logger.debug("Reconciled %d students for scope %s", len(results), scope_id)
        return results

    def overdue_ranking(
        self,
        scope_id: str,
        *,
        today: Optional[date] = None,
        limit: Optional[int] = DEFAULT_OVERDUE_TOP_N,
    ) -> list[OverdueStudent]:
        """Most overdue students by months since their last payment."""
        today = today or today_local()
        last: dict[str, Optional[date]] = {s.student_id: None for s in self._dues.list_students(scope_id)}
        for p in self._dues.list_payments(scope_id):
            if p.student_id not in last:
                continue
            if last[p.student_id] is None or p.date > last[p.student_id]:
                last[p.student_id] = p.date
        return rank_overdue(last, today, limit=limit)

    def payment_defaults(self, scope_id: str, *, periods_covered: int = 1) -> PaymentDefaults:
        return default_payment(self.cadence_for(scope_id), periods_covered)
