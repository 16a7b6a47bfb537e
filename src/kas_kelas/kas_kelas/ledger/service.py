from __future__ import annotations

from datetime import date
from typing import Optional

from ..cadence.labels import PeriodLabelFormatter
from ..common.datetime_utils import today_local
from ..core.constants import DEFAULT_SERIES_MONTHS
from ..savings.model import SavingsProgress
from ..savings.progress import savings_progress
from .aggregator import aggregate, build_transactions
from .dashboard import month_to_date
from .model import LedgerSnapshot, MonthToDate, Transaction
from .repository import LedgerRepository


class LedgerService:
    def __init__(
        self,
        ledger: LedgerRepository,
        *,
        formatter: Optional[PeriodLabelFormatter] = None,
        series_months: int = DEFAULT_SERIES_MONTHS,
    ):
        self._ledger = ledger
        self._formatter = formatter
        self._series_months = int(series_months)

    def _savings_payments(self, class_id: str) -> list:
        out = []
        for scheme in self._ledger.list_savings_schemes(class_id):
            out.extend(self._ledger.list_savings_payments(scheme.scope_id))
        return out

    def snapshot(
        self,
        class_id: str,
        *,
        today: Optional[date] = None,
        window: Optional[tuple[date, date]] = None,
    ) -> LedgerSnapshot:
        return aggregate(
            self._ledger.list_kas_payments(class_id),
            self._savings_payments(class_id),
            self._ledger.list_expenses(class_id),
            window,
            today=today or today_local(),
            months=self._series_months,
            formatter=self._formatter,
        )

    def transactions(
        self,
        class_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[Transaction]:
        schemes = {s.scope_id: s for s in self._ledger.list_savings_schemes(class_id)}
        return build_transactions(
            self._ledger.list_kas_payments(class_id),
            self._savings_payments(class_id),
            self._ledger.list_expenses(class_id),
            schemes=schemes,
            student_names=self._ledger.student_names(class_id),
            start=start,
            end=end,
        )

    def month_to_date(self, class_id: str, *, today: Optional[date] = None) -> MonthToDate:
        return month_to_date(
            self._ledger.list_kas_payments(class_id),
            self._ledger.list_expenses(class_id),
            today=today or today_local(),
            total_students=len(self._ledger.student_names(class_id)),
        )

    def savings_overview(self, class_id: str) -> list[SavingsProgress]:
        return [
            savings_progress(s, self._ledger.list_savings_payments(s.scope_id))
            for s in self._ledger.list_savings_schemes(class_id)
        ]
