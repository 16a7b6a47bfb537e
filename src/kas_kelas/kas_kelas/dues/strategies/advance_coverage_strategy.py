from __future__ import annotations

from typing import Optional, Sequence

from ...cadence.labels import PeriodLabelFormatter
from ...cadence.model import CadenceConfig
from ...periods.model import PeriodLabel
from ...periods.sequencer import successor_labels
from ..model import PaymentRecord
from .base import SettlementStrategy


class AdvanceCoverageStrategy(SettlementStrategy):
    """A payment settles its own label and the next ``periods_covered - 1``."""

    def __init__(self, cadence: CadenceConfig, *, formatter: Optional[PeriodLabelFormatter] = None):
        self._cadence = cadence
        self._formatter = formatter

    def settle(self, *, periods: Sequence[PeriodLabel], payments: Sequence[PaymentRecord]) -> dict[str, PaymentRecord]:
        settled: dict[str, PaymentRecord] = {}
        for p in sorted(payments, key=lambda p: p.date):
            if not p.period_label:
                continue
            covered = successor_labels(self._cadence, p.period_label, p.periods_covered, formatter=self._formatter)
            for text in covered:
                settled.setdefault(text, p)
        return settled
