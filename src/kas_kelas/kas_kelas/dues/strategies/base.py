from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ...periods.model import PeriodLabel
from ..model import PaymentRecord


class SettlementStrategy(ABC):
    """Strategy Pattern: decide which payment settles which period.

    Implementations receive the payments of one student in one scope and
    return a mapping of period label text to the payment that settles it.
    """

    @abstractmethod
    def settle(self, *, periods: Sequence[PeriodLabel], payments: Sequence[PaymentRecord]) -> dict[str, PaymentRecord]:
        raise NotImplementedError
