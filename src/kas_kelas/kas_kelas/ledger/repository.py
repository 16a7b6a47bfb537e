from __future__ import annotations

from typing import Mapping, Protocol, Sequence

from ..dues.model import PaymentRecord
from ..savings.model import SavingsScheme
from .model import ExpenseRecord


class LedgerRepository(Protocol):
    """Read access to every money source of a class; implemented by the host app."""

    def list_kas_payments(self, class_id: str) -> Sequence[PaymentRecord]:
        raise NotImplementedError

    def list_savings_schemes(self, class_id: str) -> Sequence[SavingsScheme]:
        raise NotImplementedError

    def list_savings_payments(self, scheme_id: str) -> Sequence[PaymentRecord]:
        raise NotImplementedError

    def list_expenses(self, class_id: str) -> Sequence[ExpenseRecord]:
        raise NotImplementedError

    def student_names(self, class_id: str) -> Mapping[str, str]:
        raise NotImplementedError
