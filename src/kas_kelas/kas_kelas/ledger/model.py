from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import coerce_date
from ..common.money import ZERO, to_money
from ..core.enums import TransactionKind, TransactionSource


@dataclass(frozen=True)
class ExpenseRecord:
    """Entitas domain: one outflow from the class fund (pengeluaran)."""

    scope_id: str
    date: date
    category: str
    amount: Decimal
    note: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "ExpenseRecord":
        """Build from a ``kas_expenses`` row; raises ``MalformedRecord``."""
        return cls(
            scope_id=str(row.get("class_id")),
            date=coerce_date(row.get("tanggal")),
            category=row.get("kategori") or "Lainnya",
            amount=to_money(row.get("nominal")),
            note=row.get("keterangan"),
        )


@dataclass(frozen=True)
class MonthlyBucket:
    month: date
    label: str
    income: Decimal = ZERO
    expense: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class LedgerSnapshot:
    """Derived totals; recomputed from the full history on every call."""

    total_income: Decimal = ZERO
    total_expense: Decimal = ZERO
    balance: Decimal = ZERO
    monthly_series: tuple[MonthlyBucket, ...] = field(default_factory=tuple)
    skipped: int = 0


@dataclass(frozen=True)
class Transaction:
    """Read-model untuk laporan/ekspor: one row of the financial report."""

    date: date
    kind: TransactionKind
    category: str
    description: str
    amount: Decimal
    source: TransactionSource

    @property
    def signed_amount(self) -> Decimal:
        return self.amount if self.kind == TransactionKind.INCOME else -self.amount


@dataclass(frozen=True)
class MonthToDate:
    income: Decimal
    expense: Decimal
    students_paid_month: int
    students_paid_semester: int
    total_students: int
    percent_paid_month: int
    percent_paid_semester: int
