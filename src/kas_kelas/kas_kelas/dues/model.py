from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import coerce_date
from ..common.money import ZERO, to_money
from ..core.enums import PaymentMethod
from ..core.exceptions import MalformedRecord
from ..periods.model import PeriodLabel


@dataclass(frozen=True)
class PaymentRecord:
    """Entitas domain: one settlement event (kas or savings payment).

    ``scope_id`` is the class for kas payments or the scheme id for
    savings/dues payments. ``periods_covered`` > 1 means the student paid
    ahead; whether that settles later periods is up to the settlement strategy.
    """

    student_id: str
    scope_id: str
    date: date
    amount: Decimal
    period_label: str = ""
    periods_covered: int = 1
    method: PaymentMethod = PaymentMethod.CASH
    is_auto: bool = True
    note: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict, *, scope_key: str = "class_id") -> "PaymentRecord":
        """Build from a ``kas_payments``/``savings_payments`` row.

        Raises ``MalformedRecord`` for unreadable dates or amounts.
        """
        try:
            method = PaymentMethod(str(row.get("metode") or PaymentMethod.CASH.value).lower())
            covered = int(row.get("jumlah_periode") or 1)
        except ValueError as exc:
            raise MalformedRecord(f"Baris pembayaran tidak valid: {row.get('id')!r}") from exc

        return cls(
            student_id=str(row.get("student_id")),
            scope_id=str(row.get(scope_key)),
            date=coerce_date(row.get("tanggal")),
            amount=to_money(row.get("nominal")),
            period_label=row.get("periode_bulan") or "",
            periods_covered=max(covered, 1),
            method=method,
            is_auto=bool(row.get("is_auto", True)),
            note=row.get("keterangan"),
        )


@dataclass(frozen=True)
class PeriodStatus:
    label: PeriodLabel
    settled: bool
    amount_due: Decimal
    amount_paid: Decimal = ZERO
    paid_on: Optional[date] = None


@dataclass(frozen=True)
class ReconciliationResult:
    """Read-model: per-period status of one student in one scope. Never stored."""

    student_id: str
    scope_id: str
    periods: tuple[PeriodStatus, ...] = field(default_factory=tuple)
    total_outstanding: Decimal = ZERO

    @property
    def settled_count(self) -> int:
        return sum(1 for p in self.periods if p.settled)

    @property
    def outstanding_count(self) -> int:
        return sum(1 for p in self.periods if not p.settled)

    @property
    def outstanding_labels(self) -> list[str]:
        return [p.label.text for p in self.periods if not p.settled]


@dataclass(frozen=True)
class PaymentDefaults:
    """Prefilled values for the "otomatis" payment form."""

    amount: Decimal
    method: PaymentMethod
    periods_covered: int


@dataclass(frozen=True)
class Student:
    student_id: str
    name: str
    nis: Optional[str] = None
