from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.kas_kelas.kas_kelas.cadence.model import CadenceConfig
from src.kas_kelas.kas_kelas.core.enums import SavingsKind
from src.kas_kelas.kas_kelas.dues.model import PaymentRecord
from src.kas_kelas.kas_kelas.ledger.model import ExpenseRecord
from src.kas_kelas.kas_kelas.ledger.service import LedgerService
from src.kas_kelas.kas_kelas.savings.model import SavingsScheme


class FakeLedgerRepo:
    def __init__(self):
        self.kas = [
            PaymentRecord("s1", "kelas-1", date(2026, 3, 2), Decimal("10000"), "Maret 2026"),
            PaymentRecord("s2", "kelas-1", date(2026, 2, 2), Decimal("10000"), "Februari 2026"),
        ]
        self.schemes = [
            SavingsScheme(
                scope_id="tab-1",
                class_id="kelas-1",
                name="Study Tour",
                kind=SavingsKind.TABUNGAN,
                cadence=CadenceConfig.monthly(50000),
                target_amount=Decimal("200000"),
            )
        ]
        self.savings = {"tab-1": [PaymentRecord("s1", "tab-1", date(2026, 3, 4), Decimal("50000"))]}
        self.expenses = [ExpenseRecord("kelas-1", date(2026, 3, 6), "ATK", Decimal("15000"), "Kertas")]

    def list_kas_payments(self, class_id):
        return self.kas

    def list_savings_schemes(self, class_id):
        return self.schemes

    def list_savings_payments(self, scheme_id):
        return self.savings.get(scheme_id, [])

    def list_expenses(self, class_id):
        return self.expenses

    def student_names(self, class_id):
        return {"s1": "Andi", "s2": "Budi"}


TODAY = date(2026, 3, 15)


def test_snapshot_combines_all_sources():
    snapshot = LedgerService(FakeLedgerRepo()).snapshot("kelas-1", today=TODAY)

    assert snapshot.total_income == Decimal("70000")
    assert snapshot.total_expense == Decimal("15000")
    assert snapshot.balance == Decimal("55000")
    assert snapshot.monthly_series[-1].income == Decimal("60000")


def test_snapshot_reflects_deleted_records():
    repo = FakeLedgerRepo()
    service = LedgerService(repo)
    before = service.snapshot("kelas-1", today=TODAY)

    repo.expenses = []
    after = service.snapshot("kelas-1", today=TODAY)

    assert after.balance == before.balance + Decimal("15000")


def test_series_length_follows_configuration():
    snapshot = LedgerService(FakeLedgerRepo(), series_months=3).snapshot("kelas-1", today=TODAY)
    assert [b.label for b in snapshot.monthly_series] == ["Jan", "Feb", "Mar"]


def test_transactions_in_range():
    rows = LedgerService(FakeLedgerRepo()).transactions("kelas-1", start=date(2026, 3, 1), end=TODAY)

    assert [r.description for r in rows] == ["Kertas", "Study Tour - Andi", "Kas - Andi"]


def test_month_to_date_uses_roster_size():
    stats = LedgerService(FakeLedgerRepo()).month_to_date("kelas-1", today=TODAY)

    assert stats.total_students == 2
    assert stats.students_paid_month == 1
    assert stats.percent_paid_month == 50


def test_savings_overview():
    (progress,) = LedgerService(FakeLedgerRepo()).savings_overview("kelas-1")

    assert progress.collected == Decimal("50000")
    assert progress.remaining == Decimal("150000")
    assert progress.percentage == Decimal("25.00")
