from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from src.kas_kelas.kas_kelas.core.enums import SavingsKind, TransactionKind, TransactionSource
from src.kas_kelas.kas_kelas.dues.model import PaymentRecord
from src.kas_kelas.kas_kelas.ledger.aggregator import aggregate, build_transactions
from src.kas_kelas.kas_kelas.ledger.model import ExpenseRecord

TODAY = date(2026, 3, 15)


def _pay(amount, paid_on, *, student_id="s1", scope_id="kelas-1"):
    return PaymentRecord(student_id=student_id, scope_id=scope_id, date=paid_on, amount=Decimal(amount))


def _expense(amount, spent_on, category="Lainnya", note=None):
    return ExpenseRecord(scope_id="kelas-1", date=spent_on, category=category, amount=Decimal(amount), note=note)


class _Broken:
    student_id = "s9"
    scope_id = "kelas-1"
    date = "bukan-tanggal"
    amount = Decimal("5000")


def test_balance_is_income_minus_expense():
    snapshot = aggregate(
        [_pay(150000, date(2026, 1, 5))],
        [_pay(50000, date(2026, 2, 5), scope_id="tabungan-1")],
        [_expense(60000, date(2026, 2, 20))],
        today=TODAY,
    )

    assert snapshot.total_income == Decimal("150000") + Decimal("50000")
    assert snapshot.total_expense == Decimal("60000")
    assert snapshot.balance == Decimal("140000")
    assert snapshot.skipped == 0


def test_empty_history_gives_zero_series():
    snapshot = aggregate([], [], [], today=TODAY)

    assert snapshot.balance == 0
    assert len(snapshot.monthly_series) == 6
    assert all(b.income == 0 and b.expense == 0 for b in snapshot.monthly_series)


def test_series_is_chronological_with_empty_months():
    snapshot = aggregate(
        [_pay(10000, date(2025, 11, 3)), _pay(20000, date(2026, 3, 1))],
        [],
        [_expense(5000, date(2026, 1, 9))],
        today=TODAY,
    )

    assert [b.label for b in snapshot.monthly_series] == ["Okt", "Nov", "Des", "Jan", "Feb", "Mar"]
    assert [b.income for b in snapshot.monthly_series] == [0, 10000, 0, 0, 0, 20000]
    assert [b.expense for b in snapshot.monthly_series] == [0, 0, 0, 5000, 0, 0]
    assert snapshot.monthly_series[3].net == Decimal("-5000")


def test_totals_include_records_outside_series_window():
    snapshot = aggregate([_pay(10000, date(2024, 1, 3))], [], [], today=TODAY)

    assert snapshot.total_income == Decimal("10000")
    assert sum(b.income for b in snapshot.monthly_series) == 0


def test_custom_window():
    snapshot = aggregate(
        [_pay(10000, date(2025, 8, 3))],
        [],
        [],
        (date(2025, 7, 15), date(2025, 9, 2)),
        today=TODAY,
    )

    assert [b.month for b in snapshot.monthly_series] == [date(2025, 7, 1), date(2025, 8, 1), date(2025, 9, 1)]
    assert snapshot.monthly_series[1].income == Decimal("10000")


def test_malformed_record_is_skipped_and_logged(caplog):
    with caplog.at_level(logging.WARNING):
        snapshot = aggregate([_pay(10000, date(2026, 3, 2)), _Broken()], [], [], today=TODAY)

    assert snapshot.total_income == Decimal("10000")
    assert snapshot.skipped == 1
    assert "Skipping malformed" in caplog.text


def test_negative_amount_is_treated_as_malformed():
    snapshot = aggregate([], [], [_expense(-1000, date(2026, 3, 2))], today=TODAY)
    assert snapshot.total_expense == 0
    assert snapshot.skipped == 1


def test_build_transactions_newest_first_with_categories():
    class Scheme:
        name = "Study Tour"
        kind = SavingsKind.TABUNGAN

    rows = build_transactions(
        [_pay(10000, date(2026, 3, 1))],
        [_pay(25000, date(2026, 3, 10), scope_id="tab-1", student_id="s2")],
        [_expense(7000, date(2026, 3, 5), category="ATK", note="Spidol")],
        schemes={"tab-1": Scheme()},
        student_names={"s1": "Andi", "s2": "Budi"},
    )

    assert [(r.category, r.description) for r in rows] == [
        ("Tabungan", "Study Tour - Budi"),
        ("ATK", "Spidol"),
        ("Kas Kelas", "Kas - Andi"),
    ]
    assert rows[0].source == TransactionSource.TABUNGAN
    assert rows[1].kind == TransactionKind.EXPENSE
    assert rows[1].signed_amount == Decimal("-7000")


def test_build_transactions_filters_range_and_unknown_names():
    rows = build_transactions(
        [_pay(10000, date(2026, 2, 28)), _pay(10000, date(2026, 3, 1), student_id="x")],
        [],
        [],
        start=date(2026, 3, 1),
        end=date(2026, 3, 31),
    )

    assert len(rows) == 1
    assert rows[0].description == "Kas - Unknown"


def test_iuran_payments_are_labelled_iuran():
    class Scheme:
        name = "Iuran Ulang Tahun"
        kind = SavingsKind.IURAN

    rows = build_transactions([], [_pay(5000, date(2026, 3, 1), scope_id="iu-1")], [], schemes={"iu-1": Scheme()})
    assert rows[0].category == "Iuran"
    assert rows[0].source == TransactionSource.IURAN
