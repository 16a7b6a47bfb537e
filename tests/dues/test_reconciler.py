from __future__ import annotations

from datetime import date
from decimal import Decimal

from src.kas_kelas.kas_kelas.cadence.model import CadenceConfig
from src.kas_kelas.kas_kelas.core.enums import PaymentMethod
from src.kas_kelas.kas_kelas.dues.model import PaymentRecord
from src.kas_kelas.kas_kelas.dues.reconciler import Reconciler, default_payment, reconcile
from src.kas_kelas.kas_kelas.dues.strategies.advance_coverage_strategy import AdvanceCoverageStrategy
from src.kas_kelas.kas_kelas.periods.sequencer import semester_periods

TODAY = date(2026, 3, 15)
CADENCE = CadenceConfig.monthly(10000)
PERIODS = semester_periods(CADENCE, today=TODAY)


def _pay(label: str, *, student_id="s1", scope_id="kelas-1", covered=1, paid_on=date(2026, 1, 10)):
    return PaymentRecord(
        student_id=student_id,
        scope_id=scope_id,
        date=paid_on,
        amount=Decimal("10000") * covered,
        period_label=label,
        periods_covered=covered,
    )


def test_only_january_paid_leaves_two_months_outstanding():
    result = reconcile("s1", "kelas-1", PERIODS, [_pay("Januari 2026")], cadence=CADENCE)

    assert [(p.label.text, p.settled) for p in result.periods] == [
        ("Januari 2026", True),
        ("Februari 2026", False),
        ("Maret 2026", False),
    ]
    assert result.total_outstanding == Decimal("20000")
    assert result.outstanding_labels == ["Februari 2026", "Maret 2026"]


def test_no_payments_means_every_period_outstanding():
    result = reconcile("s1", "kelas-1", PERIODS, [], cadence=CADENCE)

    assert result.settled_count == 0
    assert result.outstanding_count == 3
    assert result.total_outstanding == Decimal("30000")


def test_other_students_and_scopes_are_ignored():
    payments = [
        _pay("Januari 2026", student_id="s2"),
        _pay("Februari 2026", scope_id="tabungan-1"),
    ]
    result = reconcile("s1", "kelas-1", PERIODS, payments, cadence=CADENCE)
    assert result.total_outstanding == Decimal("30000")


def test_settled_period_reports_payment():
    result = reconcile("s1", "kelas-1", PERIODS, [_pay("Februari 2026", paid_on=date(2026, 2, 3))], cadence=CADENCE)
    feb = result.periods[1]

    assert feb.settled
    assert feb.amount_paid == Decimal("10000")
    assert feb.paid_on == date(2026, 2, 3)


def test_earliest_payment_is_reported_for_duplicate_labels():
    payments = [
        _pay("Januari 2026", paid_on=date(2026, 1, 20)),
        _pay("Januari 2026", paid_on=date(2026, 1, 5)),
    ]
    result = reconcile("s1", "kelas-1", PERIODS, payments, cadence=CADENCE)
    assert result.periods[0].paid_on == date(2026, 1, 5)


def test_adding_a_payment_only_settles_its_own_label():
    before = reconcile("s1", "kelas-1", PERIODS, [_pay("Januari 2026")], cadence=CADENCE)
    after = reconcile("s1", "kelas-1", PERIODS, [_pay("Januari 2026"), _pay("Maret 2026")], cadence=CADENCE)

    changed = [b.label.text for b, a in zip(before.periods, after.periods) if b.settled != a.settled]
    assert changed == ["Maret 2026"]
    assert after.total_outstanding == before.total_outstanding - CADENCE.amount_per_period


def test_outstanding_is_zero_once_everything_is_settled():
    payments = [_pay(p.text) for p in PERIODS]
    result = reconcile("s1", "kelas-1", PERIODS, payments, cadence=CADENCE)
    assert result.total_outstanding == 0
    assert result.outstanding_count == 0


def test_empty_sequence_gives_empty_result():
    result = reconcile("s1", "kelas-1", [], [_pay("Januari 2026")], cadence=CADENCE)
    assert result.periods == ()
    assert result.total_outstanding == 0


def test_paying_ahead_settles_only_the_recorded_label_by_default():
    result = reconcile("s1", "kelas-1", PERIODS, [_pay("Januari 2026", covered=3)], cadence=CADENCE)
    assert [p.settled for p in result.periods] == [True, False, False]


def test_advance_coverage_settles_following_periods():
    reconciler = Reconciler(CADENCE, strategy=AdvanceCoverageStrategy(CADENCE))
    result = reconciler.reconcile("s1", "kelas-1", PERIODS, [_pay("Januari 2026", covered=3)])

    assert [p.settled for p in result.periods] == [True, True, True]
    assert result.total_outstanding == 0


def test_reconcile_is_repeatable():
    payments = [_pay("Februari 2026")]
    assert reconcile("s1", "kelas-1", PERIODS, payments, cadence=CADENCE) == reconcile(
        "s1", "kelas-1", PERIODS, payments, cadence=CADENCE
    )


def test_default_payment_multiplies_nominal():
    cadence = CadenceConfig.weekly(5000, ["senin"], default_method=PaymentMethod.QRIS)
    defaults = default_payment(cadence, 3)

    assert defaults.amount == Decimal("15000")
    assert defaults.method == PaymentMethod.QRIS
    assert defaults.periods_covered == 3
