"""Example: calling the service layer directly with in-memory repositories.

A host application plugs in repositories backed by its own database; here
plain lists stand in for it.
"""

from datetime import date
from decimal import Decimal

from src.kas_kelas.kas_kelas.cadence.model import CadenceConfig
from src.kas_kelas.kas_kelas.common.money import format_rupiah
from src.kas_kelas.kas_kelas.dues.model import PaymentRecord, Student
from src.kas_kelas.kas_kelas.ledger.model import ExpenseRecord
from src.kas_kelas.kas_kelas.main import create_services

STUDENTS = [Student("1", "Andi"), Student("2", "Budi")]
PAYMENTS = [PaymentRecord("1", "kelas-1", date(2026, 1, 6), Decimal("10000"), "Januari 2026")]
EXPENSES = [ExpenseRecord("kelas-1", date(2026, 2, 2), "ATK", Decimal("4000"), "Spidol")]


class MemoryDuesRepo:
    def get_active_cadence(self, scope_id):
        return CadenceConfig.monthly(10000)

    def list_students(self, class_id):
        return STUDENTS

    def list_payments(self, scope_id, *, student_id=None):
        return [p for p in PAYMENTS if student_id is None or p.student_id == student_id]


class MemoryLedgerRepo:
    def list_kas_payments(self, class_id):
        return PAYMENTS

    def list_savings_schemes(self, class_id):
        return []

    def list_savings_payments(self, scheme_id):
        return []

    def list_expenses(self, class_id):
        return EXPENSES

    def student_names(self, class_id):
        return {s.student_id: s.name for s in STUDENTS}


def main():
    container = create_services(MemoryDuesRepo(), MemoryLedgerRepo())
    today = date(2026, 3, 15)

    for result in container.dues_service.class_status("kelas-1", today=today):
        print(result.student_id, result.outstanding_labels, format_rupiah(result.total_outstanding))

    snapshot = container.ledger_service.snapshot("kelas-1", today=today)
    print("Saldo:", format_rupiah(snapshot.balance))


if __name__ == "__main__":
    main()
