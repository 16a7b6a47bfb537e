from __future__ import annotations

from enum import Enum


class CadenceKind(str, Enum):
    """Jenis periode pembayaran, nilai sama dengan yang tersimpan di database."""

    DAILY = "harian"
    WEEKLY = "mingguan"
    MONTHLY = "bulanan"


class Weekday(str, Enum):
    """Nama hari (huruf kecil) seperti disimpan pada ``periode_day``."""

    SENIN = "senin"
    SELASA = "selasa"
    RABU = "rabu"
    KAMIS = "kamis"
    JUMAT = "jumat"
    SABTU = "sabtu"
    MINGGU = "minggu"

    @classmethod
    def from_date(cls, value) -> "Weekday":
        return list(cls)[value.weekday()]


class PaymentMethod(str, Enum):
    CASH = "cash"
    QRIS = "qris"


class SavingsKind(str, Enum):
    """Tabungan punya target nominal, iuran tidak."""

    TABUNGAN = "tabungan"
    IURAN = "iuran"


class TransactionKind(str, Enum):
    INCOME = "pemasukan"
    EXPENSE = "pengeluaran"


class TransactionSource(str, Enum):
    KAS = "kas"
    TABUNGAN = "tabungan"
    IURAN = "iuran"
    EXPENSE = "pengeluaran"


class SettlementMode(str, Enum):
    """How payments are matched against billing periods."""

    LABEL_MATCH = "label_match"
    ADVANCE_COVERAGE = "advance_coverage"
