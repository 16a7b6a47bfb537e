from __future__ import annotations

import io
from datetime import date
from decimal import Decimal

import pandas as pd
import pytest

from src.kas_kelas.kas_kelas.core.exceptions import ValidationError
from src.kas_kelas.kas_kelas.dues.model import PaymentRecord
from src.kas_kelas.kas_kelas.ledger.model import ExpenseRecord
from src.kas_kelas.kas_kelas.ledger.service import LedgerService
from src.kas_kelas.kas_kelas.report.exporter import export_csv, export_xlsx, report_filename
from src.kas_kelas.kas_kelas.report.service import REPORT_COLUMNS, ReportService


class FakeLedgerRepo:
    def __init__(self, kas=None, expenses=None):
        self.kas = kas or []
        self.expenses = expenses or []

    def list_kas_payments(self, class_id):
        return self.kas

    def list_savings_schemes(self, class_id):
        return []

    def list_savings_payments(self, scheme_id):
        return []

    def list_expenses(self, class_id):
        return self.expenses

    def student_names(self, class_id):
        return {"s1": "Andi"}


TODAY = date(2026, 3, 15)


def _report(period="bulan_ini"):
    repo = FakeLedgerRepo(
        kas=[
            PaymentRecord("s1", "kelas-1", date(2026, 3, 2), Decimal("10000"), "Maret 2026"),
            PaymentRecord("s1", "kelas-1", date(2026, 1, 2), Decimal("10000"), "Januari 2026"),
        ],
        expenses=[ExpenseRecord("kelas-1", date(2026, 3, 4), "Kebersihan", Decimal("3000"), "Sapu")],
    )
    return ReportService(LedgerService(repo)).build_report("kelas-1", period=period, today=TODAY)


def test_build_report_rows_and_summary():
    report = _report()

    assert report.start == date(2026, 3, 1)
    assert report.rows[0] == {
        "Tanggal": "04/03/2026",
        "Jenis": "Pengeluaran",
        "Kategori": "Kebersihan",
        "Keterangan": "Sapu",
        "Nominal": Decimal("3000"),
    }
    assert report.summary == {
        "total_pemasukan": Decimal("10000"),
        "total_pengeluaran": Decimal("3000"),
        "saldo_akhir": Decimal("7000"),
        "jumlah_transaksi": 2,
    }


def test_longer_period_includes_older_rows():
    assert _report("3_bulan").summary["jumlah_transaksi"] == 3


def test_export_csv_layout(tmp_path):
    target = tmp_path / "laporan.csv"
    content = export_csv(_report(), target)
    lines = content.splitlines()

    assert lines[0] == ",".join(REPORT_COLUMNS)
    assert len(lines) == 1 + 2 + 1 + 3
    assert lines[3] == ""
    assert lines[4] == "Total Pemasukan,,,,10000"
    assert lines[-1] == "Saldo Akhir,,,,7000"
    assert target.read_text(encoding="utf-8") == content


def test_export_xlsx_sheets(tmp_path):
    target = tmp_path / "laporan.xlsx"
    data = export_xlsx(_report(), target)

    sheets = pd.read_excel(io.BytesIO(data), sheet_name=None)
    assert list(sheets) == ["Transaksi", "Ringkasan"]
    assert list(sheets["Transaksi"].columns) == list(REPORT_COLUMNS)
    assert sheets["Transaksi"]["Nominal"].sum() == 13000
    assert sheets["Ringkasan"]["Nominal"].tolist() == [10000, 3000, 7000]
    assert target.read_bytes() == data


def test_empty_report_cannot_be_exported():
    report = ReportService(LedgerService(FakeLedgerRepo())).build_report("kelas-1", today=TODAY)

    assert report.summary["jumlah_transaksi"] == 0
    with pytest.raises(ValidationError):
        export_csv(report)
    with pytest.raises(ValidationError):
        export_xlsx(report)


def test_report_filename():
    assert report_filename("bulan_ini", TODAY, "csv") == "Laporan_Keuangan_bulan_ini_2026-03-15.csv"
