from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import today_local
from ..common.money import ZERO
from ..core.enums import TransactionKind
from ..ledger.ranges import report_date_range
from ..ledger.service import LedgerService

REPORT_COLUMNS = ("Tanggal", "Jenis", "Kategori", "Keterangan", "Nominal")


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: dict
    start: date
    end: date


class ReportService:
    """Laporan keuangan: every transaction of a class in a preset period."""

    def __init__(self, ledger: LedgerService):
        self._ledger = ledger

    def build_report(
        self,
        class_id: str,
        *,
        period: str = "bulan_ini",
        today: Optional[date] = None,
    ) -> ReportData:
        start, end = report_date_range(period, today or today_local())
        transactions = self._ledger.transactions(class_id, start=start, end=end)

        income = ZERO
        expense = ZERO
        rows: list[dict] = []
        for t in transactions:
            if t.kind == TransactionKind.INCOME:
                income += t.amount
            else:
                expense += t.amount
            rows.append(
                {
                    "Tanggal": t.date.strftime("%d/%m/%Y"),
                    "Jenis": "Pemasukan" if t.kind == TransactionKind.INCOME else "Pengeluaran",
                    "Kategori": t.category,
                    "Keterangan": t.description,
                    "Nominal": t.amount,
                }
            )

        summary = {
            "total_pemasukan": income,
            "total_pengeluaran": expense,
            "saldo_akhir": income - expense,
            "jumlah_transaksi": len(rows),
        }
        return ReportData(rows=rows, summary=summary, start=start, end=end)
