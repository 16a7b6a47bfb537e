from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from ..core.exceptions import ValidationError
from .service import REPORT_COLUMNS, ReportData

logger = logging.getLogger(__name__)

SUMMARY_LABELS = (
    ("Total Pemasukan", "total_pemasukan"),
    ("Total Pengeluaran", "total_pengeluaran"),
    ("Saldo Akhir", "saldo_akhir"),
)


def report_filename(period: str, generated_on, suffix: str) -> str:
    return f"Laporan_Keuangan_{period}_{generated_on:%Y-%m-%d}.{suffix}"


def _frame(report: ReportData) -> pd.DataFrame:
    if not report.rows:
        raise ValidationError("Tidak ada data untuk diexport")
    df = pd.DataFrame(report.rows, columns=list(REPORT_COLUMNS))
    df["Nominal"] = df["Nominal"].map(lambda v: float(v))
    return df


def _summary_frame(report: ReportData) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Keterangan": label, "Nominal": float(report.summary[key])} for label, key in SUMMARY_LABELS]
    )


def export_csv(report: ReportData, target: Optional[Union[str, Path]] = None) -> str:
    """Transaction rows, a blank line, then the totals (same layout as the web export)."""
    df = _frame(report)
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    buf.write("\n")
    for label, key in SUMMARY_LABELS:
        buf.write(f"{label},,,,{report.summary[key]}\n")

    content = buf.getvalue()
    if target is not None:
        Path(target).write_text(content, encoding="utf-8")
        logger.info("Wrote %d report rows to %s", len(df), target)
    return content


def export_xlsx(report: ReportData, target: Optional[Union[str, Path]] = None) -> bytes:
    """Workbook with a ``Transaksi`` sheet and a ``Ringkasan`` sheet."""
    df = _frame(report)

    # Tulis ke memori dulu, simpan ke disk hanya jika ada target
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Transaksi")
        _summary_frame(report).to_excel(writer, index=False, sheet_name="Ringkasan")

    data = output.getvalue()
    if target is not None:
        Path(target).write_bytes(data)
        logger.info("Wrote %d report rows to %s", len(df), target)
    return data
