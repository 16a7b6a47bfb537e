from __future__ import annotations

from datetime import date, timedelta

from ..common.datetime_utils import add_months

REPORT_PERIODS = ("hari_ini", "minggu_ini", "bulan_ini", "3_bulan", "semester", "tahun_ini")


def report_date_range(period: str, today: date) -> tuple[date, date]:
    """Date range of a report preset; unknown presets fall back to this month.

    Weeks start on Sunday, as on the report screen.
    """
    if period == "hari_ini":
        return today, today
    if period == "minggu_ini":
        return today - timedelta(days=(today.weekday() + 1) % 7), today
    if period == "3_bulan":
        return add_months(today, -3).replace(day=1), today
    if period == "semester":
        return add_months(today, -6).replace(day=1), today
    if period == "tahun_ini":
        return date(today.year, 1, 1), today
    return today.replace(day=1), today
