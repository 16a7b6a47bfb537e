from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..common.datetime_utils import coerce_date
from ..common.money import to_money
from ..core.enums import CadenceKind, PaymentMethod, Weekday
from ..core.exceptions import InvalidCadence, MalformedRecord


@dataclass(frozen=True)
class CadenceConfig:
    """Pengaturan periode pembayaran (kas kelas atau tabungan/iuran).

    Exactly one ``kind`` is populated, together with the detail fields that
    belong to it:

    * ``DAILY``: optional ``interval_days`` ("every N days"); ``None`` means
      every day. ``anchor`` is the reference date N-day cycles count from.
    * ``WEEKLY``: non-empty ``weekdays``.
    * ``MONTHLY``: optional non-empty ``month_days`` (suggested due dates).

    Use the ``daily``/``weekly``/``monthly`` constructors or ``from_row``;
    they all validate.
    """

    kind: CadenceKind
    amount_per_period: Decimal
    interval_days: Optional[int] = None
    weekdays: Optional[frozenset[Weekday]] = None
    month_days: Optional[frozenset[int]] = None
    default_method: PaymentMethod = PaymentMethod.CASH
    active: bool = True
    anchor: Optional[date] = None

    @classmethod
    def daily(cls, amount_per_period, *, interval_days: Optional[int] = None, **kwargs) -> "CadenceConfig":
        return cls(
            kind=CadenceKind.DAILY,
            amount_per_period=to_money(amount_per_period),
            interval_days=interval_days,
            **kwargs,
        ).validate()

    @classmethod
    def weekly(cls, amount_per_period, weekdays: Iterable, **kwargs) -> "CadenceConfig":
        return cls(
            kind=CadenceKind.WEEKLY,
            amount_per_period=to_money(amount_per_period),
            weekdays=_parse_weekdays(weekdays),
            **kwargs,
        ).validate()

    @classmethod
    def monthly(cls, amount_per_period, month_days: Optional[Iterable] = None, **kwargs) -> "CadenceConfig":
        return cls(
            kind=CadenceKind.MONTHLY,
            amount_per_period=to_money(amount_per_period),
            month_days=_parse_month_days(month_days) if month_days is not None else None,
            **kwargs,
        ).validate()

    @classmethod
    def from_row(cls, row: dict) -> "CadenceConfig":
        """Build from a ``kas_settings``/``class_savings`` row."""
        try:
            kind = CadenceKind(str(row.get("periode_type") or "").lower())
        except ValueError as exc:
            raise InvalidCadence(f"Jenis periode tidak dikenal: {row.get('periode_type')!r}") from exc

        try:
            amount = to_money(row.get("nominal_per_periode"))
            anchor = coerce_date(row["anchor"]) if row.get("anchor") else None
        except MalformedRecord as exc:
            raise InvalidCadence(str(exc)) from exc

        try:
            method = PaymentMethod(str(row.get("metode_default") or PaymentMethod.CASH.value).lower())
        except ValueError as exc:
            raise InvalidCadence(f"Metode pembayaran tidak dikenal: {row.get('metode_default')!r}") from exc

        value = row.get("periode_value")
        try:
            interval = int(value) if value else None
        except (TypeError, ValueError) as exc:
            raise InvalidCadence(f"Jumlah hari periode tidak valid: {value!r}") from exc

        days = row.get("periode_day")
        common = {
            "default_method": method,
            "active": _parse_active(row.get("is_active", True)),
            "anchor": anchor,
        }
        if kind == CadenceKind.DAILY:
            return cls.daily(amount, interval_days=interval, **common)
        if kind == CadenceKind.WEEKLY:
            return cls.weekly(amount, days or (), **common)
        # A blank due-date field is stored as an empty list: no due dates
        return cls.monthly(amount, days or None, **common)

    @property
    def every_day(self) -> bool:
        return self.kind == CadenceKind.DAILY and (self.interval_days is None or self.interval_days == 1)

    def validate(self) -> "CadenceConfig":
        if self.amount_per_period is None or self.amount_per_period <= 0:
            raise InvalidCadence("Nominal per periode harus lebih dari 0")

        if self.kind == CadenceKind.DAILY:
            if self.weekdays is not None or self.month_days is not None:
                raise InvalidCadence("Periode harian tidak memakai hari atau tanggal")
            if self.interval_days is not None and self.interval_days < 1:
                raise InvalidCadence("Periode harian harus diisi (minimal 1 hari)")
        elif self.kind == CadenceKind.WEEKLY:
            if self.interval_days is not None or self.month_days is not None:
                raise InvalidCadence("Periode mingguan hanya memakai daftar hari")
            if not self.weekdays:
                raise InvalidCadence("Pilih minimal 1 hari untuk periode mingguan")
        elif self.kind == CadenceKind.MONTHLY:
            if self.interval_days is not None or self.weekdays is not None:
                raise InvalidCadence("Periode bulanan hanya memakai daftar tanggal")
            if self.month_days is not None:
                if not self.month_days:
                    raise InvalidCadence("Daftar tanggal periode bulanan tidak boleh kosong")
                if any(d < 1 or d > 31 for d in self.month_days):
                    raise InvalidCadence("Tanggal periode bulanan harus di antara 1 dan 31")
        else:
            raise InvalidCadence(f"Jenis periode tidak dikenal: {self.kind!r}")
        return self

    def require_active(self) -> "CadenceConfig":
        if not self.active:
            raise InvalidCadence("Pengaturan kas tidak aktif")
        return self.validate()


def _parse_weekdays(values: Iterable) -> frozenset[Weekday]:
    out = set()
    for v in values:
        if isinstance(v, Weekday):
            out.add(v)
            continue
        try:
            out.add(Weekday(str(v).strip().lower()))
        except ValueError as exc:
            raise InvalidCadence(f"Nama hari tidak dikenal: {v!r}") from exc
    return frozenset(out)


def _parse_month_days(values: Iterable) -> frozenset[int]:
    out = set()
    for v in values:
        try:
            out.add(int(str(v).strip()))
        except ValueError as exc:
            raise InvalidCadence(f"Tanggal tidak valid: {v!r}") from exc
    return frozenset(out)


def _parse_active(value) -> bool:
    """Stored flags arrive as bools, 0/1 or strings such as ``"false"``."""
    if isinstance(value, str):
        return value.strip().lower() not in {"", "0", "false", "f", "no", "n", "tidak"}
    return bool(value)
