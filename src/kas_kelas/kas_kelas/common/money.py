"""Money helpers.

Amounts are kept as ``Decimal`` throughout; the backend hands them over as
ints, floats or numeric strings (sometimes with thousands separators).
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from ..core.exceptions import MalformedRecord

ZERO = Decimal("0")


def to_money(value) -> Decimal:
    """Convert a stored amount into a ``Decimal``.

    Raises ``MalformedRecord`` when the value cannot be read as a finite number.
    """
    if isinstance(value, bool) or value is None:
        raise MalformedRecord(f"Nominal tidak valid: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            if isinstance(value, str):
                value = value.strip().replace(",", "")
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as exc:
            raise MalformedRecord(f"Nominal tidak valid: {value!r}") from exc
    if not amount.is_finite():
        raise MalformedRecord(f"Nominal tidak valid: {value!r}")
    return amount


def format_rupiah(amount: Decimal) -> str:
    """Format like ``Intl.NumberFormat('id-ID')`` does: ``Rp 150.000``."""
    sign = "-" if amount < 0 else ""
    whole = f"{abs(amount).quantize(Decimal('1')):,}".replace(",", ".")
    return f"{sign}Rp {whole}"
