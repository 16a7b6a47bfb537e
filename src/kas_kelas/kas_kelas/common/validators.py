from __future__ import annotations

from decimal import Decimal

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} harus diisi")
    return value.strip()


def require_positive(value: Decimal, field_name: str) -> Decimal:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} harus lebih dari 0")
    return value
