from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..cadence.model import CadenceConfig
from ..common.datetime_utils import coerce_date
from ..common.money import to_money
from ..common.validators import require_non_empty, require_positive
from ..core.enums import SavingsKind
from ..core.exceptions import MalformedRecord, ValidationError


@dataclass(frozen=True)
class SavingsScheme:
    """Tabungan (target-based saving) or iuran (plain recurring contribution).

    Progress towards the target is derived from payments, never stored.
    """

    scope_id: str
    class_id: str
    name: str
    kind: SavingsKind
    cadence: CadenceConfig
    target_amount: Optional[Decimal] = None
    target_date: Optional[date] = None

    @classmethod
    def from_row(cls, row: dict) -> "SavingsScheme":
        """Build from a ``class_savings`` row; cadence fields share its shape."""
        try:
            kind = SavingsKind(str(row.get("jenis") or "").lower())
        except ValueError as exc:
            raise ValidationError(f"Jenis tabungan tidak dikenal: {row.get('jenis')!r}") from exc

        try:
            target = to_money(row["target_amount"]) if row.get("target_amount") is not None else None
            target_date = coerce_date(row["target_date"]) if row.get("target_date") else None
        except MalformedRecord as exc:
            raise ValidationError(str(exc)) from exc

        return cls(
            scope_id=str(row.get("id")),
            class_id=str(row.get("class_id")),
            name=row.get("nama") or "",
            kind=kind,
            cadence=CadenceConfig.from_row(row),
            target_amount=target,
            target_date=target_date,
        ).validate()

    def validate(self) -> "SavingsScheme":
        require_non_empty(self.name, "Nama")
        if self.kind == SavingsKind.TABUNGAN:
            require_positive(self.target_amount, "Target nominal")
        return self


@dataclass(frozen=True)
class SavingsProgress:
    scope_id: str
    name: str
    collected: Decimal
    target: Optional[Decimal]
    remaining: Optional[Decimal]
    percentage: Optional[Decimal]
