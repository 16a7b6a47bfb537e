from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from ..common.money import ZERO
from ..ledger.aggregator import readable_records
from .model import SavingsProgress, SavingsScheme

HUNDRED = Decimal("100")


def savings_progress(scheme: SavingsScheme, payments: Iterable) -> SavingsProgress:
    """Sum of the scheme's payments against its target (iuran has none)."""
    collected = sum(
        (amount for p, _, amount in readable_records(payments, "savings payment") if p.scope_id == scheme.scope_id),
        ZERO,
    )

    if not scheme.target_amount:
        return SavingsProgress(
            scope_id=scheme.scope_id,
            name=scheme.name,
            collected=collected,
            target=None,
            remaining=None,
            percentage=None,
        )

    percentage = min(collected * HUNDRED / scheme.target_amount, HUNDRED)
    return SavingsProgress(
        scope_id=scheme.scope_id,
        name=scheme.name,
        collected=collected,
        target=scheme.target_amount,
        remaining=max(scheme.target_amount - collected, ZERO),
        percentage=percentage.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP),
    )
