from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, order=True)
class PeriodLabel:
    """One billing period: its first date and its canonical label text.

    Ordered by ``start`` so sequences sort chronologically.
    """

    start: date
    text: str

    def __str__(self) -> str:
        return self.text
