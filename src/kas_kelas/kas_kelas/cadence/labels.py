from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)


class PeriodLabelFormatter(ABC):
    """Strategy Pattern: how a billing period is named.

    Stored payments reference periods by these strings, so a formatter must
    keep producing exactly the same text for the same period.
    """

    month_names: tuple[str, ...] = ()
    short_month_names: tuple[str, ...] = ()

    def month_label(self, year: int, month: int) -> str:
        return f"{self.month_names[month - 1]} {year}"

    def short_month(self, month: int) -> str:
        return self.short_month_names[month - 1]

    def day_label(self, value: date) -> str:
        return value.strftime("%Y-%m-%d")

    def parse(self, text: str) -> Optional[date]:
        """Return the first date of the period named by ``text``, if readable."""
        text = (text or "").strip()
        if not text:
            return None
        try:
            return parse_iso_date(text)
        except ValueError:
            pass

        parts = text.rsplit(" ", 1)
        if len(parts) != 2 or not parts[1].isdigit():
            return None
        lookup = {name.lower(): i + 1 for i, name in enumerate(self.month_names)}
        month = lookup.get(parts[0].lower())
        if not month:
            logger.debug("Unrecognised month name in label %r", text)
            return None
        return date(int(parts[1]), month, 1)

    @property
    @abstractmethod
    def locale(self) -> str:
        raise NotImplementedError


class IndonesianLabelFormatter(PeriodLabelFormatter):
    """Default: ``"Januari 2026"``, matching the labels already stored."""

    month_names = (
        "Januari",
        "Februari",
        "Maret",
        "April",
        "Mei",
        "Juni",
        "Juli",
        "Agustus",
        "September",
        "Oktober",
        "November",
        "Desember",
    )
    short_month_names = ("Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des")

    @property
    def locale(self) -> str:
        return "id"


class EnglishLabelFormatter(PeriodLabelFormatter):
    month_names = (
        "January",
        "February",
        "March",
        "April",
        "May",
        "June",
        "July",
        "August",
        "September",
        "October",
        "November",
        "December",
    )
    short_month_names = tuple(name[:3] for name in month_names)

    @property
    def locale(self) -> str:
        return "en"


_FORMATTERS = {
    "id": IndonesianLabelFormatter,
    "en": EnglishLabelFormatter,
}

DEFAULT_FORMATTER = IndonesianLabelFormatter()


def formatter_for_locale(locale: str) -> PeriodLabelFormatter:
    try:
        return _FORMATTERS[(locale or "id").lower()]()
    except KeyError:
        raise ValueError(f"Unsupported label locale: {locale}") from None
