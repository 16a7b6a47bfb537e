from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .common.datetime_utils import parse_iso_date
from .core.constants import DEFAULT_OVERDUE_TOP_N, DEFAULT_SERIES_MONTHS
from .core.enums import SettlementMode
from .core.exceptions import ValidationError

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    module: str
    label_locale: str = "id"
    settlement_mode: SettlementMode = SettlementMode.LABEL_MATCH
    daily_epoch: date = date(1970, 1, 1)
    monthly_series_months: int = DEFAULT_SERIES_MONTHS
    overdue_top_n: int = DEFAULT_OVERDUE_TOP_N
    export_dir: Path = Path("exports")
    debug: bool = False
    log_level: str = "INFO"


def load_settings(module: Optional[str] = None) -> Settings:
    """Read ``.env`` (without overriding the environment) and the settings module."""
    load_dotenv(override=False)
    module = module or get_settings_module()
    settings = importlib.import_module(module)

    try:
        mode = SettlementMode(getattr(settings, "SETTLEMENT_MODE", SettlementMode.LABEL_MATCH.value))
    except ValueError as exc:
        raise ValidationError(f"SETTLEMENT_MODE tidak valid: {settings.SETTLEMENT_MODE}") from exc

    try:
        epoch = parse_iso_date(str(getattr(settings, "DAILY_EPOCH", "1970-01-01")))
    except ValueError as exc:
        raise ValidationError(f"DAILY_EPOCH tidak valid: {settings.DAILY_EPOCH}") from exc

    return Settings(
        module=module,
        label_locale=str(getattr(settings, "LABEL_LOCALE", "id")),
        settlement_mode=mode,
        daily_epoch=epoch,
        monthly_series_months=int(getattr(settings, "MONTHLY_SERIES_MONTHS", DEFAULT_SERIES_MONTHS)),
        overdue_top_n=int(getattr(settings, "OVERDUE_TOP_N", DEFAULT_OVERDUE_TOP_N)),
        export_dir=Path(getattr(settings, "EXPORT_DIR", "exports")),
        debug=bool(getattr(settings, "DEBUG", False)),
        log_level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
