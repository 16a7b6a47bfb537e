from __future__ import annotations

from dataclasses import dataclass

from .cadence.labels import PeriodLabelFormatter, formatter_for_locale
from .dues.factory import SettlementStrategyFactory
from .dues.repository import DuesRepository
from .dues.service import DuesService
from .ledger.repository import LedgerRepository
from .ledger.service import LedgerService
from .report.service import ReportService
from .settings import Settings


@dataclass(frozen=True)
class Container:
    settings: Settings

    dues_repo: DuesRepository
    ledger_repo: LedgerRepository

    formatter: PeriodLabelFormatter
    strategy_factory: SettlementStrategyFactory

    dues_service: DuesService
    ledger_service: LedgerService
    report_service: ReportService


def build_container(*, settings: Settings, dues_repo: DuesRepository, ledger_repo: LedgerRepository) -> Container:
    formatter = formatter_for_locale(settings.label_locale)
    strategy_factory = SettlementStrategyFactory(mode=settings.settlement_mode, formatter=formatter)

    dues_service = DuesService(
        dues_repo,
        strategy_factory=strategy_factory,
        formatter=formatter,
        epoch=settings.daily_epoch,
    )
    ledger_service = LedgerService(
        ledger_repo,
        formatter=formatter,
        series_months=settings.monthly_series_months,
    )
    report_service = ReportService(ledger_service)

    return Container(
        settings=settings,
        dues_repo=dues_repo,
        ledger_repo=ledger_repo,
        formatter=formatter,
        strategy_factory=strategy_factory,
        dues_service=dues_service,
        ledger_service=ledger_service,
        report_service=report_service,
    )
