from __future__ import annotations

import logging
from typing import Optional

from .container import Container, build_container
from .dues.repository import DuesRepository
from .ledger.repository import LedgerRepository
from .settings import configure_logging, load_settings

logger = logging.getLogger(__name__)


def create_services(
    dues_repo: DuesRepository,
    ledger_repo: LedgerRepository,
    *,
    settings_module: Optional[str] = None,
) -> Container:
    """Entry point for the host application: settings, logging, services.

    The host supplies repositories backed by its own data store.
    """
    settings = load_settings(settings_module)
    configure_logging(settings.log_level)

    container = build_container(settings=settings, dues_repo=dues_repo, ledger_repo=ledger_repo)
    logger.info(
        "[kas-kelas] settings=%s locale=%s settlement=%s",
        settings.module,
        settings.label_locale,
        settings.settlement_mode.value,
    )
    return container
