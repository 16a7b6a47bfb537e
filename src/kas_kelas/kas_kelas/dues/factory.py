from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..cadence.labels import PeriodLabelFormatter
from ..cadence.model import CadenceConfig
from ..core.enums import SettlementMode
from .strategies.advance_coverage_strategy import AdvanceCoverageStrategy
from .strategies.base import SettlementStrategy
from .strategies.label_match_strategy import LabelMatchStrategy

logger = logging.getLogger(__name__)


@dataclass
class SettlementStrategyFactory:
    """Factory Pattern: choose the settlement strategy from configuration."""

    mode: SettlementMode = SettlementMode.LABEL_MATCH
    formatter: Optional[PeriodLabelFormatter] = None

    def for_cadence(self, cadence: CadenceConfig) -> SettlementStrategy:
        logger.debug("Using %s settlement for %s cadence", self.mode.value, cadence.kind.value)
        if self.mode == SettlementMode.ADVANCE_COVERAGE:
            return AdvanceCoverageStrategy(cadence, formatter=self.formatter)
        return LabelMatchStrategy()
