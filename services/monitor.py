"""Orchestration of loading and analysis for pump data."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache
from typing import List, Optional

from models.records import Reading
from services.advisor import Advisor
from services.loader import LoadReport, load_sources
from services.statistics import StatisticsEngine, WindowStatistics
from services.store import NoDataError, ReadingStore
from storage.pump_files import PumpDataDirectory, build_default_directory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisReport:
    now: datetime
    latest: Reading
    statistics: WindowStatistics
    advisories: List[str]


class PumpMonitor:
    """Coordinates the data directory, the reading store and the analysis rules."""

    def __init__(
        self,
        directory: PumpDataDirectory,
        store: ReadingStore,
        statistics: StatisticsEngine,
        advisor: Advisor,
    ) -> None:
        self.directory = directory
        self.store = store
        self.statistics = statistics
        self.advisor = advisor

    def load(self) -> LoadReport:
        """Reload the store from every matching file in the data directory."""
        if self.directory.ensure_exists():
            logger.warning(
                "Data directory not found, created it",
                extra={"source": str(self.directory.root_path)},
            )
        elif not self.directory.list_files():
            logger.warning(
                "No data files found",
                extra={"source": str(self.directory.root_path)},
            )

        return load_sources(self.store, self.directory.iter_sources())

    def analyze(self, now: datetime) -> AnalysisReport:
        """Compute statistics and advisories against a single reference time."""
        if self.store.is_empty():
            raise NoDataError("No data to analyze. Load data first.")

        latest = self.store.latest()
        stats = self.statistics.compute(self.store, now)
        advisories = self.advisor.advise(stats)
        logger.info(
            "Analysis complete",
            extra={
                "reading_count": stats.reading_count,
                "critical_events": stats.critical_events_count,
            },
        )
        return AnalysisReport(
            now=now,
            latest=latest,
            statistics=stats,
            advisories=advisories,
        )


@lru_cache
def build_default_monitor(
    data_dir: Optional[str] = None,
    pattern: Optional[str] = None,
) -> PumpMonitor:
    """Factory that wires the monitor from settings."""
    directory = build_default_directory(root_path=data_dir, pattern=pattern)
    return PumpMonitor(
        directory=directory,
        store=ReadingStore(),
        statistics=StatisticsEngine(),
        advisor=Advisor(),
    )
