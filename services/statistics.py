"""Trailing-window statistics for pump readings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Iterable

from models.records import EquipmentStatus, Reading

WINDOW = timedelta(hours=24)


@dataclass(frozen=True)
class WindowStatistics:
    """Aggregates over the readings inside the trailing window."""

    max_pressure: float = 0.0
    max_temperature: float = 0.0
    avg_temperature: float = 0.0
    avg_vibration: float = 0.0
    critical_events_count: int = 0
    reading_count: int = 0


class StatisticsEngine:
    """Pure aggregation component that can be unit tested in isolation."""

    def compute(self, readings: Iterable[Reading], now: datetime) -> WindowStatistics:
        """Summarise readings with ``timestamp > now - WINDOW``.

        ``now`` is sampled once by the caller; a naive value is local time.
        An empty window yields all-zero statistics.
        """
        window_start = now.astimezone(timezone.utc) - WINDOW

        window = [reading for reading in readings if reading.timestamp > window_start]
        if not window:
            return WindowStatistics()

        count = len(window)
        # fsum is exact, so the means do not depend on input order.
        temperature_total = math.fsum(reading.temperature for reading in window)
        vibration_total = math.fsum(reading.vibration for reading in window)

        return WindowStatistics(
            max_pressure=max(reading.pressure for reading in window),
            max_temperature=max(reading.temperature for reading in window),
            avg_temperature=temperature_total / count,
            avg_vibration=vibration_total / count,
            critical_events_count=sum(
                1 for reading in window if reading.status is EquipmentStatus.critical
            ),
            reading_count=count,
        )
