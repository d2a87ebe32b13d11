"""Threshold rules that turn window statistics into maintenance advisories."""

from __future__ import annotations

from typing import List

from services.statistics import WindowStatistics

VIBRATION_THRESHOLD = 4.5
TEMPERATURE_THRESHOLD = 85.0

BEARING_ADVISORY = "Pump bearings require inspection"
COOLING_ADVISORY = "Cooling system is operating inefficiently"
ALL_NORMAL_ADVISORY = "All systems operating normally"


def critical_events_advisory(count: int) -> str:
    return f"Critical events detected: {count}"


class Advisor:
    """Evaluates the fixed rule set in order."""

    def advise(self, stats: WindowStatistics) -> List[str]:
        advisories: List[str] = []

        if stats.avg_vibration > VIBRATION_THRESHOLD:
            advisories.append(BEARING_ADVISORY)

        if stats.max_temperature > TEMPERATURE_THRESHOLD:
            advisories.append(COOLING_ADVISORY)

        if stats.critical_events_count == 0:
            advisories.append(ALL_NORMAL_ADVISORY)
        else:
            advisories.append(critical_events_advisory(stats.critical_events_count))

        return advisories
