from __future__ import annotations

import pytest

from services.advisor import (
    ALL_NORMAL_ADVISORY,
    BEARING_ADVISORY,
    COOLING_ADVISORY,
    Advisor,
    critical_events_advisory,
)
from services.statistics import WindowStatistics


def test_all_zero_statistics_are_normal() -> None:
    assert Advisor().advise(WindowStatistics()) == [ALL_NORMAL_ADVISORY]


def test_all_rules_fire_in_order() -> None:
    stats = WindowStatistics(
        max_pressure=5.0,
        max_temperature=90.0,
        avg_temperature=90.0,
        avg_vibration=5.0,
        critical_events_count=1,
        reading_count=1,
    )

    assert Advisor().advise(stats) == [
        BEARING_ADVISORY,
        COOLING_ADVISORY,
        critical_events_advisory(1),
    ]


def test_thresholds_are_exclusive() -> None:
    stats = WindowStatistics(max_temperature=85.0, avg_vibration=4.5)

    assert Advisor().advise(stats) == [ALL_NORMAL_ADVISORY]


def test_critical_advisory_names_count() -> None:
    advisories = Advisor().advise(WindowStatistics(critical_events_count=3))

    assert advisories == [critical_events_advisory(3)]
    assert "3" in advisories[0]


@pytest.mark.parametrize("critical", [0, 1, 7])
@pytest.mark.parametrize("temperature", [20.0, 95.0])
@pytest.mark.parametrize("vibration", [1.0, 6.0])
def test_exactly_one_status_advisory(critical: int, temperature: float, vibration: float) -> None:
    stats = WindowStatistics(
        max_temperature=temperature,
        avg_vibration=vibration,
        critical_events_count=critical,
    )

    advisories = Advisor().advise(stats)

    status_advisories = [
        advisory
        for advisory in advisories
        if advisory == ALL_NORMAL_ADVISORY or advisory == critical_events_advisory(critical)
    ]
    assert len(status_advisories) == 1
    assert advisories[-1] == status_advisories[0]
    assert len(advisories) == len(set(advisories))
