"""Unit tests for the window statistics engine."""

from __future__ import annotations

import itertools
from datetime import datetime, timedelta, timezone

from models.records import EquipmentStatus, Reading
from services.statistics import WINDOW, StatisticsEngine, WindowStatistics

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def _reading(
    timestamp: datetime,
    pressure: float = 1.0,
    temperature: float = 20.0,
    vibration: float = 1.0,
    status: EquipmentStatus = EquipmentStatus.normal,
) -> Reading:
    return Reading(
        timestamp=timestamp,
        pressure=pressure,
        temperature=temperature,
        vibration=vibration,
        status=status,
    )


def test_compute_empty_input_returns_zeros() -> None:
    stats = StatisticsEngine().compute([], NOW)

    assert stats == WindowStatistics()
    assert stats.max_pressure == 0
    assert stats.max_temperature == 0
    assert stats.avg_temperature == 0
    assert stats.avg_vibration == 0
    assert stats.critical_events_count == 0


def test_compute_only_old_readings_returns_zeros() -> None:
    readings = [_reading(NOW - timedelta(days=2), pressure=9.0, temperature=99.0)]

    assert StatisticsEngine().compute(readings, NOW) == WindowStatistics()


def test_compute_single_critical_reading() -> None:
    readings = [
        _reading(
            NOW - timedelta(hours=1),
            pressure=5.0,
            temperature=90.0,
            vibration=5.0,
            status=EquipmentStatus.critical,
        )
    ]

    stats = StatisticsEngine().compute(readings, NOW)

    assert stats.max_pressure == 5.0
    assert stats.max_temperature == 90.0
    assert stats.avg_temperature == 90.0
    assert stats.avg_vibration == 5.0
    assert stats.critical_events_count == 1
    assert stats.reading_count == 1


def test_compute_aggregates_window_only() -> None:
    readings = [
        _reading(NOW - timedelta(hours=30), pressure=50.0, temperature=200.0),
        _reading(NOW - timedelta(hours=2), pressure=4.0, temperature=60.0, vibration=2.0),
        _reading(
            NOW - timedelta(hours=1),
            pressure=6.0,
            temperature=80.0,
            vibration=4.0,
            status=EquipmentStatus.critical,
        ),
        _reading(NOW, pressure=5.0, temperature=70.0, vibration=3.0, status=EquipmentStatus.warning),
    ]

    stats = StatisticsEngine().compute(readings, NOW)

    assert stats.reading_count == 3
    assert stats.max_pressure == 6.0
    assert stats.max_temperature == 80.0
    assert stats.avg_temperature == 70.0
    assert stats.avg_vibration == 3.0
    assert stats.critical_events_count == 1


def test_compute_window_boundary_is_strict() -> None:
    engine = StatisticsEngine()
    on_boundary = _reading(NOW - WINDOW, temperature=40.0)
    inside = _reading(NOW - WINDOW + timedelta(microseconds=1), temperature=30.0)

    assert engine.compute([on_boundary], NOW).reading_count == 0
    stats = engine.compute([on_boundary, inside], NOW)
    assert stats.reading_count == 1
    assert stats.max_temperature == 30.0


def test_compute_is_order_independent() -> None:
    readings = [
        _reading(NOW - timedelta(hours=3), pressure=1.1, temperature=0.1, vibration=0.7),
        _reading(NOW - timedelta(hours=2), pressure=2.2, temperature=0.2, vibration=1.3),
        _reading(
            NOW - timedelta(hours=1),
            pressure=3.3,
            temperature=0.3,
            vibration=4.9,
            status=EquipmentStatus.critical,
        ),
        _reading(NOW - timedelta(minutes=5), pressure=0.4, temperature=17.9, vibration=0.01),
    ]
    engine = StatisticsEngine()
    expected = engine.compute(readings, NOW)

    for permutation in itertools.permutations(readings):
        assert engine.compute(permutation, NOW) == expected


def test_compute_reads_naive_now_as_local_time(local_timezone) -> None:
    local_timezone("JST-9")
    readings = [
        _reading(NOW - timedelta(hours=23), temperature=50.0),
        _reading(NOW - timedelta(hours=25), temperature=90.0),
    ]
    # 21:00 in UTC+9 is NOW.
    naive_now = datetime(2024, 6, 1, 21, 0)

    stats = StatisticsEngine().compute(readings, naive_now)

    assert stats == StatisticsEngine().compute(readings, NOW)
    assert stats.reading_count == 1
    assert stats.max_temperature == 50.0
