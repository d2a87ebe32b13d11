"""Pydantic schemas for machine-readable command output."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from models.records import EquipmentStatus


class ReadingModel(BaseModel):
    """A single validated reading."""

    timestamp: datetime
    pressure: float
    temperature: float
    vibration: float
    status: EquipmentStatus


class StatisticsModel(BaseModel):
    """Aggregates over the trailing 24-hour window."""

    max_pressure: float
    max_temperature: float
    avg_temperature: float
    avg_vibration: float
    critical_events_count: int = Field(..., ge=0)
    reading_count: int = Field(..., ge=0)


class SkippedLineModel(BaseModel):
    """Details about a line that failed validation or parsing."""

    source: str
    line_number: int = Field(..., ge=1)
    kind: str
    reason: str


class FailedSourceModel(BaseModel):
    source: str
    reason: str


class LoadSummaryModel(BaseModel):
    """Outcome of loading the data directory."""

    sources: List[str] = Field(default_factory=list)
    loaded: int = Field(..., ge=0)
    skipped_lines: List[SkippedLineModel] = Field(default_factory=list)
    failed_sources: List[FailedSourceModel] = Field(default_factory=list)


class AnalysisReportModel(BaseModel):
    """Full analysis of the loaded readings.

    ``latest`` and ``statistics`` are null when no readings were loaded.
    """

    now: datetime
    latest: Optional[ReadingModel] = None
    statistics: Optional[StatisticsModel] = None
    advisories: List[str] = Field(default_factory=list)
    load: LoadSummaryModel
