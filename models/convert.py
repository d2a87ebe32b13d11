"""Conversions from service results to report schemas."""

from __future__ import annotations

from datetime import datetime

from models.records import Reading
from models.reports import (
    AnalysisReportModel,
    FailedSourceModel,
    LoadSummaryModel,
    ReadingModel,
    SkippedLineModel,
    StatisticsModel,
)
from services.loader import LoadReport
from services.monitor import AnalysisReport
from services.statistics import WindowStatistics


def reading_model(reading: Reading) -> ReadingModel:
    return ReadingModel(
        timestamp=reading.timestamp,
        pressure=reading.pressure,
        temperature=reading.temperature,
        vibration=reading.vibration,
        status=reading.status,
    )


def statistics_model(stats: WindowStatistics) -> StatisticsModel:
    return StatisticsModel(
        max_pressure=stats.max_pressure,
        max_temperature=stats.max_temperature,
        avg_temperature=stats.avg_temperature,
        avg_vibration=stats.avg_vibration,
        critical_events_count=stats.critical_events_count,
        reading_count=stats.reading_count,
    )


def load_summary_model(report: LoadReport) -> LoadSummaryModel:
    return LoadSummaryModel(
        sources=list(report.sources),
        loaded=report.loaded,
        skipped_lines=[
            SkippedLineModel(
                source=skipped.source,
                line_number=skipped.line_number,
                kind=skipped.error.kind.value,
                reason=skipped.error.message,
            )
            for skipped in report.skipped_lines
        ],
        failed_sources=[
            FailedSourceModel(source=source, reason=reason)
            for source, reason in report.failed_sources
        ],
    )


def analysis_report_model(analysis: AnalysisReport, load: LoadReport) -> AnalysisReportModel:
    return AnalysisReportModel(
        now=analysis.now,
        latest=reading_model(analysis.latest),
        statistics=statistics_model(analysis.statistics),
        advisories=list(analysis.advisories),
        load=load_summary_model(load),
    )


def no_data_report_model(now: datetime, load: LoadReport) -> AnalysisReportModel:
    return AnalysisReportModel(now=now, load=load_summary_model(load))
