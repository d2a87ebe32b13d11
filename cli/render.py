from __future__ import annotations

from typing import Any, Iterable

import typer

from services.advisor import ALL_NORMAL_ADVISORY
from services.loader import LoadReport
from services.monitor import AnalysisReport


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_no_data() -> None:
    typer.secho("No data to analyze. Load data first.", fg=typer.colors.YELLOW)


def render_load(report: LoadReport) -> None:
    echo_heading("Load Summary")
    echo_key_values(
        [
            ("sources", len(report.sources)),
            ("loaded", report.loaded),
            ("skipped", len(report.skipped_lines)),
            ("failed_sources", len(report.failed_sources)),
        ]
    )

    if report.skipped_lines:
        typer.echo()
        echo_heading("Skipped Lines")
        for skipped in report.skipped_lines:
            typer.echo(f"  - {skipped.source}:{skipped.line_number}: {skipped.error}")

    if report.failed_sources:
        typer.echo()
        echo_heading("Failed Sources")
        for source, reason in report.failed_sources:
            typer.echo(f"  - {source}: {reason}")


def render_analysis(analysis: AnalysisReport) -> None:
    latest = analysis.latest
    echo_heading("Latest Reading")
    echo_key_values(
        [
            ("timestamp", latest.timestamp.isoformat()),
            ("temperature", f"{latest.temperature} °C"),
            ("vibration", f"{latest.vibration} dB"),
        ]
    )

    stats = analysis.statistics
    typer.echo()
    echo_heading("Statistics (last 24 hours)")
    echo_key_values(
        [
            ("readings", stats.reading_count),
            ("max_pressure", f"{stats.max_pressure} bar"),
            ("max_temperature", f"{stats.max_temperature} °C"),
            ("avg_temperature", f"{stats.avg_temperature:.1f} °C"),
            ("avg_vibration", f"{stats.avg_vibration:.2f} dB"),
            ("critical_events", stats.critical_events_count),
        ]
    )

    typer.echo()
    echo_heading("Recommendations")
    for advisory in analysis.advisories:
        colour = typer.colors.GREEN if advisory == ALL_NORMAL_ADVISORY else typer.colors.YELLOW
        typer.secho(f"  - {advisory}", fg=colour)
