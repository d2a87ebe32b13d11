from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import typer

from cli.render import render_analysis, render_load, render_no_data
from logging_config import configure_logging
from models.convert import analysis_report_model, load_summary_model, no_data_report_model
from services.monitor import PumpMonitor, build_default_monitor
from services.parser import parse_timestamp
from services.store import NoDataError
from settings import parse_log_level


@dataclass
class CLIState:
    monitor: PumpMonitor


app = typer.Typer(
    help="Pump sensor analysis: 24-hour statistics and maintenance recommendations.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def _parse_now(value: Optional[str]) -> datetime:
    if value is None:
        return datetime.now(timezone.utc)
    try:
        return parse_timestamp(value)
    except ValueError as exc:
        raise typer.BadParameter(f"Invalid reference time {value!r}.", param_hint="--now") from exc


@app.callback()
def main(
    ctx: typer.Context,
    data_dir: Optional[str] = typer.Option(
        None,
        "--data-dir",
        "-d",
        help="Directory holding data files (defaults to PUMP_DATA_DIR env or ./PumpData).",
    ),
    pattern: Optional[str] = typer.Option(
        None,
        "--pattern",
        "-p",
        help="File name glob relative to the data directory (defaults to PUMP_DATA_PATTERN env or pump_*.csv).",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for diagnostics written to stderr.",
    ),
) -> None:
    """Entry point for the CLI."""
    level: Optional[str] = None
    if log_level is not None:
        try:
            level = parse_log_level(log_level)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(level)

    try:
        monitor = build_default_monitor(
            data_dir=_blank_to_none(data_dir), pattern=_blank_to_none(pattern)
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--pattern") from exc
    ctx.obj = CLIState(monitor=monitor)


@app.command("analyze")
def analyze_command(
    ctx: typer.Context,
    now: Optional[str] = typer.Option(
        None,
        "--now",
        help="Reference time for the 24-hour window (ISO 8601, defaults to the current time).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON."),
) -> None:
    """Load data files and print statistics with maintenance recommendations."""
    state = _get_state(ctx)
    reference_time = _parse_now(now)

    load_report = state.monitor.load()
    try:
        analysis = state.monitor.analyze(reference_time)
    except NoDataError:
        if as_json:
            typer.echo(no_data_report_model(reference_time, load_report).model_dump_json(indent=2))
        else:
            render_no_data()
        return

    if as_json:
        typer.echo(analysis_report_model(analysis, load_report).model_dump_json(indent=2))
        return

    render_analysis(analysis)


@app.command("validate")
def validate_command(
    ctx: typer.Context,
    as_json: bool = typer.Option(False, "--json", help="Print the summary as JSON."),
) -> None:
    """Load data files and report which lines were skipped."""
    state = _get_state(ctx)
    load_report = state.monitor.load()

    if as_json:
        typer.echo(load_summary_model(load_report).model_dump_json(indent=2))
        return

    render_load(load_report)
