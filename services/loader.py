"""Bulk loading of data sources into a reading store."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Sequence, Tuple

from services.parser import ParseError, parse_line
from services.store import ReadingStore

logger = logging.getLogger(__name__)

LineSource = Tuple[str, Callable[[], Sequence[str]]]


@dataclass(frozen=True)
class SkippedLine:
    """A data line rejected by the parser."""

    source: str
    line_number: int
    line: str
    error: ParseError


@dataclass
class LoadReport:
    """Outcome of one bulk load."""

    sources: List[str] = field(default_factory=list)
    loaded: int = 0
    skipped_lines: List[SkippedLine] = field(default_factory=list)
    failed_sources: List[Tuple[str, str]] = field(default_factory=list)


def load_sources(store: ReadingStore, sources: Iterable[LineSource]) -> LoadReport:
    """Replace the store contents with the readings parsed from ``sources``.

    Each source is a ``(name, read_lines)`` pair. The first line of a source is a
    header; blank lines are ignored. Bad lines and unreadable sources are recorded
    on the report and never stop the load.
    """
    store.clear()
    report = LoadReport()

    for name, read_lines in sources:
        report.sources.append(name)
        logger.info("Processing source", extra={"source": name})

        try:
            lines = list(read_lines())
        except (OSError, UnicodeDecodeError) as exc:
            report.failed_sources.append((name, str(exc)))
            logger.warning(
                "Failed to read source", extra={"source": name, "reason": str(exc)}
            )
            continue

        if len(lines) <= 1:
            logger.info("Source contains no data", extra={"source": name})
            continue

        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            result = parse_line(line)
            if isinstance(result, ParseError):
                report.skipped_lines.append(
                    SkippedLine(source=name, line_number=line_number, line=line, error=result)
                )
                logger.warning(
                    "Skipping invalid line",
                    extra={
                        "source": name,
                        "line_number": line_number,
                        "reason": str(result),
                    },
                )
                continue

            store.append(result)
            report.loaded += 1

    logger.info(
        "Load finished",
        extra={
            "loaded": report.loaded,
            "skipped": len(report.skipped_lines),
            "failed": len(report.failed_sources),
        },
    )
    return report
