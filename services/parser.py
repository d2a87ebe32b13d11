"""Parsing and validation of semicolon-delimited pump data lines."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Union

from models.records import STATUS_BY_NAME, Reading

FIELD_DELIMITER = ";"
FIELD_COUNT = 5

# ASCII digits with an optional "." fraction; no exponents, separators or NaN.
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")

# Tried in order after ISO 8601; none depend on the host locale.
_TIMESTAMP_FORMATS = (
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
)


class ParseErrorKind(str, Enum):
    malformed_record = "MalformedRecord"
    invalid_timestamp = "InvalidTimestamp"
    invalid_numeric = "InvalidNumeric"
    invalid_status = "InvalidStatus"


@dataclass(frozen=True)
class ParseError:
    """Reason a data line was rejected."""

    kind: ParseErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


ParseResult = Union[Reading, ParseError]


def parse_line(line: str) -> ParseResult:
    """Convert one data line into a ``Reading`` or the ``ParseError`` explaining why not."""
    fields = [field.strip() for field in line.split(FIELD_DELIMITER)]
    if len(fields) != FIELD_COUNT:
        return ParseError(
            ParseErrorKind.malformed_record,
            f"expected {FIELD_COUNT} fields, found {len(fields)}",
        )

    timestamp_raw, pressure_raw, temperature_raw, vibration_raw, status_raw = fields

    try:
        timestamp = parse_timestamp(timestamp_raw)
    except ValueError:
        return ParseError(
            ParseErrorKind.invalid_timestamp, f"invalid timestamp {timestamp_raw!r}"
        )

    numbers: list[float] = []
    for name, raw in (
        ("pressure", pressure_raw),
        ("temperature", temperature_raw),
        ("vibration", vibration_raw),
    ):
        try:
            numbers.append(_parse_real(raw))
        except ValueError:
            return ParseError(
                ParseErrorKind.invalid_numeric, f"invalid {name} value {raw!r}"
            )

    status = STATUS_BY_NAME.get(status_raw)
    if status is None:
        return ParseError(ParseErrorKind.invalid_status, f"unknown status {status_raw!r}")

    pressure, temperature, vibration = numbers
    return Reading(
        timestamp=timestamp,
        pressure=pressure,
        temperature=temperature,
        vibration=vibration,
        status=status,
    )


def parse_timestamp(value: str) -> datetime:
    """Parse a timestamp and normalise it to an aware UTC datetime.

    Values without an offset are wall-clock times in the host's local time zone.
    """
    candidate = value.strip()
    if not candidate:
        raise ValueError("Timestamp is empty.")

    if candidate.endswith("Z"):
        candidate = candidate[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError:
        parsed = _parse_fixed_formats(candidate)

    try:
        # A naive datetime converts from local time.
        return parsed.astimezone(timezone.utc)
    except (OverflowError, OSError) as exc:
        raise ValueError(f"Timestamp out of range: {value!r}") from exc


def _parse_fixed_formats(candidate: str) -> datetime:
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(candidate, fmt)
        except ValueError:
            continue
    raise ValueError(f"Invalid timestamp format: {candidate!r}")


def _parse_real(value: str) -> float:
    if not _DECIMAL.fullmatch(value):
        raise ValueError(f"Not a decimal number: {value!r}")
    parsed = float(value)
    if not math.isfinite(parsed):
        raise ValueError(f"Numeric value is not finite: {value!r}")
    return parsed
