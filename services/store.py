"""In-memory storage for readings loaded during one run."""

from __future__ import annotations

from typing import Iterable, Iterator, List

from models.records import Reading


class NoDataError(LookupError):
    """Raised when an operation needs at least one reading but none are loaded."""


class ReadingStore:
    """Readings in the order their lines were encountered.

    Nothing is deduplicated or sorted; callers clear the store before each bulk load.
    """

    def __init__(self) -> None:
        self._readings: List[Reading] = []

    def clear(self) -> None:
        self._readings.clear()

    def append(self, reading: Reading) -> None:
        self._readings.append(reading)

    def extend(self, readings: Iterable[Reading]) -> None:
        self._readings.extend(readings)

    def is_empty(self) -> bool:
        return not self._readings

    def count(self) -> int:
        return len(self._readings)

    def latest(self) -> Reading:
        """Return the reading with the greatest timestamp.

        When several readings share that timestamp the last inserted one wins.
        """
        if not self._readings:
            raise NoDataError("No readings loaded.")

        latest = self._readings[0]
        for reading in self._readings[1:]:
            if reading.timestamp >= latest.timestamp:
                latest = reading
        return latest

    def __iter__(self) -> Iterator[Reading]:
        return iter(tuple(self._readings))

    def __len__(self) -> int:
        return len(self._readings)
