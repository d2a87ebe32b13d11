from __future__ import annotations

import time
from typing import Callable, Iterator

import pytest


def _apply_timezone(monkeypatch: pytest.MonkeyPatch, name: str) -> None:
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", name)
    time.tzset()


@pytest.fixture(autouse=True)
def utc_local_time(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test with UTC as the host's local time zone."""
    if hasattr(time, "tzset"):
        _apply_timezone(monkeypatch, "UTC0")
    yield
    monkeypatch.undo()
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture()
def local_timezone(monkeypatch: pytest.MonkeyPatch) -> Callable[[str], None]:
    """Switch the host's local time zone to a POSIX TZ string such as ``JST-9``."""

    def apply(name: str) -> None:
        _apply_timezone(monkeypatch, name)

    return apply
