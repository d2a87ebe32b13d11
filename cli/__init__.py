"""Command-line front end for pump data analysis."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)


# ``pump-monitor`` points at ``cli.app:app``; the package itself exports nothing.
__all__ = []
