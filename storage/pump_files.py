from __future__ import annotations

from functools import lru_cache, partial
from pathlib import Path
from typing import Iterator, List, Optional

from services.loader import LineSource
from settings import get_settings


class PumpDataDirectory:
    """Directory of pump data files selected by a glob pattern."""

    def __init__(self, root_path: Path, pattern: str, encoding: str = "utf-8") -> None:
        if not pattern.strip():
            raise ValueError("File pattern must not be empty.")
        if Path(pattern).is_absolute():
            raise ValueError(f"File pattern must be relative to the data directory: {pattern!r}")
        self.root_path = root_path
        self.pattern = pattern
        self.encoding = encoding

    def exists(self) -> bool:
        return self.root_path.is_dir()

    def ensure_exists(self) -> bool:
        """Create the directory if needed; return ``True`` when it was created."""
        if self.exists():
            return False
        self.root_path.mkdir(parents=True, exist_ok=True)
        return True

    def list_files(self) -> List[Path]:
        if not self.exists():
            return []
        return sorted(path for path in self.root_path.glob(self.pattern) if path.is_file())

    def read_lines(self, path: Path) -> List[str]:
        with path.open("r", encoding=self.encoding, newline=None) as handle:
            return handle.read().splitlines()

    def iter_sources(self) -> Iterator[LineSource]:
        for path in self.list_files():
            yield str(path), partial(self.read_lines, path)


@lru_cache
def build_default_directory(
    root_path: Optional[str] = None,
    pattern: Optional[str] = None,
) -> PumpDataDirectory:
    settings = get_settings()
    data_root = settings.data_dir if root_path is None else root_path
    data_pattern = settings.data_pattern if pattern is None else pattern
    return PumpDataDirectory(root_path=Path(data_root), pattern=data_pattern)
