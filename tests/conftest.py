from pathlib import Path
from typing import Dict, List, Set

import pytest


class FakeFileSystem:
    """In-memory stand-in for LocalFileSystem."""

    def __init__(self):
        self.files: Dict[Path, int] = {}
        self.dirs: Set[Path] = set()
        self.unreadable: Set[Path] = set()
        self.rename_fails: Set[Path] = set()
        self.renames: List[tuple] = []

    def add(self, path: Path, mtime: int) -> Path:
        self.files[path] = mtime
        return path

    def list_files(self, directory: Path) -> List[Path]:
        return sorted(p for p in self.files if p.parent == directory)

    def mtime(self, path: Path) -> int:
        if path in self.unreadable:
            raise PermissionError(f"Permission denied: {path}")
        return self.files[path]

    def exists(self, path: Path) -> bool:
        return path in self.files or path in self.dirs

    def rename(self, src: Path, dst: Path) -> None:
        if src in self.rename_fails:
            raise PermissionError(f"Permission denied: {src}")
        if self.exists(dst):
            raise FileExistsError(f"Destination already exists: {dst}")
        self.files[dst] = self.files.pop(src)
        self.renames.append((src, dst))

    def names(self, directory: Path) -> List[str]:
        return sorted(p.name for p in self.files if p.parent == directory)


@pytest.fixture
def fake_fs():
    return FakeFileSystem()


@pytest.fixture
def utc(monkeypatch):
    """Pin local time to UTC so stamps can be asserted literally."""
    import time

    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()
