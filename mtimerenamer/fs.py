"""Filesystem primitives the renamer depends on.

Kept behind a small interface so the executor can run against an
in-memory implementation in tests.
"""
import os
from pathlib import Path
from typing import List, Protocol


class FileSystem(Protocol):
    def list_files(self, directory: Path) -> List[Path]: ...

    def mtime(self, path: Path) -> int: ...

    def exists(self, path: Path) -> bool: ...

    def rename(self, src: Path, dst: Path) -> None: ...


class LocalFileSystem:
    """The real disk."""

    def list_files(self, directory: Path) -> List[Path]:
        # One level only, regular files only; symlinks are skipped like find -type f.
        return sorted(p for p in directory.iterdir() if p.is_file() and not p.is_symlink())

    def mtime(self, path: Path) -> int:
        # Floor, so -0.5s stays before the epoch.
        return path.stat().st_mtime_ns // 1_000_000_000

    def exists(self, path: Path) -> bool:
        # lexists: a dangling symlink still holds the name
        return os.path.lexists(path)

    def rename(self, src: Path, dst: Path) -> None:
        # Path.rename silently replaces dst on POSIX
        if self.exists(dst):
            raise FileExistsError(f"Destination already exists: {dst}")
        src.rename(dst)
