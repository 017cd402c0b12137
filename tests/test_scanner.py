import os
from pathlib import Path

import pytest

from mtimerenamer.fs import LocalFileSystem
from mtimerenamer.scanner import FolderScanner


def test_snapshot_is_one_level_and_files_only(tmp_path: Path):
    (tmp_path / "b.txt").write_text("b")
    (tmp_path / "a.jpg").write_text("a")
    (tmp_path / ".bashrc").write_text("x")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "deep.txt").write_text("deep")

    records = FolderScanner(tmp_path).scan()
    assert [r.name for r in records] == [".bashrc", "a.jpg", "b.txt"]
    assert [r.ext for r in records] == ["", "jpg", "txt"]
    assert all(r.path.parent == tmp_path for r in records)


def test_mtime_is_whole_seconds(tmp_path: Path):
    f = tmp_path / "f"
    f.write_text("x")
    os.utime(f, (1_000_000_000.75, 1_000_000_000.75))
    assert LocalFileSystem().mtime(f) == 1_000_000_000


def test_exists_sees_directories(tmp_path: Path):
    (tmp_path / "d").mkdir()
    fs = LocalFileSystem()
    assert fs.exists(tmp_path / "d")
    assert not fs.exists(tmp_path / "missing")


def test_rename_refuses_to_overwrite(tmp_path: Path):
    src = tmp_path / "src"
    dst = tmp_path / "dst"
    src.write_text("new")
    dst.write_text("old")
    with pytest.raises(FileExistsError):
        LocalFileSystem().rename(src, dst)
    assert dst.read_text() == "old"
    assert src.exists()


def test_symlinks_are_not_listed(tmp_path: Path):
    outside = tmp_path / "outside"
    outside.mkdir()
    target = outside / "real.txt"
    target.write_text("x")
    work = tmp_path / "work"
    work.mkdir()
    (work / "plain.txt").write_text("y")
    try:
        (work / "link.txt").symlink_to(target)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks are not supported here")

    assert [r.name for r in FolderScanner(work).scan()] == ["plain.txt"]


def test_mtime_floors_before_the_epoch(tmp_path: Path):
    f = tmp_path / "f"
    f.write_text("x")
    try:
        os.utime(f, ns=(-500_000_000, -500_000_000))
    except (OSError, OverflowError, ValueError):
        pytest.skip("filesystem rejects pre-epoch timestamps")
    if f.stat().st_mtime_ns != -500_000_000:
        pytest.skip("filesystem does not keep sub-second pre-epoch timestamps")
    assert LocalFileSystem().mtime(f) == -1
