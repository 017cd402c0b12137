import logging
from pathlib import Path
from typing import Callable, Iterable, Optional

from .fs import FileSystem, LocalFileSystem
from .models import FileRecord, RenameResult, RenameStatus, RunReport
from .stamp import format_stamp
from .utils import unique_destination

logger = logging.getLogger(__name__)

class SafeRenamer:
    """Renames each file to its modification stamp without ever overwriting."""

    def __init__(self, fs: Optional[FileSystem] = None, dry_run: bool = True):
        self.fs = fs or LocalFileSystem()
        self.dry_run = dry_run

    def _is_occupied(self, candidate: Path, src: Path, report: RunReport) -> bool:
        # A file's own name is never a collision with itself.
        if candidate == src:
            return False
        if candidate in report.claimed:
            return True
        # Dry run: a source planned to move away no longer holds its name.
        if candidate in report.released:
            return False
        return self.fs.exists(candidate)

    def rename_one(self, rec: FileRecord, report: RunReport) -> RenameResult:
        try:
            epoch = self.fs.mtime(rec.path)
            if epoch < 0:
                raise ValueError(f"modification time predates the epoch: {epoch}")
        except (OSError, ValueError) as e:
            logger.debug("Could not read mtime of %s: %s", rec.path, e)
            return report.record(RenameResult(rec.path, None, RenameStatus.MTIME_ERROR, str(e)))

        try:
            stamp = format_stamp(epoch)
        except (OverflowError, OSError, ValueError) as e:
            logger.debug("Could not format mtime %s of %s: %s", epoch, rec.path, e)
            return report.record(RenameResult(rec.path, None, RenameStatus.FORMAT_ERROR, str(e)))

        dest = unique_destination(
            rec.path.parent, stamp, rec.ext,
            lambda candidate: self._is_occupied(candidate, rec.path, report),
        )
        logger.debug("%s -> %s", rec.path, dest)

        if dest == rec.path:
            return report.record(RenameResult(rec.path, dest, RenameStatus.UNCHANGED, "already named"))

        if self.dry_run:
            report.claimed.add(dest)
            report.released.add(rec.path)
            return report.record(RenameResult(rec.path, dest, RenameStatus.PLANNED))

        try:
            self.fs.rename(rec.path, dest)
        except OSError as e:
            logger.debug("Rename %s -> %s failed: %s", rec.path, dest, e)
            return report.record(RenameResult(rec.path, dest, RenameStatus.RENAME_ERROR, str(e)))

        report.claimed.add(dest)
        return report.record(RenameResult(rec.path, dest, RenameStatus.RENAMED))

    def rename_many(
        self,
        records: Iterable[FileRecord],
        report: Optional[RunReport] = None,
        on_result: Optional[Callable[[RenameResult], None]] = None,
    ) -> RunReport:
        if report is None:
            report = RunReport(dry_run=self.dry_run)
        for rec in list(records):
            result = self.rename_one(rec, report)
            if on_result is not None:
                on_result(result)
        return report
