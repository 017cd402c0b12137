from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set

class RenameStatus(Enum):
    RENAMED = "renamed"
    PLANNED = "planned"  # dry-run only
    UNCHANGED = "unchanged"  # already carries its canonical name
    MTIME_ERROR = "mtime_error"
    FORMAT_ERROR = "format_error"
    RENAME_ERROR = "rename_error"

    @property
    def is_error(self) -> bool:
        return self in (RenameStatus.MTIME_ERROR, RenameStatus.FORMAT_ERROR, RenameStatus.RENAME_ERROR)

@dataclass(frozen=True)
class FileRecord:
    path: Path
    name: str
    ext: str  # without the dot, "" when there is none

@dataclass(frozen=True)
class RenameResult:
    src: Path
    dst: Optional[Path]
    status: RenameStatus
    reason: str = ""

@dataclass
class RunReport:
    """Counters and claimed destinations for a single run."""
    dry_run: bool = True
    considered: int = 0
    renamed: int = 0
    planned: int = 0
    unchanged: int = 0
    errors: int = 0
    claimed: Set[Path] = field(default_factory=set)
    released: Set[Path] = field(default_factory=set)  # dry-run sources planned to move
    results: List[RenameResult] = field(default_factory=list)

    def record(self, result: RenameResult) -> RenameResult:
        self.considered += 1
        if result.status is RenameStatus.RENAMED:
            self.renamed += 1
        elif result.status is RenameStatus.PLANNED:
            self.planned += 1
        elif result.status is RenameStatus.UNCHANGED:
            self.unchanged += 1
        else:
            self.errors += 1
        self.results.append(result)
        return result
