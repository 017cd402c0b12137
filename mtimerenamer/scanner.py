import logging
from pathlib import Path
from typing import List, Optional

from .fs import FileSystem, LocalFileSystem
from .models import FileRecord
from .utils import split_extension

logger = logging.getLogger(__name__)

class FolderScanner:
    """Takes a one-time snapshot of the regular files directly inside a folder."""

    def __init__(self, root: Path, fs: Optional[FileSystem] = None):
        self.root = root
        self.fs = fs or LocalFileSystem()

    def scan(self) -> List[FileRecord]:
        files: List[FileRecord] = []
        for p in self.fs.list_files(self.root):
            files.append(FileRecord(path=p, name=p.name, ext=split_extension(p.name)))
        logger.debug("Snapshot of %s: %d file(s)", self.root, len(files))
        return files
