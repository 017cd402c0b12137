from pathlib import Path
from typing import Callable

from .defaults import INCREMENT_SEPARATOR
from .errors import InvalidPathError

def ensure_directory(path_str: str) -> Path:
    """Return a resolved Path object and ensure it is an existing directory."""
    p = Path(path_str).expanduser().resolve()
    if not p.is_dir():
        raise InvalidPathError(f"Directory does not exist or is not a directory: {path_str}")
    return p


def split_extension(name: str) -> str:
    """
    Return the text after the last '.' of a file name, or "".
    Leading dots do not count, so '.bashrc' has no extension
    while 'report.final.TXT' has 'TXT'.
    """
    body = name.lstrip(".")
    if "." not in body:
        return ""
    return body.rsplit(".", 1)[1]


def build_candidate(directory: Path, stamp: str, ext: str, increment: int = 0) -> Path:
    stem = stamp if increment == 0 else f"{stamp}{INCREMENT_SEPARATOR}{increment}"
    return directory / (f"{stem}.{ext}" if ext else stem)


def unique_destination(
    directory: Path,
    stamp: str,
    ext: str,
    is_occupied: Callable[[Path], bool],
) -> Path:
    """
    Return directory/stamp.ext, or the first of stamp_1.ext, stamp_2.ext, ...
    for which is_occupied() is false.
    """
    candidate = build_candidate(directory, stamp, ext)
    i = 1
    while is_occupied(candidate):
        candidate = build_candidate(directory, stamp, ext, i)
        i += 1
    return candidate
