import argparse
import logging
import sys
from typing import List, Optional

from .defaults import CONFIRM_ANSWER, CONFIRM_PROMPT
from .errors import InvalidPathError, UsageError
from .models import RenameResult, RenameStatus
from .renamer import SafeRenamer
from .scanner import FolderScanner
from .utils import ensure_directory

DESCRIPTION = """\
Rename Files to Modification Date

Renames files in a directory to their modification timestamp:
  YYYY-MM-DD_HH-MM-SS.ext
If the target name already exists, an increment is appended:
  YYYY-MM-DD_HH-MM-SS_1.ext, YYYY-MM-DD_HH-MM-SS_2.ext, ...
"""

EPILOG = """\
Notes:
- Only files directly inside <directory> are processed (non-recursive).
- The extension is preserved. If a file has no extension, it will be renamed without one.
"""


class _Parser(argparse.ArgumentParser):
    # argparse exits with 2 on bad input; usage errors here exit with 1
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="mtime-rename",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("--dry-run", action="store_true", help="Print what would happen without renaming files")
    parser.add_argument("--yes", action="store_true", help="Do not prompt for confirmation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    parser.add_argument("directory", nargs="?", metavar="<directory>")
    return parser


def err(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


def ask_yes_no(prompt: str) -> bool:
    try:
        return input(prompt).lower() == CONFIRM_ANSWER
    except EOFError:
        return False


def report_result(r: RenameResult) -> None:
    if r.status is RenameStatus.RENAMED:
        print(f"Renamed: {r.src} -> {r.dst}")
    elif r.status is RenameStatus.PLANNED:
        print(f"Would rename: {r.src} -> {r.dst}")
    elif r.status is RenameStatus.MTIME_ERROR:
        err(f"Could not read modification time: {r.src}")
    elif r.status is RenameStatus.FORMAT_ERROR:
        err(f"Could not format modification time: {r.src}")
    elif r.status is RenameStatus.RENAME_ERROR:
        err(f"Could not rename {r.src} -> {r.dst}: {r.reason}")


def _parse(parser: argparse.ArgumentParser, argv: Optional[List[str]]) -> argparse.Namespace:
    args, extra = parser.parse_known_args(argv)
    unknown = [a for a in extra if a.startswith("-")]
    if unknown:
        raise UsageError(f"Unknown option: {unknown[0]}")
    if extra:
        raise UsageError(f"Unexpected argument: {extra[0]}")
    if not args.directory:
        raise UsageError("Please provide a directory.")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    try:
        args = _parse(parser, argv)
    except UsageError as e:
        err(str(e))
        parser.print_usage(sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        directory = ensure_directory(args.directory)
    except InvalidPathError as e:
        err(str(e))
        return 1

    # Snapshot once; renamed files must not be picked up again.
    files = FolderScanner(directory).scan()

    print(f"Directory: {args.directory}")
    print(f"Files to process (non-recursive): {len(files)}")

    if not files:
        print("Nothing to do.")
        return 0

    if not args.dry_run and not args.yes:
        if not ask_yes_no(CONFIRM_PROMPT):
            print("Aborted.")
            return 0

    renamer = SafeRenamer(dry_run=args.dry_run)
    report = renamer.rename_many(files, on_result=report_result)

    print()
    if args.dry_run:
        print("Dry run completed. No files were renamed.")
    else:
        summary = f"Done. Renamed {report.renamed} file(s)."
        if report.unchanged:
            summary += f" Already named: {report.unchanged}."
        if report.errors:
            summary += f" Failed: {report.errors}."
        print(summary)
    return 0
