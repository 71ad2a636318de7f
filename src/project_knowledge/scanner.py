"""Corpus provider and directory sampler.

Walks the project tree, skipping build, VCS and editor directories, and
loads matching source files. Output is sorted by path so classifiers that
let the first file win behave the same on every platform.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from .config import MAX_DIRECTORY_DEPTH, SAMPLER_SKIP_DIRS, SKIP_DIRS
from .knowledge import SourceFile

logger = logging.getLogger(__name__)


def scan_files(root: str | Path, pattern: str = "**/*.cs") -> list[SourceFile]:
    """Load every file under ``root`` whose name matches ``pattern``.

    Only the final component of the glob is used for matching; the walk is
    always recursive, and hidden directories and files are left out. Paths
    are POSIX-style and relative to ``root``, so path markers never pick up
    the directory the project lives in. Files that cannot be read or
    decoded are logged and skipped.
    """
    root = Path(root)
    name_pattern = Path(pattern).name
    matches: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [
            d for d in dirnames
            if d not in SKIP_DIRS and not d.startswith(".")
        ]
        for fname in filenames:
            if not fname.startswith(".") and fnmatch.fnmatchcase(fname, name_pattern):
                matches.append(Path(dirpath) / fname)

    files: list[SourceFile] = []
    for path in sorted(matches):
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read file %s: %s", path, e)
            continue
        files.append(SourceFile(
            path=path.relative_to(root).as_posix(),
            extension=os.path.splitext(path.name)[1],
            content=content,
        ))

    logger.debug("Matched %d files for %s under %s", len(files), pattern, root)
    return files


def list_directories(root: str | Path, max_depth: int = MAX_DIRECTORY_DEPTH) -> list[Path]:
    """Return every directory below ``root``, descending at most ``max_depth`` levels."""
    directories: list[Path] = []

    def _walk(current: Path, depth: int) -> None:
        if depth > max_depth:
            return
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug("Skipping unreadable directory %s: %s", current, e)
            return
        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError:
                continue
            if not is_dir or entry.name.lower() in SAMPLER_SKIP_DIRS:
                continue
            path = Path(entry.path)
            directories.append(path)
            _walk(path, depth + 1)

    _walk(Path(root), 0)
    return directories


def directory_basenames(directories: list[Path]) -> list[str]:
    """Lower-cased basenames used by the architecture classifier."""
    return [d.name.lower() for d in directories]
