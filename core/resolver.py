"""
Candidate path resolution.

Turns candidate paths into file entries: files are taken as-is, directories
are walked and filtered by extension.
"""

import os
import stat
from typing import Iterable, Iterator, List

from utils.common import expand_home

from .config import Config
from .exceptions import AccessError
from .logger import ConsoleLogger
from .models import EntrySource, FileEntry


def iter_directory_files(directory: str, config: Config) -> Iterator[str]:
    """
    Lazily yield allowed files below directory, depth-first in sorted order.

    Subdirectories are descended into where they appear in the listing.
    Directories that cannot be listed are skipped. Symlinked directories are
    not followed.
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError:
        return

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                yield from iter_directory_files(entry.path, config)
            elif entry.is_file() and config.is_allowed(entry.name):
                yield entry.path
        except OSError:
            continue


def resolve_path(candidate: str, config: Config) -> Iterator[FileEntry]:
    """
    Resolve one candidate path into file entries.

    Raises:
        AccessError: If the path does not exist or cannot be accessed
    """
    abs_path = os.path.abspath(expand_home(candidate))
    try:
        st = os.stat(abs_path)
    except OSError as e:
        raise AccessError(
            f"Cannot access {candidate}: {e.strerror or e}",
            context={"path": abs_path},
        ) from e

    if stat.S_ISREG(st.st_mode):
        # explicit selections bypass the extension filter
        yield FileEntry(abs_path, EntrySource.EXPLICIT)
    elif stat.S_ISDIR(st.st_mode):
        for path in iter_directory_files(abs_path, config):
            yield FileEntry(path, EntrySource.DISCOVERED)


def resolve_paths(candidates: Iterable[str], config: Config,
                  logger: ConsoleLogger = None) -> List[FileEntry]:
    """Resolve every candidate, warning about (and skipping) inaccessible ones."""
    logger = logger or ConsoleLogger()
    entries = []
    for candidate in candidates:
        try:
            entries.extend(resolve_path(candidate, config))
        except AccessError as e:
            logger.warning(str(e))
    return entries
