# core/models.py
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Mode(str, Enum):
    """Clipboard write strategy."""
    FRESH = "fresh"
    APPEND = "append"
    CLEAR = "clear"


class EntrySource(str, Enum):
    EXPLICIT = "explicit"    # named directly on the command line
    DISCOVERED = "discovered"  # found while walking a directory


@dataclass(frozen=True)
class FileEntry:
    path: str
    source: EntrySource = EntrySource.EXPLICIT

    @property
    def name(self) -> str:
        return os.path.basename(self.path)


@dataclass
class Section:
    entry: FileEntry
    text: str


@dataclass
class CopyResult:
    """Outcome of one copy run, used for the summary report."""
    mode: Mode
    included: List[FileEntry] = field(default_factory=list)
    skipped: List[FileEntry] = field(default_factory=list)

    @property
    def names(self) -> List[str]:
        return [e.name for e in self.included]

    @property
    def verb(self) -> str:
        return "Updated" if self.mode == Mode.APPEND else "Copied"
