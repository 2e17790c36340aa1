#!/usr/bin/env python3
"""
Copy selected files (and allowed files inside selected folders) to the
clipboard as formatted sections.
"""

from typing import List

from core.clipboard import ClipboardSink, build_clipboard_text
from core.config import Config
from core.exceptions import ReadError
from core.formatter import format_section
from core.logger import ConsoleLogger
from core.models import CopyResult, FileEntry, Mode, Section
from core.resolver import resolve_paths
from core.tokens import expand_tokens

NO_INPUT_HINT = (
    "No files/folders detected. Make sure you select files and run the "
    "External Tool with $FilePath$ and/or $SelectedFiles$ in arguments."
)


def format_sections(entries: List[FileEntry], config: Config,
                    logger: ConsoleLogger, result: CopyResult) -> List[Section]:
    sections = []
    for entry in entries:
        try:
            sections.append(Section(entry, format_section(entry, config)))
            result.included.append(entry)
        except ReadError as e:
            logger.warning(str(e))
            result.skipped.append(entry)
    return sections


def report(result: CopyResult, logger: ConsoleLogger):
    logger.blank()
    logger.success(f"{result.verb} {len(result.included)} file(s) to clipboard.")
    logger.detail(f"Mode: {result.mode.value}")
    logger.info("Files: " + ", ".join(result.names))
    if result.skipped:
        logger.detail("Skipped: " + ", ".join(e.name for e in result.skipped))
    logger.blank()


def copy_main(tokens: List[str], mode: Mode, config: Config = None,
              clipboard: ClipboardSink = None, logger: ConsoleLogger = None):
    """
    Copy the files named by tokens into the clipboard.

    Args:
        tokens: Path tokens left after argument classification
        mode: Mode.FRESH or Mode.APPEND
        config: Settings; defaults are used when omitted
        clipboard: Clipboard backend; pyperclip when omitted

    Returns:
        CopyResult, or None when nothing was written

    Raises:
        ClipboardWriteError: If the final clipboard write fails
    """
    config = config or Config()
    clipboard = clipboard or ClipboardSink()
    logger = logger or ConsoleLogger()

    candidates = expand_tokens(tokens)
    if not candidates:
        logger.error(NO_INPUT_HINT)
        return None

    entries = resolve_paths(candidates, config, logger)
    if not entries:
        logger.warning("No readable files found (extensions filtered?).")
        return None

    result = CopyResult(mode=mode)
    seed = clipboard.seed_content(mode)
    sections = format_sections(entries, config, logger, result)

    text = build_clipboard_text(seed, sections)
    clipboard.write(text)

    report(result, logger)
    return result
