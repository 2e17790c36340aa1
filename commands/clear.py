#!/usr/bin/env python3
from colorama import Fore, Style

from core.clipboard import ClipboardSink
from core.logger import ConsoleLogger


def clear_main(clipboard: ClipboardSink = None, logger: ConsoleLogger = None):
    """Empty the clipboard. Raises ClipboardWriteError on failure."""
    clipboard = clipboard or ClipboardSink()
    logger = logger or ConsoleLogger()

    clipboard.clear()
    logger.info(f"{Fore.GREEN}🗑 Clipboard cleared.{Style.RESET_ALL}")


if __name__ == "__main__":
    clear_main()
