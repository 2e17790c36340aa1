"""
Clipboard access through pyperclip.

The backend functions can be swapped out, which is how the tests run without
a real clipboard.
"""

from typing import Callable, Iterable, Optional

import pyperclip

from .exceptions import ClipboardReadError, ClipboardWriteError
from .models import Mode, Section


class ClipboardSink:
    """Reads and replaces the system clipboard contents."""

    def __init__(self,
                 paste: Optional[Callable[[], str]] = None,
                 copy: Optional[Callable[[str], None]] = None):
        # looked up lazily so monkeypatching pyperclip also works
        self._paste = paste
        self._copy = copy

    def read(self) -> str:
        """
        Return the current clipboard text.

        Raises:
            ClipboardReadError: If the backend fails
        """
        paste = self._paste or pyperclip.paste
        try:
            text = paste()
        except Exception as e:
            raise ClipboardReadError(f"Could not read clipboard: {e}") from e
        return text or ""

    def write(self, text: str):
        """
        Replace the clipboard contents with text.

        Raises:
            ClipboardWriteError: If the backend fails
        """
        copy = self._copy or pyperclip.copy
        try:
            copy(text)
        except Exception as e:
            raise ClipboardWriteError(f"Could not write clipboard: {e}") from e

    def clear(self):
        self.write("")

    def seed_content(self, mode: Mode) -> str:
        """Existing text to keep in front of new sections; empty unless appending."""
        if mode != Mode.APPEND:
            return ""
        try:
            return self.read()
        except ClipboardReadError:
            return ""


def build_clipboard_text(seed: str, sections: Iterable[Section]) -> str:
    return seed + "".join(s.text for s in sections)
