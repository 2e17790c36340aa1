"""
Custom exception hierarchy for clipcopy.

Per-path and per-file failures are raised as these exceptions and recovered
by the command layer; only clipboard writes and bad settings reach the CLI.
"""

class ClipcopyError(Exception):
    """Base exception for all clipcopy errors."""
    def __init__(self, message: str, context: dict = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self):
        return self.message


class AccessError(ClipcopyError):
    """Raised when a selected path does not exist or cannot be accessed."""
    pass


class ReadError(ClipcopyError):
    """Raised when a file cannot be read as text."""
    pass


class ClipboardError(ClipcopyError):
    """Base for clipboard backend failures."""
    pass


class ClipboardReadError(ClipboardError):
    """Raised when the current clipboard contents cannot be read."""
    pass


class ClipboardWriteError(ClipboardError):
    """Raised when the clipboard cannot be written."""
    pass


class ConfigurationError(ClipcopyError):
    """Raised when a settings file fails to load or validate."""
    pass
