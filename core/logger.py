"""
Colored console output for clipcopy.

Status lines go to stdout, warnings and errors to stderr.
"""

import sys
from colorama import Fore, Style


class ConsoleLogger:
    """Logger that prints emoji-tagged, colored lines to the console."""

    def log(self, message: str, file=None):
        """Log a message, one line per input line."""
        # Streams are looked up per call so redirected/captured output works
        file = file or sys.stdout
        for line in message.splitlines() or [""]:
            print(line, file=file)

    def info(self, message: str):
        """Log an info message."""
        self.log(message)

    def detail(self, message: str):
        """Log a dimmed secondary line."""
        self.log(f"{Style.DIM}{message}{Style.RESET_ALL}")

    def blank(self):
        print(file=sys.stdout)

    def warning(self, message: str):
        """Log a warning message."""
        self.log(f"{Fore.YELLOW}⚠️ {message}{Style.RESET_ALL}", file=sys.stderr)

    def error(self, message: str):
        """Log an error message."""
        self.log(f"{Fore.RED}❌ {message}{Style.RESET_ALL}", file=sys.stderr)

    def success(self, message: str):
        """Log a success message."""
        self.log(f"{Fore.GREEN}✅ {message}{Style.RESET_ALL}")
