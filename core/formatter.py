# core/formatter.py
from colorama import Style

from utils.common import display_path

from .config import Config
from .exceptions import ReadError
from .models import FileEntry
from .validation import SectionStyle

NEW_FILE_MARKER = "//========================== NEW FILE  ==========================//"
HEADER_DASH = "─"
HEADER_LEAD = 3
MIN_DASHES = 4


def read_contents(entry: FileEntry, encoding: str = "utf-8") -> str:
    """Read a file as text, trimmed."""
    try:
        # newline="" keeps CRLF line endings as they are on disk
        with open(entry.path, "r", encoding=encoding, newline="") as f:
            return f.read().strip()
    except UnicodeDecodeError as e:
        raise ReadError(
            f"Could not read {entry.path}: not valid {encoding} text ({e.reason})",
            context={"path": entry.path},
        ) from e
    except OSError as e:
        raise ReadError(
            f"Could not read {entry.path}: {e.strerror or e}",
            context={"path": entry.path},
        ) from e


def header_line(name: str, config: Config) -> str:
    """
    ``─── name ─────`` padded towards separator_length.

    The width is measured on the plain name even when it is rendered bold.
    """
    name_display = f" {name} "
    dash_count = max(MIN_DASHES, config.separator_length - len(name_display))
    if config.bold_names:
        name_display = f" {Style.BRIGHT}{name}{Style.RESET_ALL} "
    return f"{HEADER_DASH * HEADER_LEAD}{name_display}{HEADER_DASH * dash_count}"


def render_header_section(entry: FileEntry, contents: str, config: Config) -> str:
    return f"{NEW_FILE_MARKER}\n{header_line(entry.name, config)}\n{contents}\n\n"


def render_rule_section(entry: FileEntry, contents: str, config: Config, cwd: str = None) -> str:
    rule = "=" * config.rule_width
    return f"{rule}\n// {display_path(entry.path, cwd)}\n{rule}\n{contents}\n\n"


def format_section(entry: FileEntry, config: Config, cwd: str = None) -> str:
    """
    Render one file as a clipboard section followed by a blank line.

    Raises:
        ReadError: If the file cannot be read as text
    """
    contents = read_contents(entry, config.encoding)
    if config.style == SectionStyle.RULE:
        return render_rule_section(entry, contents, config, cwd)
    return render_header_section(entry, contents, config)
