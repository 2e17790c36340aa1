"""
Argument classification and path token normalization.

IDE "External Tool" integrations hand over arguments such as
``$FilePath$ $SelectedFiles$`` that may arrive quoted, glued together with
spaces, semicolons or colons, or not substituted at all. This module turns
them back into an ordered list of candidate paths.
"""

import re
from typing import Iterable, List, Tuple

from .models import Mode

PATH_SEPARATOR = ";"

MODE_FLAGS = {
    "--fresh": Mode.FRESH,
    "--append": Mode.APPEND,
}
CLEAR_FLAG = "--clear"

_LITERAL_MACRO_RE = re.compile(r"\$[A-Za-z0-9_]+\$")
_SURROUNDING_QUOTES_RE = re.compile(r"^[\"']|[\"']$")
_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RUN_RE = re.compile(re.escape(PATH_SEPARATOR) + "+")
# a colon followed by a backslash is a drive letter (C:\), anything else is a list delimiter
_LIST_COLON_RE = re.compile(r":(?!\\)")


def strip_token(raw: str) -> str:
    """Remove one layer of surrounding quotes and trim whitespace."""
    return _SURROUNDING_QUOTES_RE.sub("", str(raw)).strip()


def is_literal_macro_token(token) -> bool:
    """True for an IDE placeholder left unexpanded, e.g. ``$SelectedFiles$``."""
    return isinstance(token, str) and _LITERAL_MACRO_RE.fullmatch(token) is not None


def classify_arguments(raw_args: Iterable[str],
                       default_mode: Mode = Mode.APPEND) -> Tuple[Mode, List[str]]:
    """
    Split raw arguments into a mode and the path tokens, preserving order.

    ``--fresh``/``--append`` may repeat, the last one wins. ``--clear`` stops
    classification immediately and discards every path token. When no mode
    flag is present the returned mode is default_mode.
    """
    mode = default_mode
    tokens = []
    for raw in raw_args:
        arg = strip_token(raw)
        if not arg:
            continue
        if arg == CLEAR_FLAG:
            return Mode.CLEAR, []
        if arg in MODE_FLAGS:
            mode = MODE_FLAGS[arg]
            continue
        tokens.append(arg)
    return mode, tokens


def extract_paths_from_token(token: str) -> List[str]:
    """
    Expand one token into the candidate paths glued inside it.

    Examples:
        "C:\\a\\b C:\\c\\d" -> ["C:\\a\\b", "C:\\c\\d"]
        "C:\\a\\b;C:\\c\\d" -> ["C:\\a\\b", "C:\\c\\d"]
        "path1:path2"       -> ["path1", "path2"]
    """
    if not token or is_literal_macro_token(token):
        return []

    t = strip_token(token)
    if not t:
        return []

    normalized = _WHITESPACE_RE.sub(PATH_SEPARATOR, t)
    normalized = _SEPARATOR_RUN_RE.sub(PATH_SEPARATOR, normalized)
    normalized = _LIST_COLON_RE.sub(PATH_SEPARATOR, normalized)

    return [p.strip() for p in normalized.split(PATH_SEPARATOR) if p.strip()]


def expand_tokens(tokens: Iterable[str]) -> List[str]:
    """Flatten every token into candidate paths, keeping their order."""
    candidates = []
    for token in tokens:
        candidates.extend(extract_paths_from_token(token))
    return candidates
