# utils/common.py

import os


def expand_home(path: str) -> str:
    """Expand a leading ~ to the invoking user's home directory."""
    if not path:
        return path
    if path.startswith("~"):
        rest = path[1:].lstrip("/\\")
        return os.path.join(os.path.expanduser("~"), rest) if rest else os.path.expanduser("~")
    return path


def display_path(path: str, cwd: str = None) -> str:
    """Path relative to cwd when it lives below it, absolute otherwise."""
    cwd = os.path.abspath(cwd or os.getcwd())
    abs_path = os.path.abspath(path)
    try:
        rel = os.path.relpath(abs_path, cwd)
    except ValueError:
        # different drive on Windows
        return abs_path
    if rel == os.pardir or rel.startswith(os.pardir + os.sep):
        return abs_path
    return rel
