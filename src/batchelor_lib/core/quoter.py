# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Quoting of strings for POSIX shells.

All user-provided values written into generated job scripts pass through
`quote` exactly once. The result is parsed by a POSIX shell back into the
original string. Only single quotes are ever introduced.
"""

import re
from pathlib import Path

# characters that never need quoting
_SAFE_CHARS = re.compile(r"[A-Za-z0-9@%_+=:,./-]+")


def quote(s: str) -> str:
    """
    Quote a string so that it is interpreted as a single word by a POSIX shell.

    Strings consisting solely of safe characters are returned unchanged.
    Other strings are wrapped in single quotes with every embedded single quote
    written as `'\\''`.

    Args:
        s (str): The string to quote.

    Returns:
        str: Shell-safe representation of the string.
    """
    if not s:
        return "''"

    if _SAFE_CHARS.fullmatch(s):
        return s

    return "'" + s.replace("'", "'\\''") + "'"


def quote_path(path: Path) -> str:
    """
    Quote a filesystem path for a POSIX shell.

    Args:
        path (Path): The path to quote.

    Returns:
        str: Shell-safe representation of the path.
    """
    return quote(str(path))
