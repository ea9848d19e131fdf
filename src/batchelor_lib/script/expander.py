# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Expansion of user-provided input patterns into input tokens.

Patterns containing glob metacharacters are expanded against the filesystem.
Inputs naming existing paths are canonicalized; anything else is passed through
verbatim, so that jobs may refer to paths which only exist on the compute nodes.
"""

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

from batchelor_lib.core.error import BatchelorIOError, GlobSyntaxError
from batchelor_lib.core.logger import get_logger

logger = get_logger(__name__)

_GLOB_META = ("*", "?", "[")


def expand_inputs(patterns: Iterable[str]) -> list[str]:
    """
    Expand glob patterns and literal tokens into a list of inputs.

    The inputs are returned in the order of the patterns; matches of a single
    glob pattern are returned in the order provided by the filesystem.
    Duplicates are kept.

    Args:
        patterns (Iterable[str]): Glob patterns and literal tokens.

    Returns:
        list[str]: The expanded inputs.

    Raises:
        GlobSyntaxError: If a glob pattern is malformed.
        BatchelorIOError: If a directory cannot be read during the expansion
            or an existing path cannot be canonicalized.
    """
    inputs = []
    for pattern in patterns:
        if has_glob_meta(pattern):
            validate_glob(pattern)
            matches = match_glob(pattern)
            logger.debug(f"Pattern '{pattern}' matched {len(matches)} path(s).")
            inputs.extend(_normalize(match) for match in matches)
        else:
            inputs.append(_normalize(pattern))

    return inputs


def match_glob(pattern: str) -> list[str]:
    """
    Return the paths matching a well-formed glob pattern.

    The pattern is matched component by component. `**` matches any number
    of nested directories (including none) and wildcards match dot-files.
    Symbolic links to directories are not descended into by `**`.

    Args:
        pattern (str): The glob pattern.

    Returns:
        list[str]: The matching paths in the order provided by the filesystem.

    Raises:
        BatchelorIOError: If a directory cannot be read.
    """
    dir_only = pattern.endswith(os.sep)
    components = [c for c in pattern.split(os.sep) if c]
    paths = [os.sep if os.path.isabs(pattern) else ""]

    for i, component in enumerate(components):
        # only directories can contain the following components
        need_dir = dir_only or i < len(components) - 1
        matched = []
        for base in paths:
            if component == "**":
                # no nested directory at all
                matched.append(base)
                matched.extend(_walk(base, need_dir))
            elif has_glob_meta(component):
                matched.extend(
                    os.path.join(base, name)
                    for name in _list_dir(base, need_dir)
                    if fnmatch.fnmatchcase(name, component)
                )
            else:
                path = os.path.join(base, component)
                exists = os.path.isdir(path) if need_dir else os.path.lexists(path)
                if exists:
                    matched.append(path)
        paths = matched

    return [os.path.join(path, "") if dir_only else path for path in paths if path]


def _list_dir(directory: str, dir_only: bool) -> list[str]:
    """
    Return the names of the entries of a directory.

    Raises:
        BatchelorIOError: If the directory cannot be read.
    """
    try:
        with os.scandir(directory or os.curdir) as entries:
            return [
                entry.name for entry in entries if not dir_only or entry.is_dir()
            ]
    except OSError as e:
        raise BatchelorIOError(
            f"Could not read directory '{directory or os.curdir}': {e}."
        )


def _walk(directory: str, dir_only: bool) -> list[str]:
    """
    Return all paths nested in a directory, parents before their contents.

    Raises:
        BatchelorIOError: If a directory cannot be read.
    """
    paths = []
    try:
        with os.scandir(directory or os.curdir) as it:
            entries = list(it)
        for entry in entries:
            path = os.path.join(directory, entry.name)
            if not dir_only or entry.is_dir():
                paths.append(path)
            if entry.is_dir(follow_symlinks=False):
                paths.extend(_walk(path, dir_only))
    except OSError as e:
        raise BatchelorIOError(
            f"Could not read directory '{directory or os.curdir}': {e}."
        )

    return paths


def sort_inputs(inputs: Iterable[str]) -> list[str]:
    """
    Sort inputs lexicographically by their byte values.
    """
    return sorted(inputs, key=os.fsencode)


def has_glob_meta(pattern: str) -> bool:
    """Return True if the pattern contains any glob metacharacter."""
    return any(c in pattern for c in _GLOB_META)


def validate_glob(pattern: str) -> None:
    """
    Check that a glob pattern is well-formed.

    A pattern is malformed if it contains an unterminated `[...]` class,
    a run of more than two `*`, or a `**` which does not form a whole path component.

    Raises:
        GlobSyntaxError: If the pattern is malformed.
    """
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        if c == "[":
            # `!` negates the class, `]` right after the opening is a literal
            j = i + 1
            if j < n and pattern[j] == "!":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                raise GlobSyntaxError(
                    f"Invalid glob pattern '{pattern}': unterminated character class at position {i}."
                )
            i = end + 1
        elif c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            stars = j - i
            if stars > 2:
                raise GlobSyntaxError(
                    f"Invalid glob pattern '{pattern}': wildcards are either '*' or '**'."
                )
            if stars == 2 and (
                (i > 0 and pattern[i - 1] != os.sep) or (j < n and pattern[j] != os.sep)
            ):
                raise GlobSyntaxError(
                    f"Invalid glob pattern '{pattern}': '**' must form a whole path component."
                )
            i = j
        else:
            i += 1


def _normalize(token: str) -> str:
    """
    Canonicalize a token if it names an existing path, otherwise return it unchanged.

    Raises:
        BatchelorIOError: If an existing path cannot be canonicalized.
    """
    # Path("") would point to the current directory
    path = Path(token)
    try:
        if not token or not path.exists():
            logger.debug(f"Input '{token}' does not exist. Using it verbatim.")
            return token
        return str(path.resolve(strict=True))
    except OSError as e:
        raise BatchelorIOError(f"Could not resolve input '{token}': {e}.")
