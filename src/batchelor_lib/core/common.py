# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for batchelor.

This module provides helpers for naming generated job scripts and for
locating and removing job scripts left behind by previous runs.
"""

from pathlib import Path

from .config import CFG
from .error import BatchelorIOError
from .logger import get_logger

logger = get_logger(__name__)


def construct_job_name(prefix: str, index: int) -> str:
    """
    Construct the name of a job.

    Args:
        prefix (str): Prefix of the job names.
        index (int): One-based index of the job.

    Returns:
        str: The job name, e.g. `batch-0001`.
    """
    return f"{prefix}-{index:0{CFG.scripts.index_width}d}"


def construct_script_path(out_dir: Path, job_name: str) -> Path:
    """
    Construct the path to the job script of the given job.

    Args:
        out_dir (Path): Directory where job scripts are stored.
        job_name (str): The name of the job.

    Returns:
        Path: Path to the job script.
    """
    return out_dir / f"{job_name}{CFG.scripts.suffix}"


def get_batch_scripts(directory: Path, prefix: str) -> list[Path]:
    """
    Retrieve all job scripts with the given prefix stored directly in a directory.

    Only regular files named `<prefix>-*<suffix>` are returned.

    Args:
        directory (Path): The directory to search in.
        prefix (str): Prefix of the job names.

    Returns:
        list[Path]: Sorted list of matching job scripts.

    Raises:
        BatchelorIOError: If the directory cannot be read.
    """
    name_start = f"{prefix}-"
    files = []
    try:
        for file in directory.iterdir():
            if (
                file.is_file()
                and file.name.startswith(name_start)
                and file.name.endswith(CFG.scripts.suffix)
            ):
                files.append(file)
    except OSError as e:
        raise BatchelorIOError(f"Could not read directory '{directory}': {e}.")

    return sorted(files)


def remove_batch_scripts(directory: Path, prefix: str) -> int:
    """
    Delete job scripts with the given prefix left in a directory by previous runs.

    Args:
        directory (Path): The directory to clean.
        prefix (str): Prefix of the job names.

    Returns:
        int: The number of deleted job scripts.

    Raises:
        BatchelorIOError: If the directory cannot be read or a file cannot be deleted.
    """
    files = get_batch_scripts(directory, prefix)
    for file in files:
        logger.debug(f"Removing old job script '{file}'.")
        remove_file(file)

    return len(files)


def remove_file(file: Path) -> None:
    """
    Delete a single file.

    Raises:
        BatchelorIOError: If the file cannot be deleted.
    """
    try:
        file.unlink()
    except OSError as e:
        raise BatchelorIOError(f"Could not remove file '{file}': {e}.")
