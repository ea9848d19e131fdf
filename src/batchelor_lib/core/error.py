# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout batchelor.

Every failure of a batchelor run is reported through a subclass of
`BatchelorError`. Each exception carries an associated exit code used by the
command-line interface to report failures consistently.
"""

from pathlib import Path

from batchelor_lib.core.config import CFG


class BatchelorError(Exception):
    """Common exception type for all expected batchelor errors."""

    exit_code = CFG.exit_codes.default


class BadConfigError(BatchelorError):
    """Raised when the requested configuration is invalid (e.g., zero batches)."""

    pass


class MissingScriptError(BatchelorError):
    """Raised when the worker script does not exist."""

    pass


class GlobSyntaxError(BatchelorError):
    """Raised when an input pattern is not a valid glob pattern."""

    pass


class NoInputsError(BatchelorError):
    """Raised when the input patterns expand to no inputs."""

    pass


class BatchelorIOError(BatchelorError):
    """Raised when a filesystem operation fails."""

    pass


class SubmitParseError(BatchelorError):
    """Raised when the submission command cannot be parsed or is empty."""

    pass


class SubmitFailedError(BatchelorError):
    """
    Raised when the submission command exits with a non-zero exit code
    or cannot be executed at all.
    """

    def __init__(self, program: str, script: Path, stderr: str):
        self.program = program
        self.script = script
        self.stderr = stderr
        super().__init__(f"{program} failed for '{script}': {stderr}")
