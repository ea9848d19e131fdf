# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shlex
import subprocess
from pathlib import Path

from batchelor_lib.core.error import SubmitFailedError, SubmitParseError
from batchelor_lib.core.logger import get_logger

logger = get_logger(__name__)


class Submitter:
    """
    Submits job scripts using a user-provided submission command.

    The submission command (e.g., `sbatch --mem 4G` or `bash`) is split
    into words using POSIX shell rules and the path to the job script
    is appended as its last argument.
    """

    def __init__(self, command: str):
        """
        Initialize a Submitter.

        Args:
            command (str): The submission command.
        """
        self._command = command

    def submit(self, script: Path) -> bytes:
        """
        Submit a job script and wait for the submission command to finish.

        Args:
            script (Path): Path to the job script to submit.

        Returns:
            bytes: Standard output of the submission command.

        Raises:
            SubmitParseError: If the submission command cannot be parsed or is empty.
            SubmitFailedError: If the submission command cannot be executed
                or returns a non-zero exit code.
        """
        program, *args = self.parseCommand()
        command = [program, *args, str(script)]
        logger.debug(f"Submitting: {shlex.join(command)}")

        try:
            result = subprocess.run(command, capture_output=True, check=False)
        except OSError as e:
            raise SubmitFailedError(program, script, str(e))

        if result.returncode != 0:
            stderr = result.stderr.decode(errors="replace").strip()
            raise SubmitFailedError(program, script, stderr)

        return result.stdout

    def parseCommand(self) -> list[str]:
        """
        Split the submission command into words.

        Returns:
            list[str]: The program followed by its arguments.

        Raises:
            SubmitParseError: If the submission command cannot be parsed or is empty.
        """
        try:
            words = shlex.split(self._command)
        except ValueError as e:
            raise SubmitParseError(
                f"Could not parse the submission command '{self._command}' (check shell quoting): {e}."
            )

        if not words:
            raise SubmitParseError("The submission command cannot be empty.")

        return words
