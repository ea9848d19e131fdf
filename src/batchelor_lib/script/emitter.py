# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Writing of job scripts.

A job script runs the worker script once for every input of a group.
The scripts stop at the first failing invocation.
"""

import os
from collections.abc import Iterable
from pathlib import Path

from batchelor_lib.core.config import CFG
from batchelor_lib.core.error import BatchelorIOError
from batchelor_lib.core.logger import get_logger
from batchelor_lib.core.quoter import quote, quote_path
from batchelor_lib.properties.convention import InputConvention

logger = get_logger(__name__)

SHEBANG = "#!/usr/bin/env bash"
PRELUDE = "set -euo pipefail"


class ScriptEmitter:
    """
    Writes job scripts invoking a worker script for a group of inputs.
    """

    def __init__(
        self,
        worker: Path,
        convention: InputConvention,
        script_args: Iterable[str] = (),
    ):
        """
        Initialize a ScriptEmitter.

        Args:
            worker (Path): Absolute path to the worker script.
            convention (InputConvention): How inputs are passed to the worker script.
            script_args (Iterable[str]): Additional arguments for every invocation.
        """
        self._worker = worker
        self._convention = convention
        self._quoted_worker = quote_path(worker)
        self._quoted_args = [quote(arg) for arg in script_args]

    def emit(self, path: Path, inputs: Iterable[str]) -> None:
        """
        Write an executable job script running the worker script for each input.

        Args:
            path (Path): Where to write the job script.
            inputs (Iterable[str]): The inputs of the group.

        Raises:
            BatchelorIOError: If the script cannot be written or made executable.
        """
        text = self.render(inputs)

        try:
            # surrogate escapes carry the raw bytes of non-UTF-8 paths
            path.write_text(
                text, encoding="utf-8", errors="surrogateescape", newline="\n"
            )
            if os.name == "posix":
                path.chmod(CFG.scripts.mode)
        except OSError as e:
            raise BatchelorIOError(f"Could not write job script '{path}': {e}.")

        logger.debug(f"Written job script '{path}'.")

    def render(self, inputs: Iterable[str]) -> str:
        """
        Build the content of a job script.

        Args:
            inputs (Iterable[str]): The inputs of the group.

        Returns:
            str: The content of the job script.
        """
        lines = [SHEBANG, PRELUDE, ""]
        lines.extend(self.invocation(item) for item in inputs)
        return "\n".join(lines) + "\n"

    def invocation(self, item: str) -> str:
        """
        Build the command line running the worker script for a single input.
        """
        args = self._convention.formatArgs(item, self._quoted_args)
        return " ".join([CFG.scripts.interpreter, self._quoted_worker, *args])
