# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Top-level workflow of batchelor.

`Batcher` expands the inputs, splits them into groups, writes one job script
per group and submits the job scripts one after another. Any failure aborts
the run; job scripts that were not submitted are left in the output directory.
"""

from pathlib import Path

import click

from batchelor_lib.core.common import (
    construct_job_name,
    construct_script_path,
    remove_batch_scripts,
    remove_file,
)
from batchelor_lib.core.error import (
    BadConfigError,
    BatchelorIOError,
    MissingScriptError,
    NoInputsError,
)
from batchelor_lib.core.logger import get_logger
from batchelor_lib.core.quoter import quote_path
from batchelor_lib.properties.convention import InputConvention
from batchelor_lib.script.emitter import ScriptEmitter
from batchelor_lib.script.expander import expand_inputs, sort_inputs
from batchelor_lib.script.partitioner import split_evenly
from batchelor_lib.submit.submitter import Submitter

from .settings import BatchSettings

logger = get_logger(__name__)


class Batcher:
    """
    Splits inputs into job scripts and submits them.
    """

    def __init__(self, settings: BatchSettings):
        """
        Initialize a Batcher.

        Args:
            settings (BatchSettings): Settings of the run.
        """
        self._settings = settings
        self._convention = InputConvention.fromStr(settings.input_flag)
        self._submitter = Submitter(settings.submit)

    def run(self) -> list[Path]:
        """
        Generate the job scripts and submit them (or print them in dry-run mode).

        Returns:
            list[Path]: Paths to the generated job scripts in the order of submission.

        Raises:
            BadConfigError: If the requested number of batches is zero.
            MissingScriptError: If the worker script does not exist.
            GlobSyntaxError: If an input pattern is malformed.
            NoInputsError: If the input patterns match no inputs.
            BatchelorIOError: If a filesystem operation fails.
            SubmitParseError: If the submission command cannot be parsed.
            SubmitFailedError: If the submission of a job script fails.
        """
        settings = self._settings

        if settings.batch < 1:
            raise BadConfigError(f"--batch must be >= 1, got {settings.batch}.")

        if not settings.script.exists():
            raise MissingScriptError(f"Script '{settings.script}' does not exist.")

        worker = self._resolveScript()
        inputs = self._collectInputs()

        self._prepareOutDir()

        batch_count = min(settings.batch, len(inputs))
        logger.info(
            f"Found {len(inputs)} input files. Creating {batch_count} job(s)."
        )

        emitter = ScriptEmitter(worker, self._convention, settings.script_args)
        scripts = []
        for index, group in enumerate(split_evenly(inputs, batch_count), start=1):
            job_name = construct_job_name(settings.job_name_prefix, index)
            script = construct_script_path(settings.out_dir, job_name)

            emitter.emit(script, group)
            scripts.append(script)

            if settings.dry_run:
                print(f"[dry-run] {settings.submit} {quote_path(script)}")
                continue

            self._submit(script)

        return scripts

    def _resolveScript(self) -> Path:
        """
        Return the canonical path to the worker script.
        """
        try:
            return self._settings.script.resolve(strict=True)
        except OSError as e:
            raise BatchelorIOError(
                f"Could not resolve script '{self._settings.script}': {e}."
            )

    def _collectInputs(self) -> list[str]:
        """
        Expand the input patterns into a sorted list of inputs.
        """
        inputs = sort_inputs(expand_inputs(self._settings.patterns))
        if not inputs:
            raise NoInputsError(
                f"No inputs matched from --glob {list(self._settings.patterns)}."
            )

        logger.debug(f"Inputs: {inputs}.")
        return inputs

    def _prepareOutDir(self) -> None:
        """
        Create the output directory and remove job scripts left there by previous runs.
        """
        out_dir = self._settings.out_dir
        try:
            out_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BatchelorIOError(f"Could not create directory '{out_dir}': {e}.")

        removed = remove_batch_scripts(out_dir, self._settings.job_name_prefix)
        if removed:
            logger.debug(f"Removed {removed} old job script(s) from '{out_dir}'.")

    def _submit(self, script: Path) -> None:
        """
        Submit a job script, forward the output of the submission command
        and remove the job script unless it should be kept.
        """
        output = self._submitter.submit(script)
        click.echo(output, nl=False)

        if not self._settings.keep:
            logger.debug(f"Removing submitted job script '{script}'.")
            remove_file(script)
