# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from pathlib import Path
from typing import NoReturn

import click
from click_option_group import optgroup

from batchelor_lib.batch.batcher import Batcher
from batchelor_lib.batch.settings import BatchSettings
from batchelor_lib.core.click_format import VariadicHelpColorsCommand
from batchelor_lib.core.config import CFG
from batchelor_lib.core.error import BatchelorError
from batchelor_lib.core.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class BatchelorCommand(VariadicHelpColorsCommand):
    """Command accepting several values after `--glob` and trailing `--script-args`."""

    variadic_options = ("--glob",)
    trailing_options = ("--script-args",)
    raw_value_options = ("--input-flag", "--submit")


def _print_version(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    print(__version__)
    ctx.exit()


@click.command(
    help=f"""
Batch globbed inputs into job scripts and submit them.

The inputs matching {click.style("--glob", fg="green")} are sorted and split into
{click.style("--batch", fg="green")} groups. For each group, a job script running
{click.style("--script", fg="green")} once per input is written into
{click.style("--out-dir", fg="green")} and submitted using {click.style("--submit", fg="green")}.

The input is passed to the script according to {click.style("--input-flag", fg="green")}:
a named flag (e.g. `--input`), a positional slot among the script arguments (e.g. `$2`),
or a template in which every `$1` is replaced by the input (e.g. `-i $1 -o $1.out`).
""",
    cls=BatchelorCommand,
    help_options_color="bright_blue",
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    expose_value=False,
    is_eager=True,
    callback=_print_version,
    help=f"Print the current version of {CFG.binary_name} and exit.",
)
@optgroup.group(f"{click.style('Inputs', fg='yellow')}")
@optgroup.option(
    "--script",
    type=str,
    required=True,
    help="Path to the shell script to execute for each input.",
)
@optgroup.option(
    "--glob",
    "patterns",
    type=str,
    multiple=True,
    required=True,
    help="One or more glob patterns or literal input tokens.",
)
@optgroup.option(
    "--input-flag",
    type=str,
    default=CFG.defaults.input_flag,
    show_default=True,
    help="Named flag (e.g. --input), positional slot (e.g. $2), or a template containing $1 placeholders.",
)
@optgroup.option(
    "--script-args",
    type=str,
    multiple=True,
    help="Additional arguments passed to the script for each input. Consumes all remaining arguments.",
)
@optgroup.group(f"{click.style('Job scripts', fg='yellow')}")
@optgroup.option(
    "--batch",
    type=click.IntRange(min=0),
    default=CFG.defaults.batch,
    show_default=True,
    help="Number of job scripts (and jobs) to create.",
)
@optgroup.option(
    "--out-dir",
    type=str,
    default=CFG.defaults.out_dir,
    show_default=True,
    help="Directory where the generated job scripts are stored.",
)
@optgroup.option(
    "--job-name-prefix",
    type=str,
    default=CFG.defaults.job_name_prefix,
    show_default=True,
    help="Prefix of the generated job names.",
)
@optgroup.group(f"{click.style('Submission', fg='yellow')}")
@optgroup.option(
    "--submit",
    type=str,
    default=CFG.defaults.submit,
    show_default=True,
    help="Submission command, e.g. 'sbatch --mem=50G --mincpus 1' or 'bash'.",
)
@optgroup.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print what would be submitted without running the submission command.",
)
@optgroup.option(
    "--keep",
    is_flag=True,
    default=False,
    help="Keep the generated job scripts after successful submission.",
)
def cli(
    script: str,
    patterns: tuple[str, ...],
    input_flag: str,
    script_args: tuple[str, ...],
    batch: int,
    out_dir: str,
    job_name_prefix: str,
    submit: str,
    dry_run: bool,
    keep: bool,
) -> NoReturn:
    """
    Batch globbed inputs into job scripts and submit them.
    """
    try:
        settings = BatchSettings(
            script=Path(script),
            patterns=patterns,
            input_flag=input_flag,
            batch=batch,
            out_dir=Path(out_dir),
            submit=submit,
            job_name_prefix=job_name_prefix,
            script_args=script_args,
            dry_run=dry_run,
            keep=keep,
        )
        Batcher(settings).run()
        sys.exit(0)
    except BatchelorError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)
