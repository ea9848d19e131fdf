# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import dataclass, field
from pathlib import Path

from batchelor_lib.core.config import CFG


@dataclass(frozen=True)
class BatchSettings:
    """
    Settings of a single batchelor run.

    Attributes:
        script (Path): Worker script executed for each input.
        patterns (tuple[str, ...]): Glob patterns or literal input tokens.
        input_flag (str): Input-passing convention.
        batch (int): Requested number of job scripts.
        out_dir (Path): Directory where job scripts are stored.
        submit (str): Command used to submit the job scripts.
        job_name_prefix (str): Prefix of the job names.
        script_args (tuple[str, ...]): Additional arguments for every worker invocation.
        dry_run (bool): Print the submission commands instead of running them.
        keep (bool): Keep job scripts after successful submission.
    """

    script: Path
    patterns: tuple[str, ...]
    input_flag: str = CFG.defaults.input_flag
    batch: int = CFG.defaults.batch
    out_dir: Path = field(default_factory=lambda: Path(CFG.defaults.out_dir))
    submit: str = CFG.defaults.submit
    job_name_prefix: str = CFG.defaults.job_name_prefix
    script_args: tuple[str, ...] = ()
    dry_run: bool = False
    keep: bool = False
