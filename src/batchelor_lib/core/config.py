# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for batchelor.

This module defines dataclasses representing the configurable aspects of batchelor:
default values of command-line options, naming of the generated job scripts,
environment variables, date formats, and exit codes.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class BatchDefaults:
    """Default values of batchelor command-line options."""

    # How the input is passed to the worker script.
    input_flag: str = "--input"
    # Number of job scripts to create.
    batch: int = 1
    # Directory where generated job scripts are stored.
    out_dir: str = ".batchelor"
    # Command used to submit the generated job scripts.
    submit: str = "sbatch"
    # Prefix of the generated job names.
    job_name_prefix: str = "batch"


@dataclass
class ScriptSettings:
    """Settings for the generated job scripts."""

    # Suffix of the generated job scripts.
    suffix: str = ".batch.sh"
    # Number of digits used for the job index in the job name.
    index_width: int = 4
    # Interpreter used to run the worker script.
    interpreter: str = "bash"
    # Permission bits of the generated job scripts.
    mode: int = 0o755


@dataclass
class EnvironmentVariables:
    """Environment variable names used by batchelor."""

    # Enables batchelor debug mode.
    debug_mode: str = "BATCHELOR_DEBUG"
    # Explicit path to the batchelor config file.
    config_file: str = "BATCHELOR_CONFIG"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by batchelor.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of batchelor.
    default: int = 1
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class Config:
    """Main configuration for batchelor."""

    defaults: BatchDefaults = field(default_factory=BatchDefaults)
    scripts: ScriptSettings = field(default_factory=ScriptSettings)
    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)

    # Name of the batchelor binary.
    binary_name: str = "batchelor"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read batchelor config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            # 1. Explicit environment variable (highest priority)
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config_file))
            else None,
            # 2. Current working directory
            Path.cwd() / "batchelor_config.toml",
            # 3. XDG config home
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "batchelor"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Nested tables are converted into the matching nested dataclasses.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for batchelor.
CFG = Config.load()
