# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the batchelor command-line tool.

batchelor expands glob patterns into a sorted list of inputs, splits the inputs
into groups, writes one job script per group invoking a worker script once per
input, and submits the job scripts using a batch system submission command
(e.g., `sbatch`) or a local shell.
"""

from .batchelor import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "batch",
    "core",
    "properties",
    "script",
    "submit",
]
