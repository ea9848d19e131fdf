# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Generation of job scripts.

This module expands input patterns into inputs, splits the inputs into
balanced groups, and writes the job script of each group.
"""

from .emitter import ScriptEmitter
from .expander import expand_inputs, match_glob, sort_inputs
from .partitioner import split_evenly

__all__ = [
    "ScriptEmitter",
    "expand_inputs",
    "match_glob",
    "sort_inputs",
    "split_evenly",
]
