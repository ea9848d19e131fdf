# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Orchestration of a batchelor run.

`BatchSettings` holds the settings of a run and `Batcher` drives the
expansion, splitting, writing and submission of job scripts.
"""

from .batcher import Batcher
from .settings import BatchSettings

__all__ = ["BatchSettings", "Batcher"]
