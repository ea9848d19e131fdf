# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Submission of job scripts.

The `Submitter` runs the user-provided submission command with the path
to a job script appended and reports failures as batchelor errors.
"""

from .submitter import Submitter

__all__ = ["Submitter"]
