# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Value types describing a batchelor run.

This module currently provides the classification of input-passing conventions.
"""

from .convention import ConventionKind, InputConvention

__all__ = ["ConventionKind", "InputConvention"]
