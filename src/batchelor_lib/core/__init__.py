# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for batchelor.

This module collects the foundational utilities used across the batchelor
codebase: configuration, error types, structured logging, shell quoting,
command-line formatting, and helpers for naming and cleaning up job scripts.
"""
