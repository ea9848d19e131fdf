# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def split_evenly(items: Sequence[T], groups: int) -> list[Sequence[T]]:
    """
    Split items into contiguous groups of near-equal size.

    The first `len(items) % groups` groups contain one item more than the rest.
    Concatenating the groups reproduces the original sequence.

    Args:
        items (Sequence[T]): The items to split.
        groups (int): The number of groups. Must be at least 1.

    Returns:
        list[Sequence[T]]: Exactly `groups` slices of `items`.

    Raises:
        ValueError: If `groups` is lower than 1.
    """
    if groups < 1:
        raise ValueError(f"Number of groups must be at least 1, not {groups}.")

    base, remainder = divmod(len(items), groups)
    slices = []
    start = 0
    for i in range(groups):
        end = start + base + (1 if i < remainder else 0)
        slices.append(items[start:end])
        start = end

    return slices
