"""
Balanced partitioning of a sorted file list into buckets.
"""

from pathlib import Path
from typing import Sequence

from ..errors import InvalidArgument


def partition(files: Sequence[Path], n: int) -> list[list[Path]]:
    """
    Split files into n contiguous buckets as evenly as possible.

    The first len(files) % n buckets get one extra file. Input order is kept
    within and across buckets, so an alphabetically sorted input gives
    alphabetically ordered folders. With fewer files than buckets the
    trailing buckets are empty.

    Args:
        files: Files to distribute, already sorted.
        n: Number of buckets, at least 1.

    Returns:
        List of n buckets.

    Raises:
        InvalidArgument: If n is less than 1.
    """
    if n < 1:
        raise InvalidArgument("subfolders must be greater than zero")

    base, rem = divmod(len(files), n)

    buckets: list[list[Path]] = []
    start = 0
    for i in range(n):
        take = base + (1 if i < rem else 0)
        buckets.append(list(files[start:start + take]))
        start += take

    return buckets
