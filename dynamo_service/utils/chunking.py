"""Helpers for splitting key lists into request-sized batches."""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> List[List[T]]:
    """Split a sequence into consecutive lists of at most ``size`` elements.

    Args:
        items: Sequence to split, order is preserved
        size: Maximum length of each chunk

    Returns:
        List of chunks, empty if ``items`` is empty

    Raises:
        ValueError: If size is not positive
    """
    if size <= 0:
        raise ValueError(f"Chunk size must be positive, got {size}")
    return [list(items[i : i + size]) for i in range(0, len(items), size)]
