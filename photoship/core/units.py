"""File size unit conversion."""

from collections.abc import Iterable

KB_PER_MB = 1000


def convert_filesizes(sizes: Iterable[float]) -> list[float]:
    """Convert file sizes from KB to MB (1 MB = 1000 KB).

    Returns a new list in input order; `sizes` is left untouched.

    e.g. [1400, 500, 2100] -> [1.4, 0.5, 2.1]
    """
    return [size / KB_PER_MB for size in sizes]
