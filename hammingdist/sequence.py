from __future__ import generator_stop

from typing import Iterator, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_CHUNKSIZE = 2**16


def batch(seq: Sequence[T], size: int) -> Iterator[Sequence[T]]:
    """Yields consecutive slices of length `size` of a sequence. The last one might be shorter.
    batch([1, 2, 3], 2) -> [1, 2], [3]
    batch([1, 2, 3, 4, 5], 3) -> [1, 2, 3], [4, 5]
    """

    if size < 1:
        raise ValueError("size must be larger than 0")

    seqlen = len(seq)

    for i in range(0, (seqlen + size - 1) // size):
        yield seq[i * size : (i + 1) * size]


def num_batches(seqlen: int, size: int) -> int:

    """Number of slices `batch()` yields for a sequence of length `seqlen`."""

    if size < 1:
        raise ValueError("size must be larger than 0")

    return (seqlen + size - 1) // size
